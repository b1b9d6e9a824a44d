"""
Development server entry point

    python backend/main.py [--host HOST] [--port PORT]
"""
import sys
from pathlib import Path

# Allow running from a checkout without installing the package
_backend_root = Path(__file__).resolve().parent
if str(_backend_root) not in sys.path:
    sys.path.insert(0, str(_backend_root))

from codemurf.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main(["serve", *sys.argv[1:]]))
