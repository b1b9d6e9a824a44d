"""CLI for running the site and checking the backend connection."""
import argparse
import asyncio
import sys
from typing import List, Optional

from codemurf.core.config import get_settings


def cmd_serve(args):
    """Run the web server with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "codemurf.main:app",
        host=args.host or settings.api_host,
        port=args.port or settings.api_port,
        reload=args.reload if args.reload is not None else settings.app_env == "development",
        access_log=settings.log_uvicorn_access,
    )
    return 0


def cmd_check_backend(args):
    """Call the backend's /health endpoint and report the result."""
    from codemurf.core.backend_client import BackendClient
    from codemurf.core.errors import CodemurfError

    async def check():
        client = BackendClient(base_url=args.url)
        try:
            await client.get("/health")
            return None
        except CodemurfError as e:
            return e.message
        finally:
            await client.close()

    settings = get_settings()
    error = asyncio.run(check())
    url = args.url or settings.backend_api_url
    if error:
        print(f"Backend at {url} is not healthy: {error}")
        return 1
    print(f"Backend at {url} is healthy")
    return 0


def build_parser():
    p = argparse.ArgumentParser(prog="codemurf-web")
    sub = p.add_subparsers(dest="cmd")

    serve = sub.add_parser("serve", help="Run the web server")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)
    serve.add_argument("--reload", action=argparse.BooleanOptionalAction, default=None)
    serve.set_defaults(func=cmd_serve)

    check = sub.add_parser("check-backend", help="Check that the backend API answers")
    check.add_argument("--url", default=None, help="Backend base URL (default from settings)")
    check.set_defaults(func=cmd_check_backend)

    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not getattr(args, "func", None):
        parser.print_help()
        return 1
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
