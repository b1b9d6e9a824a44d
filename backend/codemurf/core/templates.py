"""
Template rendering utilities
"""
from pathlib import Path

from fastapi.templating import Jinja2Templates

from codemurf.core.config import PROJECT_ROOT, get_settings
from codemurf.data.reference import format_price
from codemurf.models.profile import mask_key

FRONTEND_DIR = PROJECT_ROOT / "frontend"
STATIC_DIR = FRONTEND_DIR / "static"


def _templates_dir() -> Path:
    configured = get_settings().templates_dir
    return Path(configured) if configured else FRONTEND_DIR / "templates"


TEMPLATES_DIR = _templates_dir()

DIFFICULTY_CLASSES = {"Easy": "badge-green", "Medium": "badge-yellow", "Tough": "badge-red"}


def difficulty_class(level: str) -> str:
    return DIFFICULTY_CLASSES.get(level or "", "badge-gray")


templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["format_price"] = format_price
templates.env.filters["difficulty_class"] = difficulty_class
templates.env.filters["mask_key"] = mask_key
templates.env.globals["app_name"] = get_settings().app_name
templates.env.globals["sign_in_url"] = get_settings().sign_in_url

