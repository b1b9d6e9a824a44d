"""
Profile page with the API-key panel
"""
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from codemurf.core.auth import get_session_token
from codemurf.core.errors import CodemurfError
from codemurf.core.logging_config import LoggingConfig
from codemurf.core.templates import templates
from codemurf.models.profile import ApiKeyKind, UserRole
from codemurf.services.profile_service import ProfileService, get_profile_service

logger = LoggingConfig.get_logger(__name__)

router = APIRouter(tags=["profile-pages"])


@router.get("/profile", response_class=HTMLResponse)
async def profile_page(
    request: Request,
    token: Optional[str] = Depends(get_session_token),
    service: ProfileService = Depends(get_profile_service),
):
    """
    Profile page. Keys are shown masked; the refresh and save buttons
    call the /api/profile endpoints.
    """
    if not token:
        return templates.TemplateResponse(
            "auth_required.html",
            {"request": request, "next_path": "/profile"},
            status_code=401,
        )

    profile = None
    error = None
    try:
        profile = await service.load_profile(token)
    except CodemurfError as e:
        if e.status_code == 401:
            return templates.TemplateResponse(
                "auth_required.html",
                {"request": request, "next_path": "/profile"},
                status_code=401,
            )
        logger.warning(f"Failed to load profile: {e.message}")
        error = e.message

    return templates.TemplateResponse(
        "profile.html",
        {
            "request": request,
            "profile": profile,
            "key_kinds": list(ApiKeyKind),
            "roles": list(UserRole),
            "error": error,
        }
    )
