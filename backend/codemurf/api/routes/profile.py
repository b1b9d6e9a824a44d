"""
JSON API for the signed-in user's profile and API keys
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import AliasChoices, BaseModel, Field

from codemurf.api.dependencies import http_exception_for
from codemurf.core.auth import require_session_token
from codemurf.core.errors import CodemurfError
from codemurf.core.logging_config import LoggingConfig
from codemurf.models.profile import ApiKeyKind, UserRole, mask_key
from codemurf.services.profile_service import ProfileService, get_profile_service

logger = LoggingConfig.get_logger(__name__)

router = APIRouter(prefix="/api/profile", tags=["profile"])


class GlmKeyRequest(BaseModel):
    """Body of the GLM key form"""
    api_key: str = Field("", validation_alias=AliasChoices("api_key", "apiKey"))


class ProfileUpdateRequest(BaseModel):
    """Editable profile fields; omitted fields are left unchanged"""
    role: Optional[UserRole] = None
    name: Optional[str] = Field(None, min_length=1, max_length=100)


def _key_response(kind: ApiKeyKind, key) -> dict:
    return {"kind": kind.value, "api_key": key, "masked": mask_key(key)}


@router.get("")
async def get_profile(
    token: str = Depends(require_session_token),
    service: ProfileService = Depends(get_profile_service),
):
    """Current user with API keys masked"""
    try:
        profile = await service.load_profile(token)
        return profile.to_public_dict()
    except HTTPException:
        raise
    except CodemurfError as e:
        raise http_exception_for(e)
    except Exception as e:
        logger.error(f"Error loading profile: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to load profile: {str(e)}")


@router.put("")
async def update_profile(
    request: ProfileUpdateRequest,
    token: str = Depends(require_session_token),
    service: ProfileService = Depends(get_profile_service),
):
    """Change the user's role or display name"""
    try:
        profile = await service.update_profile(token, request.model_dump(mode="json", exclude_none=True))
        return profile.to_public_dict()
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except HTTPException:
        raise
    except CodemurfError as e:
        raise http_exception_for(e)
    except Exception as e:
        logger.error(f"Error updating profile: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to update profile: {str(e)}")


@router.get("/api-keys/managed")
async def get_managed_api_key(
    token: str = Depends(require_session_token),
    service: ProfileService = Depends(get_profile_service),
):
    try:
        key = await service.get_managed_api_key(token)
        return _key_response(ApiKeyKind.MANAGED, key)
    except HTTPException:
        raise
    except CodemurfError as e:
        raise http_exception_for(e)
    except Exception as e:
        logger.error(f"Error loading managed API key: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to load API key: {str(e)}")


@router.post("/api-keys/managed/refresh")
async def refresh_managed_api_key(
    token: str = Depends(require_session_token),
    service: ProfileService = Depends(get_profile_service),
):
    """Rotate the managed key; the new key is returned once"""
    try:
        key = await service.refresh_managed_api_key(token)
        return _key_response(ApiKeyKind.MANAGED, key)
    except HTTPException:
        raise
    except CodemurfError as e:
        raise http_exception_for(e)
    except Exception as e:
        logger.error(f"Error refreshing managed API key: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to refresh API key: {str(e)}")


@router.post("/api-keys/openrouter/refresh")
async def refresh_openrouter_api_key(
    token: str = Depends(require_session_token),
    service: ProfileService = Depends(get_profile_service),
):
    try:
        key = await service.refresh_openrouter_api_key(token)
        return _key_response(ApiKeyKind.OPENROUTER, key)
    except HTTPException:
        raise
    except CodemurfError as e:
        raise http_exception_for(e)
    except Exception as e:
        logger.error(f"Error refreshing OpenRouter API key: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to refresh API key: {str(e)}")


@router.post("/api-keys/glm")
async def save_glm_api_key(
    request: GlmKeyRequest,
    token: str = Depends(require_session_token),
    service: ProfileService = Depends(get_profile_service),
):
    """Store the user's own GLM key"""
    try:
        key = await service.save_glm_api_key(token, request.api_key)
        return _key_response(ApiKeyKind.GLM, key)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except HTTPException:
        raise
    except CodemurfError as e:
        raise http_exception_for(e)
    except Exception as e:
        logger.error(f"Error saving GLM API key: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to save API key: {str(e)}")
