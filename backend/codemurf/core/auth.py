"""
Session token extraction

The site does not validate tokens itself; it forwards them to the backend,
which rejects invalid ones.
"""
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from codemurf.core.config import get_settings

# HTTP Bearer security scheme
security = HTTPBearer(auto_error=False)


async def get_session_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[str]:
    """
    Get the session token from the Authorization header or the session cookie

    Returns:
        Token string, or None when the request is anonymous
    """
    if credentials and credentials.credentials:
        return credentials.credentials
    token = request.cookies.get(get_settings().auth_cookie_name)
    return token or None


async def require_session_token(token: Optional[str] = Depends(get_session_token)) -> str:
    """Like get_session_token, but anonymous requests get 401"""
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return token
