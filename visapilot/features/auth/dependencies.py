from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from visapilot.config import settings
from visapilot.core.security import decode_token
from visapilot.features.auth.models import User
from visapilot.features.auth.service import AuthService
from visapilot.shared.exceptions import CredentialsException, ForbiddenException


# Bearer header is optional; the session cookie is the fallback
security = HTTPBearer(auto_error=False)


def _session_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials],
) -> Optional[str]:
    if credentials is not None:
        return credentials.credentials
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> User:
    """
    Dependency to get the user behind the current session.
    
    Args:
        request: Incoming request (for the session cookie)
        credentials: Optional HTTP Bearer credentials
        
    Returns:
        User: Current authenticated user
        
    Raises:
        CredentialsException: If there is no valid session
    """
    token = _session_token(request, credentials)
    if not token:
        raise CredentialsException("Unauthorized")
    
    payload = decode_token(token)
    if payload is None:
        raise CredentialsException("Invalid or expired session")
    
    user_id: Optional[str] = payload.get("sub")
    if user_id is None:
        raise CredentialsException("Invalid or expired session")
    
    user = await AuthService.get_user_by_id(user_id)
    if user is None:
        raise CredentialsException("User not found")
    
    if not user.is_active:
        raise CredentialsException("Inactive user")
    
    return user


def require_role(*roles: str):
    """Build a dependency that only admits users holding one of ``roles``."""
    
    async def checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in roles:
            raise ForbiddenException(f"Requires role: {', '.join(roles)}")
        return current_user
    
    return checker
