"""
FastAPI dependencies for the application.
"""

from typing import Optional

from fastapi import Depends, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.jwt import decode_access_token
from app.db.session import get_db
from app.errors import raise_app_error
from app.models.profile import Profile
from app.repositories.profile_repository import ProfileRepository

# Security scheme for JWT bearer tokens
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> Profile:
    """
    Get the current authenticated user from JWT token.
    
    Validates the JWT token and loads the caller's profile.
    
    Raises:
        401: If token is missing/invalid or profile not found
        500: If the profile lookup fails
    """
    if credentials is None:
        raise_app_error(status.HTTP_401_UNAUTHORIZED, "UNAUTHENTICATED", "Not authenticated")

    payload = decode_access_token(credentials.credentials)
    if not payload:
        raise_app_error(status.HTTP_401_UNAUTHORIZED, "UNAUTHENTICATED", "Invalid authentication credentials")
    
    user_id = payload.get("user_id")
    if not user_id:
        raise_app_error(status.HTTP_401_UNAUTHORIZED, "UNAUTHENTICATED", "Invalid token payload")
    
    try:
        profile = await ProfileRepository(db).get_by_id(str(user_id))
    except SQLAlchemyError as exc:
        raise_app_error(status.HTTP_500_INTERNAL_SERVER_ERROR, "DATASTORE_ERROR", str(exc))
    if not profile:
        raise_app_error(status.HTTP_401_UNAUTHORIZED, "UNAUTHENTICATED", "User not found")
    
    return profile


async def get_active_user(user: Profile = Depends(get_current_user)) -> Profile:
    """
    Require an active profile.
    
    Raises:
        403: If the profile has been disabled
    """
    if not user.is_active:
        raise_app_error(status.HTTP_403_FORBIDDEN, "FORBIDDEN", "Account disabled")
    return user
