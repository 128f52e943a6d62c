# Standard library imports
from uuid import UUID

# Third-party imports
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from civicconnect.core.db import get_async_session
from civicconnect.core.errors import AuthenticationRequired
from civicconnect.db_selectors.auth import get_session_by_access_jti, get_user_by_id
from civicconnect.models.auth.session import Session
from civicconnect.models.auth.user import User
from civicconnect.schemas.auth.viewer_schemas import Viewer
from civicconnect.services.auth.token_services import decode_token
from civicconnect.services.auth.user_services import build_viewer
from civicconnect.settings import settings

# OAuth2PasswordBearer for token extraction
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_V1_STR}/auth/token", auto_error=False)


async def get_current_session_optional(
    token: str | None = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_async_session),
) -> Session | None:
    """The live session behind the bearer token, or None for missing, invalid or signed-out tokens."""
    if not token:
        return None

    payload = decode_token(token, "access")
    if payload is None:
        return None

    session = await get_session_by_access_jti(db, payload["jti"])
    if session is None or not session.is_valid or str(session.user_id) != payload["sub"]:
        return None
    return session


async def get_current_session(session: Session | None = Depends(get_current_session_optional)) -> Session:
    if session is None:
        raise AuthenticationRequired()
    return session


async def get_current_user_optional(
    session: Session | None = Depends(get_current_session_optional),
    db: AsyncSession = Depends(get_async_session),
) -> User | None:
    """Get current user if a valid token is provided, otherwise return None"""
    if session is None:
        return None
    user_id: UUID = session.user_id
    return await get_user_by_id(db, user_id)


async def get_current_user(user: User | None = Depends(get_current_user_optional)) -> User:
    """Get current user from JWT token"""
    if user is None:
        raise AuthenticationRequired()
    return user


async def get_viewer(
    user: User | None = Depends(get_current_user_optional),
    db: AsyncSession = Depends(get_async_session),
) -> Viewer:
    """The acting viewer for this request; anonymous when no valid token is sent."""
    return await build_viewer(db, user)
