# Standard library imports
from datetime import UTC, datetime, timedelta
from uuid import UUID

# Third-party imports
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from civicconnect.core.errors import AuthenticationRequired
from civicconnect.core.monitoring.logging import get_contextual_logger
from civicconnect.db_selectors._errors import store_call
from civicconnect.db_selectors.auth import get_session_by_refresh_jti, get_user_by_id
from civicconnect.models.auth.session import Session
from civicconnect.models.auth.user import User
from civicconnect.schemas.auth.token_schemas import AccessTokenResponse
from civicconnect.services.auth.token_services import create_access_token, create_refresh_token, decode_token
from civicconnect.settings import settings


def _token_response(user_id: UUID, access_token: str, refresh_token: str) -> AccessTokenResponse:
    return AccessTokenResponse(
        access_token=access_token,
        refresh_token=refresh_token,
        expires_in=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        user_id=str(user_id),
    )


async def create_session(
    db: AsyncSession,
    user: User,
    user_agent: str | None = None,
    ip_address: str | None = None,
) -> AccessTokenResponse:
    """Sign the user in: issue a token pair and record the session it belongs to."""
    access_token, access_jti = create_access_token(user.id, user.email)
    refresh_token, refresh_jti = create_refresh_token(user.id, user.email)

    async with store_call(db, "create_session"):
        session = Session(
            user_id=user.id,
            access_token_jti=access_jti,
            refresh_token_jti=refresh_jti,
            user_agent=user_agent,
            ip_address=ip_address,
            expires_at=datetime.now(UTC) + timedelta(minutes=settings.REFRESH_TOKEN_EXPIRE_MINUTES),
            is_active=True,
        )
        db.add(session)
        user.last_login = datetime.now(UTC)
        await db.commit()

    get_contextual_logger(__name__, user=user.id).info("Session created")
    return _token_response(user.id, access_token, refresh_token)


async def refresh_session(db: AsyncSession, refresh_token: str) -> AccessTokenResponse:
    """
    Rotate the token pair of a live session. The old pair stops working.

    Raises:
        AuthenticationRequired: if the refresh token or its session is no longer valid.
    """
    payload = decode_token(refresh_token, "refresh")
    if payload is None:
        raise AuthenticationRequired("Invalid or expired refresh token")

    session = await get_session_by_refresh_jti(db, payload["jti"])
    if session is None or not session.is_valid:
        raise AuthenticationRequired("Invalid or expired refresh token")

    user = await get_user_by_id(db, session.user_id)
    if user is None:
        raise AuthenticationRequired("Invalid or expired refresh token")

    access_token, access_jti = create_access_token(user.id, user.email)
    new_refresh_token, refresh_jti = create_refresh_token(user.id, user.email)

    async with store_call(db, "refresh_session"):
        session.access_token_jti = access_jti
        session.refresh_token_jti = refresh_jti
        session.expires_at = datetime.now(UTC) + timedelta(minutes=settings.REFRESH_TOKEN_EXPIRE_MINUTES)
        await db.commit()

    return _token_response(user.id, access_token, new_refresh_token)


async def invalidate_session(db: AsyncSession, session: Session, reason: str = "manual_logout") -> None:
    """Sign out: the session's tokens are rejected from now on."""
    async with store_call(db, "invalidate_session"):
        session.invalidate(reason)
        await db.commit()

    get_contextual_logger(__name__, user=session.user_id).info(f"Session invalidated ({reason})")
