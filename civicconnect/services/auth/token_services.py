# Standard library imports
from datetime import UTC, datetime, timedelta
from typing import Any, Literal
from uuid import UUID, uuid4

# Third-party imports
from jose import JWTError, jwt

# Local application imports
from civicconnect.settings import settings

TokenType = Literal["access", "refresh"]


def _create_token(
    user_id: UUID,
    email: str,
    token_type: TokenType,
    expires_delta: timedelta,
) -> tuple[str, str]:
    now = datetime.now(UTC)
    jti = str(uuid4())

    to_encode = {
        "sub": str(user_id),  # Standard JWT claim for subject
        "email": email,
        "exp": now + expires_delta,
        "iat": now,
        "token_type": token_type,  # nosec B106
        "jti": jti,  # JWT ID, ties the token to its session row
    }

    token = jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
    return token, jti


def create_access_token(user_id: UUID, email: str, expires_delta: timedelta | None = None) -> tuple[str, str]:
    """
    Create a JWT access token with a short expiration time.

    Returns:
        Tuple of (token, jti)
    """
    return _create_token(
        user_id,
        email,
        "access",
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    )


def create_refresh_token(user_id: UUID, email: str, expires_delta: timedelta | None = None) -> tuple[str, str]:
    """
    Create a JWT refresh token with a longer expiration time.

    Returns:
        Tuple of (token, jti)
    """
    return _create_token(
        user_id,
        email,
        "refresh",
        expires_delta or timedelta(minutes=settings.REFRESH_TOKEN_EXPIRE_MINUTES),
    )


def decode_token(token: str, expected_type: TokenType) -> dict[str, Any] | None:
    """Return the claims of a valid, unexpired token of the expected type, else None."""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        return None

    if payload.get("token_type") != expected_type or not payload.get("sub") or not payload.get("jti"):
        return None
    return payload
