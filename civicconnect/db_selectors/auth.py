# Standard library imports
from uuid import UUID

# Third-party imports
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from civicconnect.core.errors import ValidationFailure
from civicconnect.db_selectors._errors import store_call
from civicconnect.models.auth.profile import Profile
from civicconnect.models.auth.session import Session
from civicconnect.models.auth.user import User


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    async with store_call(db, "get_user_by_email"):
        result = await db.execute(select(User).where(User.email == email.lower()))
        return result.scalar_one_or_none()


async def get_user_by_id(db: AsyncSession, user_id: UUID) -> User | None:
    async with store_call(db, "get_user_by_id"):
        result = await db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()


async def user_exists_by_email(db: AsyncSession, email: str) -> bool:
    return await get_user_by_email(db, email) is not None


async def select_role_by_user_id(db: AsyncSession, user_id: UUID) -> str | None:
    """Role string from the profile store, or None when the identity has no profile."""
    async with store_call(db, "select_role_by_user_id"):
        result = await db.execute(select(Profile.role).where(Profile.user_id == user_id))
        return result.scalar_one_or_none()


async def insert_user_with_profile(
    db: AsyncSession,
    email: str,
    hashed_password: str,
    display_name: str,
    role: str,
) -> User:
    """
    Create an identity and its profile in one transaction.

    Raises:
        ValidationFailure: if the email is already taken, including by a
            sign-up that committed after the caller checked.
    """
    async with store_call(db, "insert_user_with_profile"):
        user = User(email=email.lower(), hashed_password=hashed_password, display_name=display_name)
        db.add(user)
        try:
            await db.flush()
        except IntegrityError as e:
            await db.rollback()
            raise ValidationFailure("User already registered") from e
        db.add(Profile(user_id=user.id, role=role, display_name=display_name))
        await db.commit()
        await db.refresh(user)
        return user


async def get_session_by_access_jti(db: AsyncSession, jti: str) -> Session | None:
    async with store_call(db, "get_session_by_access_jti"):
        result = await db.execute(select(Session).where(Session.access_token_jti == jti))
        return result.scalar_one_or_none()


async def get_session_by_refresh_jti(db: AsyncSession, jti: str) -> Session | None:
    async with store_call(db, "get_session_by_refresh_jti"):
        result = await db.execute(select(Session).where(Session.refresh_token_jti == jti))
        return result.scalar_one_or_none()
