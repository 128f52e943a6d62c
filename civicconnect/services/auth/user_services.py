# Third-party imports
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from civicconnect.core.errors import RemoteFailure
from civicconnect.core.monitoring.logging import get_contextual_logger
from civicconnect.db_selectors.auth import get_user_by_email, select_role_by_user_id
from civicconnect.models.auth.profile import Role
from civicconnect.models.auth.user import User
from civicconnect.schemas.auth.viewer_schemas import Viewer
from civicconnect.utils.password_utils import verify_password


async def authenticate_user(db: AsyncSession, email: str, password: str) -> User | None:
    """
    Authenticate a user by retrieving the user from the database by email and verifying the password.

    Returns the user if authentication is successful; otherwise, returns None.
    """
    user = await get_user_by_email(db, email)
    if not user:
        return None
    if not verify_password(password, user.hashed_password):
        return None
    return user


def parse_role(raw: str | None) -> Role:
    """Map a stored role string onto ``Role``; anything absent or unknown becomes citizen."""
    if raw is None:
        return Role.CITIZEN
    try:
        return Role(raw)
    except ValueError:
        return Role.CITIZEN


async def resolve_role(db: AsyncSession, user: User) -> Role:
    """
    Look up the user's role in the profile store.

    A missing profile, an unrecognised role or a failed lookup all resolve to
    citizen, the least privileged role.
    """
    logger = get_contextual_logger(__name__, user=user.id)
    try:
        raw = await select_role_by_user_id(db, user.id)
    except RemoteFailure:
        logger.warning("Role lookup failed, falling back to citizen")
        return Role.CITIZEN

    role = parse_role(raw)
    if raw is not None and raw != role.value:
        logger.warning(f"Profile role {raw!r} not recognised, using citizen")
    return role


async def build_viewer(db: AsyncSession, user: User | None) -> Viewer:
    if user is None:
        return Viewer.anonymous()
    return Viewer(user_id=user.id, role=await resolve_role(db, user))
