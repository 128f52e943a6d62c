# Third-party imports
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from civicconnect.core.errors import AuthorizationDenied, RemoteFailure, ValidationFailure
from civicconnect.core.monitoring.logging import get_contextual_logger
from civicconnect.db_selectors.auth import insert_user_with_profile, user_exists_by_email
from civicconnect.models.auth.profile import Role
from civicconnect.models.auth.user import User
from civicconnect.schemas.auth.auth_schemas import AuthoritySignupRequest, SignupRequest
from civicconnect.services.auth.authority_code_services import AuthorityCodeValidator
from civicconnect.settings import settings
from civicconnect.utils.password_utils import get_password_hash

INVALID_CODE_MESSAGE = "invalid or expired code"


def validate_signup_form(form: SignupRequest) -> None:
    """
    Raises:
        ValidationFailure: with the message the sign-up form shows inline.
    """
    if not form.display_name.strip():
        raise ValidationFailure("Display name is required")
    if form.password != form.confirm_password:
        raise ValidationFailure("Passwords do not match")
    if len(form.password) < settings.MIN_PASSWORD_LENGTH:
        raise ValidationFailure(f"Password must be at least {settings.MIN_PASSWORD_LENGTH} characters")


async def _create_account(db: AsyncSession, form: SignupRequest, role: Role) -> User:
    if await user_exists_by_email(db, form.email):
        raise ValidationFailure("User already registered")

    user = await insert_user_with_profile(
        db,
        email=form.email,
        hashed_password=get_password_hash(form.password),
        display_name=form.display_name.strip(),
        role=role.value,
    )
    get_contextual_logger(__name__, user=user.id, role=role.value).info("Account created")
    return user


async def register_citizen(db: AsyncSession, form: SignupRequest) -> User:
    validate_signup_form(form)
    return await _create_account(db, form, Role.CITIZEN)


async def check_authority_code(validator: AuthorityCodeValidator, code: str, email: str) -> None:
    """
    Ask the external check whether the code is valid for this email.

    Raises:
        AuthorizationDenied: if the check says no, or cannot be completed.
    """
    logger = get_contextual_logger(__name__, email=email)
    try:
        is_valid = await validator.validate(code, email)
    except RemoteFailure as e:
        logger.warning(f"Authority code check errored, denying: {e}")
        raise AuthorizationDenied(INVALID_CODE_MESSAGE) from e

    if not is_valid:
        logger.warning("Authority code rejected")
        raise AuthorizationDenied(INVALID_CODE_MESSAGE)


async def register_authority(
    db: AsyncSession,
    form: AuthoritySignupRequest,
    validator: AuthorityCodeValidator,
) -> User:
    """
    Create an authority account. Nothing is written unless the access code
    passes the external check first.

    Raises:
        ValidationFailure: for form errors, including a missing access code.
        AuthorizationDenied: if the access code is invalid or expired.
    """
    validate_signup_form(form)
    if not form.access_code.strip():
        raise ValidationFailure("Authority access code is required")

    await check_authority_code(validator, form.access_code.strip(), form.email)
    return await _create_account(db, form, Role.AUTHORITY)
