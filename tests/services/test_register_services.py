"""Citizen and authority registration, sign-in and role resolution."""

# Third-party imports
import pytest
from sqlalchemy import func, select

# Local application imports
from civicconnect.core.errors import (
    AuthenticationRequired,
    AuthorizationDenied,
    RemoteFailure,
    ValidationFailure,
)
from civicconnect.db_selectors.auth import get_session_by_refresh_jti, get_user_by_email, select_role_by_user_id
from civicconnect.models.auth.profile import Role
from civicconnect.models.auth.user import User
from civicconnect.schemas.auth import AuthoritySignupRequest, SignupRequest
from civicconnect.services.auth import (
    authenticate_user,
    build_viewer,
    create_session,
    invalidate_session,
    refresh_session,
    register_authority,
    register_citizen,
    resolve_role,
)
from civicconnect.services.auth.token_services import decode_token


def _form(**overrides) -> SignupRequest:
    fields = {
        "email": "citizen@example.com",
        "password": "secret123",
        "confirm_password": "secret123",
        "display_name": "Jane Citizen",
    }
    fields.update(overrides)
    return SignupRequest(**fields)


def _authority_form(**overrides) -> AuthoritySignupRequest:
    fields = {
        "email": "officer@example.com",
        "password": "secret123",
        "confirm_password": "secret123",
        "display_name": "Officer Smith",
        "access_code": "CITY-2024",
    }
    fields.update(overrides)
    return AuthoritySignupRequest(**fields)


async def _user_count(db) -> int:
    return (await db.execute(select(func.count()).select_from(User))).scalar_one()


class TestRegisterCitizen:
    @pytest.mark.asyncio
    async def test_creates_identity_with_citizen_profile(self, db) -> None:
        user = await register_citizen(db, _form(email="Citizen@Example.com"))

        assert user.email == "citizen@example.com"
        assert user.display_name == "Jane Citizen"
        assert await select_role_by_user_id(db, user.id) == "citizen"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("overrides", "message"),
        [
            ({"display_name": "   "}, "Display name is required"),
            ({"confirm_password": "secret124"}, "Passwords do not match"),
            ({"password": "abc", "confirm_password": "abc"}, "Password must be at least 6 characters"),
        ],
    )
    async def test_form_errors(self, db, overrides, message) -> None:
        with pytest.raises(ValidationFailure) as exc_info:
            await register_citizen(db, _form(**overrides))

        assert exc_info.value.message == message
        assert await _user_count(db) == 0

    @pytest.mark.asyncio
    async def test_duplicate_email(self, db) -> None:
        await register_citizen(db, _form())

        with pytest.raises(ValidationFailure) as exc_info:
            await register_citizen(db, _form(display_name="Someone Else"))
        assert exc_info.value.message == "User already registered"


class TestRegisterAuthority:
    @pytest.mark.asyncio
    async def test_valid_code_creates_authority(self, db, authority_codes) -> None:
        user = await register_authority(db, _authority_form(), authority_codes)

        assert await select_role_by_user_id(db, user.id) == "authority"
        assert authority_codes.calls == [("CITY-2024", "officer@example.com")]

    @pytest.mark.asyncio
    async def test_bad_code_creates_nothing(self, db, authority_codes) -> None:
        with pytest.raises(AuthorizationDenied) as exc_info:
            await register_authority(db, _authority_form(access_code="BAD"), authority_codes)

        assert exc_info.value.message == "invalid or expired code"
        assert await get_user_by_email(db, "officer@example.com") is None

    @pytest.mark.asyncio
    async def test_failed_check_is_a_denial(self, db, authority_codes) -> None:
        authority_codes.error = RemoteFailure("rpc down")

        with pytest.raises(AuthorizationDenied) as exc_info:
            await register_authority(db, _authority_form(), authority_codes)

        assert exc_info.value.message == "invalid or expired code"
        assert await _user_count(db) == 0

    @pytest.mark.asyncio
    async def test_missing_code_is_not_sent(self, db, authority_codes) -> None:
        with pytest.raises(ValidationFailure) as exc_info:
            await register_authority(db, _authority_form(access_code="  "), authority_codes)

        assert exc_info.value.message == "Authority access code is required"
        assert authority_codes.calls == []

    @pytest.mark.asyncio
    async def test_form_is_checked_before_the_code(self, db, authority_codes) -> None:
        with pytest.raises(ValidationFailure):
            await register_authority(db, _authority_form(confirm_password="nope"), authority_codes)
        assert authority_codes.calls == []


class TestRoleResolution:
    @pytest.mark.asyncio
    async def test_stored_role_is_used(self, db, make_account) -> None:
        user = await make_account("admin@example.com", role="admin")
        assert await resolve_role(db, user) is Role.ADMIN

    @pytest.mark.asyncio
    async def test_unknown_role_is_citizen(self, db, make_account) -> None:
        user = await make_account("odd@example.com", role="superuser")
        viewer = await build_viewer(db, user)
        assert viewer.role is Role.CITIZEN

    @pytest.mark.asyncio
    async def test_no_user_is_anonymous(self, db) -> None:
        viewer = await build_viewer(db, None)
        assert viewer.is_anonymous


class TestSessions:
    @pytest.mark.asyncio
    async def test_authenticate_user(self, db, make_account) -> None:
        await make_account("citizen@example.com")

        assert await authenticate_user(db, "citizen@example.com", "secret123") is not None
        assert await authenticate_user(db, "citizen@example.com", "wrong-password") is None
        assert await authenticate_user(db, "nobody@example.com", "secret123") is None

    @pytest.mark.asyncio
    async def test_refresh_rotates_tokens(self, db, make_account) -> None:
        await make_account("citizen@example.com")
        user = await get_user_by_email(db, "citizen@example.com")
        tokens = await create_session(db, user)

        rotated = await refresh_session(db, tokens.refresh_token)

        assert rotated.access_token != tokens.access_token
        assert rotated.user_id == str(user.id)
        with pytest.raises(AuthenticationRequired):
            await refresh_session(db, tokens.refresh_token)

    @pytest.mark.asyncio
    async def test_invalidated_session_cannot_refresh(self, db, make_account) -> None:
        await make_account("citizen@example.com")
        user = await get_user_by_email(db, "citizen@example.com")
        tokens = await create_session(db, user)
        payload = decode_token(tokens.refresh_token, "refresh")
        session = await get_session_by_refresh_jti(db, payload["jti"])

        await invalidate_session(db, session)

        assert session.is_valid is False
        with pytest.raises(AuthenticationRequired):
            await refresh_session(db, tokens.refresh_token)
