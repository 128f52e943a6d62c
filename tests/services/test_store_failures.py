"""Behaviour when the store itself fails: rollback, RemoteFailure and role fallback."""

# Standard library imports
import logging

# Third-party imports
import pytest
from sqlalchemy import text

# Local application imports
from civicconnect.core.errors import RemoteFailure, ValidationFailure
from civicconnect.db_selectors.auth import get_user_by_email, insert_user_with_profile
from civicconnect.db_selectors.issues import select_all_issues
from civicconnect.models.auth.profile import Role
from civicconnect.services.auth import resolve_role

API = "/api/v1"


async def _drop_table(engine, table: str) -> None:
    async with engine.begin() as conn:
        await conn.execute(text(f"DROP TABLE {table}"))


class TestStoreBoundary:
    @pytest.mark.asyncio
    async def test_store_error_becomes_remote_failure_and_rolls_back(self, db, engine, make_account) -> None:
        await make_account("citizen@example.com")
        await _drop_table(engine, "issues")

        with pytest.raises(RemoteFailure) as exc_info:
            await select_all_issues(db)
        assert exc_info.value.cause is not None

        # The session was rolled back and is still usable
        assert await get_user_by_email(db, "citizen@example.com") is not None

    @pytest.mark.asyncio
    async def test_duplicate_insert_is_already_registered(self, db) -> None:
        await insert_user_with_profile(
            db, email="citizen@example.com", hashed_password="x", display_name="First", role="citizen"
        )

        with pytest.raises(ValidationFailure) as exc_info:
            await insert_user_with_profile(
                db, email="Citizen@example.com", hashed_password="y", display_name="Second", role="citizen"
            )

        assert exc_info.value.message == "User already registered"
        assert (await get_user_by_email(db, "citizen@example.com")).display_name == "First"


class TestRoleLookupFailure:
    @pytest.mark.asyncio
    async def test_failed_lookup_falls_back_to_citizen(self, db, engine, make_account, caplog) -> None:
        admin = await make_account("admin@example.com", role="admin")
        await _drop_table(engine, "profile")

        with caplog.at_level(logging.WARNING, logger="civicconnect"):
            role = await resolve_role(db, admin)

        assert role is Role.CITIZEN
        assert any(
            record.levelno == logging.WARNING and "falling back to citizen" in record.getMessage()
            for record in caplog.records
        )


class TestRemoteFailureResponse:
    @pytest.mark.asyncio
    async def test_store_failure_is_a_502_envelope(self, client, engine) -> None:
        await _drop_table(engine, "issues")

        resp = await client.get(f"{API}/issues")

        assert resp.status_code == 502
        assert resp.json() == {
            "ok": False,
            "error": {
                "code": "remote_failure",
                "message": "The request could not be completed. Please try again.",
            },
        }
