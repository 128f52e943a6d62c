# Standard library imports
from datetime import timedelta
import uuid

# Local application imports
from civicconnect.services.auth import create_access_token, create_refresh_token, decode_token
from civicconnect.utils.password_utils import get_password_hash, verify_password


class TestPasswordUtils:
    def test_hash_verifies(self) -> None:
        hashed = get_password_hash("secret123")
        assert hashed != "secret123"
        assert verify_password("secret123", hashed) is True
        assert verify_password("wrong", hashed) is False

    def test_garbage_hash_does_not_verify(self) -> None:
        assert verify_password("secret123", "not-a-bcrypt-hash") is False

    def test_long_passwords_are_accepted(self) -> None:
        password = "x" * 100
        assert verify_password(password, get_password_hash(password)) is True


class TestTokens:
    def test_access_token_round_trip(self) -> None:
        user_id = uuid.uuid4()
        token, jti = create_access_token(user_id, "citizen@example.com")

        payload = decode_token(token, "access")

        assert payload is not None
        assert payload["sub"] == str(user_id)
        assert payload["email"] == "citizen@example.com"
        assert payload["jti"] == jti

    def test_token_type_must_match(self) -> None:
        token, _ = create_refresh_token(uuid.uuid4(), "citizen@example.com")
        assert decode_token(token, "access") is None
        assert decode_token(token, "refresh") is not None

    def test_expired_token_is_rejected(self) -> None:
        token, _ = create_access_token(uuid.uuid4(), "citizen@example.com", expires_delta=timedelta(seconds=-5))
        assert decode_token(token, "access") is None

    def test_garbage_is_rejected(self) -> None:
        assert decode_token("not.a.token", "access") is None
