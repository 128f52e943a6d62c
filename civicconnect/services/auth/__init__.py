# Local application imports
from civicconnect.services.auth.authority_code_services import (
    AuthorityCodeValidator,
    HttpAuthorityCodeValidator,
    get_authority_code_validator,
)
from civicconnect.services.auth.register_services import register_authority, register_citizen
from civicconnect.services.auth.session_services import create_session, invalidate_session, refresh_session
from civicconnect.services.auth.token_services import create_access_token, create_refresh_token, decode_token
from civicconnect.services.auth.user_services import authenticate_user, build_viewer, resolve_role

__all__ = [
    "AuthorityCodeValidator",
    "HttpAuthorityCodeValidator",
    "authenticate_user",
    "build_viewer",
    "create_access_token",
    "create_refresh_token",
    "create_session",
    "decode_token",
    "get_authority_code_validator",
    "invalidate_session",
    "refresh_session",
    "register_authority",
    "register_citizen",
    "resolve_role",
]
