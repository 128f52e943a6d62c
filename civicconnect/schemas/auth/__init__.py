# Local application imports
from civicconnect.schemas.auth.auth_schemas import AuthoritySignupRequest, SignupRequest, UserResponse
from civicconnect.schemas.auth.token_schemas import AccessTokenRequest, AccessTokenResponse, RefreshTokenRequest
from civicconnect.schemas.auth.viewer_schemas import Viewer, ViewerKind

__all__ = [
    "AccessTokenRequest",
    "AccessTokenResponse",
    "AuthoritySignupRequest",
    "RefreshTokenRequest",
    "SignupRequest",
    "UserResponse",
    "Viewer",
    "ViewerKind",
]
