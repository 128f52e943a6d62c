# Third-party imports
from pydantic import BaseModel, EmailStr

# ============================
# ----- Request schemas ------
# ============================


class AccessTokenRequest(BaseModel):
    """Sign-in request."""

    email: EmailStr
    password: str

    model_config = {"json_schema_extra": {"example": {"email": "citizen@example.com", "password": "secret123"}}}


class RefreshTokenRequest(BaseModel):
    """Request model for refreshing access token."""

    refresh_token: str

    model_config = {"json_schema_extra": {"example": {"refresh_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"}}}


# ============================
# ----- Response schemas -----
# ============================


class AccessTokenResponse(BaseModel):
    """Token pair issued at sign-in and on refresh."""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int
    user_id: str

    model_config = {
        "json_schema_extra": {
            "example": {
                "access_token": "abc123",
                "refresh_token": "def456",
                "token_type": "bearer",
                "expires_in": 3600,
                "user_id": "123e4567-e89b-12d3-a456-426614174000",
            }
        }
    }
