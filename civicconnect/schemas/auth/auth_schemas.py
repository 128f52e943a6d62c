# Standard library imports
from datetime import datetime
from uuid import UUID

# Third-party imports
from pydantic import BaseModel, ConfigDict, EmailStr, Field

# Local application imports
from civicconnect.models.auth.profile import Role


class SignupRequest(BaseModel):
    """
    Citizen sign-up form. Password rules are checked by the registration
    service so the form can show its own messages.
    """

    email: EmailStr
    password: str
    confirm_password: str
    display_name: str = Field(..., max_length=100)

    model_config = {
        "json_schema_extra": {
            "example": {
                "email": "citizen@example.com",
                "password": "secret123",
                "confirm_password": "secret123",
                "display_name": "Jane Citizen",
            }
        }
    }


class AuthoritySignupRequest(SignupRequest):
    access_code: str = ""


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    display_name: str | None
    role: Role
    created_at: datetime
