# Standard library imports
from enum import Enum
from uuid import UUID

# Third-party imports
from pydantic import BaseModel, ConfigDict

# Local application imports
from civicconnect.models.auth.profile import Role


class ViewerKind(str, Enum):
    ANONYMOUS = "anonymous"
    CITIZEN = "citizen"
    AUTHORITY = "authority"
    ADMIN = "admin"


class Viewer(BaseModel):
    """
    The acting user for one request, possibly anonymous.

    Built once per request and handed explicitly to every policy and service
    function; nothing reads the current user from global state.
    """

    model_config = ConfigDict(frozen=True)

    user_id: UUID | None = None
    role: Role | None = None

    @classmethod
    def anonymous(cls) -> "Viewer":
        return cls()

    @property
    def is_anonymous(self) -> bool:
        return self.user_id is None

    @property
    def kind(self) -> ViewerKind:
        if self.user_id is None:
            return ViewerKind.ANONYMOUS
        match self.role:
            case Role.AUTHORITY:
                return ViewerKind.AUTHORITY
            case Role.ADMIN:
                return ViewerKind.ADMIN
            case Role.CITIZEN | None:
                # An identity without a resolved role gets the least privilege
                return ViewerKind.CITIZEN
