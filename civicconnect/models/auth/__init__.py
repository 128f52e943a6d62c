# Local application imports
from civicconnect.models.auth.profile import Profile, Role
from civicconnect.models.auth.session import Session
from civicconnect.models.auth.user import User

__all__ = ["Profile", "Role", "Session", "User"]
