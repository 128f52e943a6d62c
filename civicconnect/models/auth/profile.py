# Standard library imports
import enum
from typing import TYPE_CHECKING
import uuid

# Third-party imports
from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

# Local application imports
from civicconnect.models.base import Base
from civicconnect.models.mixins.uuid_timestamp import UUIDTimeStampMixin

if TYPE_CHECKING:
    # Local application imports
    from civicconnect.models.auth.user import User


class Role(str, enum.Enum):
    CITIZEN = "citizen"
    AUTHORITY = "authority"
    ADMIN = "admin"


class Profile(UUIDTimeStampMixin, Base):
    __tablename__ = "profile"

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("user.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    # Kept as plain text: rows are provisioned outside this service and may hold unknown roles
    role: Mapped[str] = mapped_column(String(32), nullable=False, default=Role.CITIZEN.value)
    display_name: Mapped[str | None] = mapped_column(String(100), nullable=True)

    user: Mapped["User"] = relationship("User", back_populates="profile")

    def __str__(self) -> str:
        return f"Profile: {self.user_id} ({self.role})"
