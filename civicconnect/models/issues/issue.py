# Standard library imports
import enum
import uuid

# Third-party imports
from sqlalchemy import Enum as SQLEnum, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

# Local application imports
from civicconnect.models.base import Base
from civicconnect.models.mixins.uuid_timestamp import UUIDTimeStampMixin


class IssueStatus(str, enum.Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    RESOLVED = "resolved"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    IssueStatus.PENDING: "Pending Review",
    IssueStatus.IN_PROGRESS: "In Progress",
    IssueStatus.RESOLVED: "Resolved",
}


class IssuePriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class IssueCategory(str, enum.Enum):
    ROADS = "roads"
    STREETLIGHTS = "streetlights"
    GARBAGE = "garbage"
    WATER = "water"
    DRAINAGE = "drainage"
    ELECTRICITY = "electricity"
    ENVIRONMENT = "environment"
    INFRASTRUCTURE = "infrastructure"
    PUBLIC_SAFETY = "public-safety"
    TRANSPORTATION = "transportation"
    UTILITIES = "utilities"
    OTHER = "other"


def _enum_values(enum_cls: type[enum.Enum]) -> list[str]:
    return [member.value for member in enum_cls]


class Issue(UUIDTimeStampMixin, Base):
    __tablename__ = "issues"

    # Set by the reporting citizen, never edited afterwards
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    location: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    contact_info: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Triage fields, mutated by authority/admin only
    status: Mapped[IssueStatus] = mapped_column(
        SQLEnum(IssueStatus, name="issue_status", values_callable=_enum_values),
        nullable=False,
        default=IssueStatus.PENDING,
        index=True,
    )
    priority: Mapped[IssuePriority] = mapped_column(
        SQLEnum(IssuePriority, name="issue_priority", values_callable=_enum_values),
        nullable=False,
        default=IssuePriority.MEDIUM,
    )

    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("user.id"), nullable=False, index=True)
    assigned_to: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("user.id"), nullable=True)

    def __str__(self) -> str:
        return f"Issue: {self.title} ({self.status.value})"
