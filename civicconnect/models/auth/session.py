# Standard library imports
from datetime import UTC, datetime
from typing import TYPE_CHECKING
import uuid

# Third-party imports
from sqlalchemy import Boolean, DateTime, ForeignKey, Index, String, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

# Local application imports
from civicconnect.models.base import Base
from civicconnect.models.mixins.uuid_timestamp import UUIDTimeStampMixin

if TYPE_CHECKING:  # pragma: no cover
    # Local application imports
    from civicconnect.models.auth.user import User


def _as_aware(value: datetime) -> datetime:
    # SQLite hands timestamps back without tzinfo
    return value if value.tzinfo else value.replace(tzinfo=UTC)


class Session(UUIDTimeStampMixin, Base):
    """
    A signed-in session. Created at sign-in, rotated on token refresh and
    invalidated at sign-out.
    """

    __tablename__ = "session"

    __table_args__ = (
        Index(
            "idx_session_valid_by_user",
            "user_id",
            postgresql_where=text("is_active = true AND invalidated_at IS NULL"),
        ),
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
    )

    access_token_jti: Mapped[str] = mapped_column(
        String,
        unique=True,
        nullable=False,
        comment="JWT ID for the access token",
    )

    refresh_token_jti: Mapped[str] = mapped_column(
        String,
        unique=True,
        nullable=False,
        comment="JWT ID for the refresh token",
    )

    user_agent: Mapped[str | None] = mapped_column(String, nullable=True)
    ip_address: Mapped[str | None] = mapped_column(String, nullable=True)

    is_active: Mapped[bool] = mapped_column(Boolean, default=True, server_default=text("true"), nullable=False)
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    invalidated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    invalidation_reason: Mapped[str | None] = mapped_column(String, nullable=True)

    user: Mapped["User"] = relationship("User", back_populates="sessions")

    @property
    def is_expired(self) -> bool:
        return datetime.now(UTC) > _as_aware(self.expires_at)

    @property
    def is_valid(self) -> bool:
        return self.is_active and not self.is_expired and self.invalidated_at is None

    def invalidate(self, reason: str = "manual_logout") -> None:
        self.is_active = False
        self.invalidated_at = datetime.now(UTC)
        self.invalidation_reason = reason

    def __str__(self) -> str:
        return f"Session: {self.id} · User: {self.user_id}"
