# Standard library imports
from datetime import datetime
from typing import TYPE_CHECKING

# Third-party imports
from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

# Local application imports
from civicconnect.models.base import Base
from civicconnect.models.mixins.uuid_timestamp import UUIDTimeStampMixin

if TYPE_CHECKING:
    # Local application imports
    from civicconnect.models.auth.profile import Profile
    from civicconnect.models.auth.session import Session


class User(UUIDTimeStampMixin, Base):
    """An identity known to the identity provider. The role lives on ``Profile``."""

    __tablename__ = "user"

    email: Mapped[str] = mapped_column(
        String,
        index=True,
        unique=True,
        nullable=False,
        comment="User's email (acts as username)",
    )
    hashed_password: Mapped[str] = mapped_column(String, nullable=False)
    display_name: Mapped[str | None] = mapped_column(String(100), nullable=True)

    last_login: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        server_default=func.now(),
        comment="Last login timestamp",
    )

    sessions: Mapped[list["Session"]] = relationship("Session", back_populates="user", cascade="all, delete")
    profile: Mapped["Profile | None"] = relationship(
        "Profile", back_populates="user", cascade="all, delete", uselist=False
    )

    def __str__(self) -> str:
        return f"User: {self.display_name} - {self.email}"
