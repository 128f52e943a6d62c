# Standard library imports
from datetime import datetime
from typing import Literal
from uuid import UUID

# Third-party imports
from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

# Local application imports
from civicconnect.models.issues.issue import IssueCategory, IssuePriority, IssueStatus

ALL = "all"


class IssueCreate(BaseModel):
    title: str = Field(..., max_length=200)
    category: IssueCategory
    location: str
    description: str
    contact_info: str | None = None

    @field_validator("title", "location", "description")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v

    @field_validator("contact_info")
    @classmethod
    def empty_contact_is_none(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None

    model_config = {
        "json_schema_extra": {
            "example": {
                "title": "Pothole",
                "category": "roads",
                "location": "5th Ave",
                "description": "deep pothole",
                "contact_info": "555-1234",
            }
        }
    }


class IssueUpdate(BaseModel):
    status: IssueStatus | None = None
    priority: IssuePriority | None = None
    # Collected by the triage form but not stored
    notes: str | None = None


class IssueResponse(BaseModel):
    """An issue as shown to one viewer; ``contact_info`` is None unless the viewer may see it."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: str
    location: str
    category: str
    status: IssueStatus
    priority: IssuePriority
    contact_info: str | None = None
    image_url: str | None = None
    user_id: UUID
    assigned_to: UUID | None = None
    created_at: datetime
    updated_at: datetime

    @computed_field  # type: ignore[prop-decorator, misc]
    @property
    def status_label(self) -> str:
        return self.status.label


class IssueFilterCriteria(BaseModel):
    model_config = ConfigDict(frozen=True)

    term: str = ""
    status: IssueStatus | Literal["all"] = ALL
    category: IssueCategory | Literal["all"] = ALL


class StatusCounts(BaseModel):
    pending: int = 0
    in_progress: int = 0
    resolved: int = 0
    total: int = 0


class IssueDashboardResponse(BaseModel):
    view: Literal["public", "citizen", "authority"]
    can_update: bool
    issues: list[IssueResponse]
    total: int
    status_counts: StatusCounts
