from .issue_schemas import (
    ALL,
    IssueCreate,
    IssueDashboardResponse,
    IssueFilterCriteria,
    IssueResponse,
    IssueUpdate,
    StatusCounts,
)

__all__ = [
    "ALL",
    "IssueCreate",
    "IssueUpdate",
    "IssueResponse",
    "IssueFilterCriteria",
    "IssueDashboardResponse",
    "StatusCounts",
]
