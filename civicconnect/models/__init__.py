"""
Database models package.

This package contains all SQLAlchemy models for the application.
"""

# Local application imports
from civicconnect.models.auth import Profile, Role, Session, User
from civicconnect.models.base import Base
from civicconnect.models.issues import Issue, IssueCategory, IssuePriority, IssueStatus

__all__ = [
    "Base",
    # Identity models
    "Profile",
    "Role",
    "Session",
    "User",
    # Issue models
    "Issue",
    "IssueCategory",
    "IssuePriority",
    "IssueStatus",
]
