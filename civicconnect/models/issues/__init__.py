# Local application imports
from civicconnect.models.issues.issue import Issue, IssueCategory, IssuePriority, IssueStatus

__all__ = ["Issue", "IssueCategory", "IssuePriority", "IssueStatus"]
