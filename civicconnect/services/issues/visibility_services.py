"""
Who may see an issue's contact information.

The store always holds ``contact_info``; redaction happens here, per record,
before anything is serialised for a viewer.
"""

# Standard library imports
from collections.abc import Iterable
from typing import assert_never

# Local application imports
from civicconnect.models.issues.issue import Issue
from civicconnect.schemas.auth.viewer_schemas import Viewer, ViewerKind
from civicconnect.schemas.issues.issue_schemas import IssueResponse


def can_view_contact_info(viewer: Viewer, issue: Issue) -> bool:
    """True iff the viewer owns the issue or holds the authority or admin role."""
    match viewer.kind:
        case ViewerKind.ANONYMOUS:
            return False
        case ViewerKind.AUTHORITY | ViewerKind.ADMIN:
            return True
        case ViewerKind.CITIZEN:
            return viewer.user_id == issue.user_id
        case _ as unreachable:
            assert_never(unreachable)


def project_issue(viewer: Viewer, issue: Issue) -> IssueResponse:
    projection = IssueResponse.model_validate(issue)
    if not can_view_contact_info(viewer, issue):
        projection = projection.model_copy(update={"contact_info": None})
    return projection


def project_issues(viewer: Viewer, issues: Iterable[Issue]) -> list[IssueResponse]:
    return [project_issue(viewer, issue) for issue in issues]
