"""
Which dashboard a viewer gets, and which issues back it.

- anonymous            -> public view, every issue, contact info redacted
- citizen (or unknown) -> citizen view, own issues only
- authority / admin    -> authority view, every issue, may update triage fields
"""

# Standard library imports
from enum import Enum
from typing import Literal, assert_never

# Third-party imports
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from civicconnect.core.errors import AuthenticationRequired
from civicconnect.core.monitoring.logging import get_contextual_logger
from civicconnect.db_selectors.issues import select_all_issues, select_issues_by_owner
from civicconnect.models.issues.issue import Issue
from civicconnect.schemas.auth.viewer_schemas import Viewer, ViewerKind
from civicconnect.schemas.issues.issue_schemas import IssueDashboardResponse, IssueFilterCriteria
from civicconnect.services.issues.filter_services import count_by_status, filter_issues
from civicconnect.services.issues.visibility_services import project_issues


class DatasetScope(str, Enum):
    PUBLIC = "public"
    OWNED = "owned"
    ALL = "all"


DashboardView = Literal["public", "citizen", "authority"]

_VIEW_BY_SCOPE: dict[DatasetScope, DashboardView] = {
    DatasetScope.PUBLIC: "public",
    DatasetScope.OWNED: "citizen",
    DatasetScope.ALL: "authority",
}


def select_scope(viewer: Viewer) -> DatasetScope:
    match viewer.kind:
        case ViewerKind.ANONYMOUS:
            return DatasetScope.PUBLIC
        case ViewerKind.CITIZEN:
            return DatasetScope.OWNED
        case ViewerKind.AUTHORITY | ViewerKind.ADMIN:
            return DatasetScope.ALL
        case _ as unreachable:
            assert_never(unreachable)


def can_update_issues(viewer: Viewer) -> bool:
    return select_scope(viewer) is DatasetScope.ALL


def issue_in_scope(viewer: Viewer, issue: Issue) -> bool:
    match select_scope(viewer):
        case DatasetScope.PUBLIC | DatasetScope.ALL:
            return True
        case DatasetScope.OWNED:
            return issue.user_id == viewer.user_id
        case _ as unreachable:
            assert_never(unreachable)


async def fetch_scoped_issues(db: AsyncSession, viewer: Viewer) -> list[Issue]:
    """Issues the viewer's scope may retrieve, newest first."""
    scope = select_scope(viewer)
    match scope:
        case DatasetScope.PUBLIC | DatasetScope.ALL:
            return await select_all_issues(db)
        case DatasetScope.OWNED:
            if viewer.user_id is None:
                raise AuthenticationRequired()
            return await select_issues_by_owner(db, viewer.user_id)
        case _ as unreachable:
            assert_never(unreachable)


async def load_dashboard(
    db: AsyncSession,
    viewer: Viewer,
    criteria: IssueFilterCriteria,
) -> IssueDashboardResponse:
    logger = get_contextual_logger(__name__, viewer=viewer.user_id, kind=viewer.kind.value)
    scope = select_scope(viewer)
    issues = await fetch_scoped_issues(db, viewer)
    logger.debug(f"Fetched {len(issues)} issues for {scope.value} scope")

    projected = project_issues(viewer, issues)
    return IssueDashboardResponse(
        view=_VIEW_BY_SCOPE[scope],
        can_update=can_update_issues(viewer),
        issues=filter_issues(projected, criteria),
        total=len(projected),
        status_counts=count_by_status(projected),
    )
