# Standard library imports
from typing import assert_never
from uuid import UUID

# Third-party imports
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from civicconnect.core.errors import AuthenticationRequired, AuthorizationDenied, NotFound
from civicconnect.core.monitoring.logging import get_contextual_logger
from civicconnect.db_selectors.issues import (
    insert_issue,
    select_all_issues,
    select_issue_by_id,
    update_issue_by_id,
)
from civicconnect.models.issues.issue import Issue, IssuePriority, IssueStatus
from civicconnect.schemas.auth.viewer_schemas import Viewer, ViewerKind
from civicconnect.schemas.issues.issue_schemas import IssueCreate, IssueUpdate, StatusCounts
from civicconnect.services.issues.filter_services import count_by_status
from civicconnect.services.issues.scope_services import issue_in_scope


async def submit_issue(db: AsyncSession, viewer: Viewer, issue_data: IssueCreate) -> Issue:
    """
    Store a new report for the signed-in viewer.

    New issues always start as pending with medium priority and belong to the
    submitter. There is no deduplication or rate limiting.

    Raises:
        AuthenticationRequired: if the viewer is anonymous.
    """
    if viewer.user_id is None:
        raise AuthenticationRequired()

    logger = get_contextual_logger(__name__, viewer=viewer.user_id)
    issue = await insert_issue(
        db,
        title=issue_data.title,
        description=issue_data.description,
        category=issue_data.category.value,
        location=issue_data.location,
        contact_info=issue_data.contact_info,
        user_id=viewer.user_id,
        status=IssueStatus.PENDING,
        priority=IssuePriority.MEDIUM,
    )
    logger.info(f"Issue {issue.id} reported in category {issue.category}")
    return issue


async def update_issue(db: AsyncSession, viewer: Viewer, issue_id: UUID, update_data: IssueUpdate) -> Issue:
    """
    Apply a triage update (status and/or priority) as an authority or admin.

    ``assigned_to`` is always set to the acting viewer, even when neither
    field changes. No version check is made: concurrent updates both land and
    the later one wins.

    Raises:
        AuthenticationRequired: if the viewer is anonymous.
        AuthorizationDenied: if the viewer is a citizen.
        NotFound: if no issue has this id.
    """
    match viewer.kind:
        case ViewerKind.ANONYMOUS:
            raise AuthenticationRequired()
        case ViewerKind.CITIZEN:
            raise AuthorizationDenied("Only authorities can update issues")
        case ViewerKind.AUTHORITY | ViewerKind.ADMIN:
            pass
        case _ as unreachable:
            assert_never(unreachable)

    fields = update_data.model_dump(include={"status", "priority"}, exclude_none=True)
    fields["assigned_to"] = viewer.user_id

    logger = get_contextual_logger(__name__, viewer=viewer.user_id, issue=issue_id)
    issue = await update_issue_by_id(db, issue_id, fields)
    if issue is None:
        raise NotFound("Issue not found")

    logger.info(f"Issue updated: {', '.join(sorted(fields))}")
    return issue


async def get_issue_for_viewer(db: AsyncSession, viewer: Viewer, issue_id: UUID) -> Issue:
    """
    Load a single issue the viewer's scope may retrieve.

    Raises:
        NotFound: if the issue does not exist or lies outside the viewer's scope.
    """
    issue = await select_issue_by_id(db, issue_id)
    if issue is None or not issue_in_scope(viewer, issue):
        raise NotFound("Issue not found")
    return issue


async def get_public_status_counts(db: AsyncSession) -> StatusCounts:
    return count_by_status(await select_all_issues(db))
