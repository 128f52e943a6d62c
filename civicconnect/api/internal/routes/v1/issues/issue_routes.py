# Standard library imports
from typing import Annotated
from uuid import UUID

# Third-party imports
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from civicconnect.core.db import get_async_session
from civicconnect.dependancies.common import get_viewer
from civicconnect.schemas.auth import Viewer
from civicconnect.schemas.issues import (
    IssueCreate,
    IssueDashboardResponse,
    IssueFilterCriteria,
    IssueResponse,
    IssueUpdate,
    StatusCounts,
)
from civicconnect.services.issues import (
    get_issue_for_viewer,
    get_public_status_counts,
    load_dashboard,
    project_issue,
    submit_issue,
    update_issue,
)

router = APIRouter(prefix="/issues", tags=["Issues"])


@router.get("", response_model=IssueDashboardResponse)
async def list_issues(
    criteria: Annotated[IssueFilterCriteria, Query()],
    viewer: Viewer = Depends(get_viewer),
    db: AsyncSession = Depends(get_async_session),
):
    """
    Dashboard for the current viewer: public, own issues, or every issue for
    authorities, narrowed by search term, status and category.
    """
    return await load_dashboard(db, viewer, criteria)


@router.get("/stats", response_model=StatusCounts)
async def issue_stats(db: AsyncSession = Depends(get_async_session)):
    """Issue counts per status across the whole city"""
    return await get_public_status_counts(db)


@router.get("/{issue_id}", response_model=IssueResponse)
async def get_issue(
    issue_id: UUID,
    viewer: Viewer = Depends(get_viewer),
    db: AsyncSession = Depends(get_async_session),
):
    """Get issue details"""
    issue = await get_issue_for_viewer(db, viewer, issue_id)
    return project_issue(viewer, issue)


@router.post("", response_model=IssueResponse, status_code=status.HTTP_201_CREATED)
async def create_issue(
    issue_data: IssueCreate,
    viewer: Viewer = Depends(get_viewer),
    db: AsyncSession = Depends(get_async_session),
):
    """Report a new issue"""
    issue = await submit_issue(db, viewer, issue_data)
    return project_issue(viewer, issue)


@router.patch("/{issue_id}", response_model=IssueResponse)
async def triage_issue(
    issue_id: UUID,
    update_data: IssueUpdate,
    viewer: Viewer = Depends(get_viewer),
    db: AsyncSession = Depends(get_async_session),
):
    """Update status and priority (authority or admin only)"""
    issue = await update_issue(db, viewer, issue_id, update_data)
    return project_issue(viewer, issue)
