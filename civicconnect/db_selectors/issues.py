# Standard library imports
from typing import Any
from uuid import UUID

# Third-party imports
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from civicconnect.db_selectors._errors import store_call
from civicconnect.models.issues.issue import Issue


async def select_all_issues(db: AsyncSession) -> list[Issue]:
    """Every issue, newest first."""
    async with store_call(db, "select_all_issues"):
        result = await db.execute(select(Issue).order_by(Issue.created_at.desc()))
        return list(result.scalars().all())


async def select_issues_by_owner(db: AsyncSession, user_id: UUID) -> list[Issue]:
    """Issues reported by ``user_id``, newest first."""
    async with store_call(db, "select_issues_by_owner"):
        result = await db.execute(
            select(Issue).where(Issue.user_id == user_id).order_by(Issue.created_at.desc())
        )
        return list(result.scalars().all())


async def select_issue_by_id(db: AsyncSession, issue_id: UUID) -> Issue | None:
    async with store_call(db, "select_issue_by_id"):
        result = await db.execute(select(Issue).where(Issue.id == issue_id))
        return result.scalar_one_or_none()


async def insert_issue(db: AsyncSession, **fields: Any) -> Issue:
    """Insert a new issue. ``id`` and ``created_at`` are assigned here, never by the caller."""
    fields.pop("id", None)
    fields.pop("created_at", None)
    async with store_call(db, "insert_issue"):
        issue = Issue(**fields)
        db.add(issue)
        await db.commit()
        await db.refresh(issue)
        return issue


async def update_issue_by_id(db: AsyncSession, issue_id: UUID, fields: dict[str, Any]) -> Issue | None:
    """
    Apply a partial update to one issue. Unconditional: whatever the caller
    sends overwrites the stored values (last write wins).
    """
    async with store_call(db, "update_issue_by_id"):
        result = await db.execute(select(Issue).where(Issue.id == issue_id))
        issue = result.scalar_one_or_none()
        if issue is None:
            return None

        for field, value in fields.items():
            setattr(issue, field, value)

        await db.commit()
        await db.refresh(issue)
        return issue
