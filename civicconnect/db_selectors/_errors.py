# Standard library imports
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

# Third-party imports
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from civicconnect.core.errors import RemoteFailure
from civicconnect.core.monitoring.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def store_call(db: AsyncSession, operation: str) -> AsyncIterator[None]:
    """Roll back and re-raise store errors as ``RemoteFailure``."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(f"Store call failed during {operation}: {e}")
        await db.rollback()
        raise RemoteFailure(cause=e) from e
