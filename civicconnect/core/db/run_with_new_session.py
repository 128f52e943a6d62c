# Standard library imports
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

# Third-party imports
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from civicconnect.core.db.get_async_session import AsyncSessionLocal

ResultT = TypeVar("ResultT")


async def run_with_new_session(
    func: Callable[..., Awaitable[ResultT]],
    *args: Any,
    **kwargs: Any,
) -> ResultT:
    """
    Run a coroutine function with a fresh DB session outside the request cycle
    (startup seeding, scripts).

    Args:
        func: Coroutine function taking an AsyncSession as its first argument.
        *args: Positional arguments to pass to the function.
        **kwargs: Keyword arguments to pass to the function.

    Returns:
        Whatever ``func`` returns.
    """
    session: AsyncSession
    async with AsyncSessionLocal() as session:
        return await func(session, *args, **kwargs)
