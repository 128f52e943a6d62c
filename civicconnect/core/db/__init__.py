# Local application imports
from civicconnect.core.db.create_async_engine import async_engine
from civicconnect.core.db.get_async_session import AsyncSessionLocal, get_async_session
from civicconnect.core.db.run_with_new_session import run_with_new_session

__all__ = [
    "AsyncSessionLocal",
    "async_engine",
    "get_async_session",
    "run_with_new_session",
]
