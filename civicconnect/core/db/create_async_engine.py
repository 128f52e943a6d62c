# Third-party imports
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool

# Local application imports
from civicconnect.settings import settings

_database_uri = settings.SQLALCHEMY_ASYNC_DATABASE_URI

# SQLite connections are bound to the event loop that opened them, so they are not pooled
async_engine = create_async_engine(
    _database_uri,
    echo=settings.DATABASE_ECHO,
    poolclass=NullPool if _database_uri.startswith("sqlite") else None,
)
