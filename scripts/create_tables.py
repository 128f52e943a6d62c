#!/usr/bin/env python
"""
Script to create database tables for CivicConnect
"""

# Standard library imports
import asyncio
import sys

# Third-party imports
from sqlalchemy import inspect

# Local application imports
from civicconnect.core.db import async_engine
from civicconnect.core.monitoring.logging import get_logger

# Import all models to register them with Base
from civicconnect.models import Base

logger = get_logger("civicconnect.scripts.create_tables")


async def create_tables() -> list[str]:
    """Create all tables in the database and return the table names found afterwards"""
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        return await conn.run_sync(lambda sync_conn: sorted(inspect(sync_conn).get_table_names()))


def main() -> None:
    try:
        tables = asyncio.run(create_tables())
    except Exception as e:
        logger.error(f"Error creating tables: {e}")
        sys.exit(1)

    logger.info("All tables created successfully")
    for table in tables:
        logger.info(f"  - {table}")


if __name__ == "__main__":
    main()
