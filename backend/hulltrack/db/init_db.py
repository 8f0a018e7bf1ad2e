"""Database maintenance utilities."""

import logging

from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hulltrack.core.database import engine

logger = logging.getLogger(__name__)


async def check_db_connection() -> bool:
    """Verify database connectivity."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except (SQLAlchemyError, OSError):
        logger.warning("Database connectivity check failed", exc_info=True)
        return False


async def table_has_data(session: AsyncSession, table_name: str) -> bool:
    """Check if a table contains any rows."""
    # Only names of existing tables are interpolated
    valid_tables = await session.run_sync(
        lambda sync_session: set(inspect(sync_session.bind).get_table_names())
    )
    if table_name not in valid_tables:
        raise ValueError(f"Unknown table: {table_name!r}")

    result = await session.execute(text(f"SELECT EXISTS (SELECT 1 FROM {table_name} LIMIT 1)"))
    return result.scalar() or False
