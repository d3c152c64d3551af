"""Table maintenance helpers used by administrative resets."""

import logging

from sqlalchemy import delete, text
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import DeclarativeBase

logger = logging.getLogger(__name__)


async def truncate_tables(session: AsyncSession, *models: type[DeclarativeBase]) -> None:
    """Empty the given tables.

    PostgreSQL gets ``TRUNCATE ... RESTART IDENTITY CASCADE`` so dependent
    rows in other tables go with them; other dialects fall back to a plain
    ``DELETE`` per table.
    """
    if not models:
        return

    names = [model.__table__.name for model in models]
    if session.get_bind().dialect.name == "postgresql":
        quoted = ", ".join(f'"{name}"' for name in names)
        await session.execute(text(f"TRUNCATE TABLE {quoted} RESTART IDENTITY CASCADE"))
    else:
        for model in models:
            await session.execute(delete(model))
    await session.flush()
    logger.debug("Truncated tables: %s", ", ".join(names))
