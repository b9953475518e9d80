"""Schema Bootstrap — creates the catalog tables from ORM metadata.

Invariants:
    - Idempotent: existing tables are left alone (create_all checks first)
    - Used on startup and by test fixtures
"""

from sqlalchemy.ext.asyncio import AsyncEngine

from catalog.db.base import Base


async def create_schema(engine: AsyncEngine) -> None:
    """Create all catalog tables that do not exist yet."""
    # registers every model on Base.metadata
    import catalog.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_schema(engine: AsyncEngine) -> None:
    """Drop all catalog tables."""
    import catalog.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
