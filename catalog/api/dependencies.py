"""Request-scoped store factories for FastAPI dependency injection."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.infrastructure.database import get_db
from catalog.services.author_store import AuthorStore
from catalog.services.paper_store import PaperStore


def get_paper_store(db: AsyncSession = Depends(get_db)) -> PaperStore:
    return PaperStore(db)


def get_author_store(db: AsyncSession = Depends(get_db)) -> AuthorStore:
    return AuthorStore(db)
