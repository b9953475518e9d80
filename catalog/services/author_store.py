"""Author Store — explicit author create/read/update/delete.

Invariants:
    - Authors created here skip the matcher: an explicit create always inserts
    - Deletion goes through DeletionGuard (sole-author rule)
    - Returned authors always carry their papers (ordered by paper id)
    - Listing filters (name, affiliation) are case-insensitive substrings
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from catalog.core.domain_types import AuthorId, AuthorIdentity, DEFAULT_PAGE_LIMIT
from catalog.core.enforce_pagination import check_page_bounds
from catalog.core.errors import ErrorContext, ResourceNotFoundError
from catalog.infrastructure.unit_of_work import UnitOfWork
from catalog.models.author import Author
from catalog.schemas.author import AuthorWrite
from catalog.services.deletion_guard import DeletionGuard
from catalog.services.query_filter_builder import Page, fetch_page

logger = logging.getLogger(__name__)


class AuthorStore:
    """Author operations over one request-scoped session."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.guard = DeletionGuard(db)

    async def create_author(self, data: AuthorWrite) -> Author:
        identity = AuthorIdentity.of(data)
        async with UnitOfWork(self.db, "create_author"):
            author = Author(
                name=identity.name,
                email=identity.email,
                affiliation=identity.affiliation,
            )
            self.db.add(author)
            await self.db.flush()
            author_id = AuthorId(author.id)

        logger.info(
            f"Created author {author_id}",
            extra={"author_id": author_id, "operation": "create_author"},
        )
        return await self.get_author_by_id(author_id)

    async def get_author_by_id(self, author_id: AuthorId) -> Author:
        result = await self.db.execute(
            select(Author)
            .where(Author.id == author_id)
            .options(selectinload(Author.papers))
            .execution_options(populate_existing=True)
        )
        author = result.scalar_one_or_none()
        if author is None:
            raise ResourceNotFoundError(
                "Author", author_id, ErrorContext(author_id=author_id),
            )
        return author

    async def get_all_authors(
        self,
        name: str | None = None,
        affiliation: str | None = None,
        limit: int = DEFAULT_PAGE_LIMIT,
        offset: int = 0,
    ) -> Page[Author]:
        check_page_bounds(limit, offset)
        clauses = []
        if name:
            clauses.append(Author.name.icontains(name, autoescape=True))
        if affiliation:
            clauses.append(Author.affiliation.icontains(affiliation, autoescape=True))
        return await fetch_page(
            self.db, Author, clauses, limit, offset, selectinload(Author.papers),
        )

    async def update_author(self, author_id: AuthorId, data: AuthorWrite) -> Author:
        identity = AuthorIdentity.of(data)
        async with UnitOfWork(self.db, "update_author"):
            author = await self.db.get(Author, author_id, with_for_update=True)
            if author is None:
                raise ResourceNotFoundError(
                    "Author", author_id,
                    ErrorContext(author_id=author_id, operation="update_author"),
                )
            author.name = identity.name
            author.email = identity.email
            author.affiliation = identity.affiliation

        logger.info(
            f"Updated author {author_id}",
            extra={"author_id": author_id, "operation": "update_author"},
        )
        return await self.get_author_by_id(author_id)

    async def delete_author(self, author_id: AuthorId) -> None:
        async with UnitOfWork(self.db, "delete_author"):
            await self.guard.delete(author_id)
