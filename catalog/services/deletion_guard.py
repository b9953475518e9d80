"""Deletion Guard — removes an author unless that would orphan a paper.

Invariants:
    - Missing author -> ResourceNotFoundError
    - Author is the only author of some paper -> ConstraintViolationError,
      nothing deleted
    - Otherwise the author's association rows and the author row are deleted;
      co-authors and other papers are untouched
    - Runs inside the caller's UnitOfWork; never commits itself

Design Decisions:
    - The author row and the papers referencing it are locked FOR UPDATE, so
      a concurrent rewrite can neither drop a co-author nor attach this author
      to another paper between check and delete. SQLite ignores the clause;
      there the unit of work already holds the database write lock
      (infrastructure/database.py configure_sqlite)
    - The orphan rule itself lives in core/enforce_authorship.py (pure)
"""

import logging
from collections import defaultdict

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.domain_types import AuthorId, PaperId
from catalog.core.enforce_authorship import find_sole_authored_papers
from catalog.core.errors import (
    ConstraintViolationError, ErrorContext, ResourceNotFoundError,
)
from catalog.models.author import Author
from catalog.models.paper import Paper
from catalog.models.paper_author import paper_authors

logger = logging.getLogger(__name__)


class DeletionGuard:
    """Checks the sole-author rule, then deletes."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _memberships(self, author_id: AuthorId) -> dict[PaperId, set[AuthorId]]:
        """Full author sets of every paper the author is linked to."""
        referencing = (
            select(paper_authors.c.paper_id)
            .where(paper_authors.c.author_id == author_id)
        )
        await self.db.execute(
            select(Paper.id).where(Paper.id.in_(referencing)).with_for_update()
        )
        result = await self.db.execute(
            select(paper_authors.c.paper_id, paper_authors.c.author_id)
            .where(paper_authors.c.paper_id.in_(referencing))
        )
        memberships: dict[PaperId, set[AuthorId]] = defaultdict(set)
        for paper_id, member_id in result.all():
            memberships[PaperId(paper_id)].add(AuthorId(member_id))
        return memberships

    async def check(self, author_id: AuthorId) -> None:
        """Raise unless author_id exists and can be removed."""
        exists = await self.db.scalar(
            select(Author.id).where(Author.id == author_id).with_for_update()
        )
        if exists is None:
            raise ResourceNotFoundError(
                "Author", author_id,
                ErrorContext(author_id=author_id, operation="delete_author"),
            )

        blocked = find_sole_authored_papers(
            author_id, await self._memberships(author_id),
        )
        if blocked:
            logger.warning(
                f"Refused to delete author {author_id}: sole author of {blocked}",
                extra={"author_id": author_id, "error_code": "CONSTRAINT_VIOLATION"},
            )
            raise ConstraintViolationError(
                author_id, blocked, ErrorContext(operation="delete_author"),
            )

    async def delete(self, author_id: AuthorId) -> None:
        """Guarded delete of the author and its association rows."""
        await self.check(author_id)
        await self.db.execute(
            delete(paper_authors).where(paper_authors.c.author_id == author_id)
        )
        await self.db.execute(delete(Author).where(Author.id == author_id))
        logger.info(
            f"Deleted author {author_id}",
            extra={"author_id": author_id, "operation": "delete_author"},
        )
