"""Association Rewriter — replaces the author set linked to a paper.

Invariants:
    - Runs inside the caller's UnitOfWork; never commits itself
    - Paper existence is checked FIRST: a missing paper raises before any
      author row is created or any association row is cleared
    - After a successful rewrite the paper's associations are exactly the
      resolved ids (never empty)

Design Decisions:
    - Paper row locked with SELECT ... FOR UPDATE so concurrent rewrites and
      deletes of the same paper serialize. SQLite ignores the clause; there
      the unit of work already holds the database write lock
    - Clear-then-insert on the association table instead of diffing: the
      unit of work hides the intermediate state from readers
"""

import logging

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.domain_types import AuthorId, PaperId, ResolvedAuthor
from catalog.core.enforce_authorship import check_author_set_not_empty
from catalog.core.errors import ErrorContext, ResourceNotFoundError
from catalog.models.author import Author
from catalog.models.paper import Paper
from catalog.models.paper_author import paper_authors

logger = logging.getLogger(__name__)


class AssociationRewriter:
    """Clear-then-reconnect of paper_authors rows for one paper."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def lock_paper(self, paper_id: PaperId) -> None:
        """Raise ResourceNotFoundError unless the paper exists."""
        result = await self.db.execute(
            select(Paper.id).where(Paper.id == paper_id).with_for_update()
        )
        if result.scalar_one_or_none() is None:
            raise ResourceNotFoundError(
                "Paper", paper_id,
                ErrorContext(paper_id=paper_id, operation="rewrite_authors"),
            )

    async def create_missing(self, resolved: list[ResolvedAuthor]) -> list[AuthorId]:
        """Insert authors marked for creation; return all ids in input order."""
        author_ids: list[AuthorId] = []
        for entry in resolved:
            if not entry.needs_creation:
                author_ids.append(entry.author_id)
                continue
            author = Author(
                name=entry.identity.name,
                email=entry.identity.email,
                affiliation=entry.identity.affiliation,
            )
            self.db.add(author)
            await self.db.flush()
            logger.info(
                f"Created author {author.id} while attaching to paper",
                extra={"author_id": author.id},
            )
            author_ids.append(AuthorId(author.id))
        return author_ids

    async def rewrite(
        self, paper_id: PaperId, resolved: list[ResolvedAuthor],
    ) -> list[AuthorId]:
        """Replace the paper's associations with the resolved author set."""
        check_author_set_not_empty(resolved, paper_id)
        await self.lock_paper(paper_id)

        author_ids = list(dict.fromkeys(await self.create_missing(resolved)))

        await self.db.execute(
            delete(paper_authors).where(paper_authors.c.paper_id == paper_id)
        )
        await self.db.execute(
            insert(paper_authors),
            [{"paper_id": paper_id, "author_id": a} for a in author_ids],
        )
        logger.info(
            f"Paper {paper_id} now linked to {len(author_ids)} author(s)",
            extra={"paper_id": paper_id, "operation": "rewrite_authors"},
        )
        return author_ids
