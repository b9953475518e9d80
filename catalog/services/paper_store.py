"""Paper Store — create/read/update/delete for papers and their author links.

Invariants:
    - Every write is one UnitOfWork: matching, author creation, association
      rewrite and field updates commit together or not at all
    - Returned papers always carry their authors (ordered by author id)
    - Deleting a paper removes its association rows; authors persist
"""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from catalog.core.domain_types import DEFAULT_PAGE_LIMIT, PaperId
from catalog.core.enforce_pagination import check_page_bounds
from catalog.core.errors import ErrorContext, ResourceNotFoundError
from catalog.core.paper_filters import build_paper_filters
from catalog.infrastructure.unit_of_work import UnitOfWork
from catalog.models.paper import Paper
from catalog.models.paper_author import paper_authors
from catalog.schemas.paper import PaperWrite
from catalog.services.association_rewriter import AssociationRewriter
from catalog.services.author_matcher import AuthorMatcher
from catalog.services.query_filter_builder import Page, QueryFilterBuilder

logger = logging.getLogger(__name__)


class PaperStore:
    """Paper operations over one request-scoped session."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.matcher = AuthorMatcher(db)
        self.rewriter = AssociationRewriter(db)
        self.queries = QueryFilterBuilder(db)

    async def create_paper(self, data: PaperWrite) -> Paper:
        async with UnitOfWork(self.db, "create_paper"):
            resolved = await self.matcher.resolve(data.authors)
            paper = Paper(
                title=data.title, published_in=data.published_in, year=data.year,
            )
            self.db.add(paper)
            await self.db.flush()
            paper_id = PaperId(paper.id)
            await self.rewriter.rewrite(paper_id, resolved)

        logger.info(
            f"Created paper {paper_id}",
            extra={"paper_id": paper_id, "operation": "create_paper"},
        )
        return await self.get_paper_by_id(paper_id)

    async def get_paper_by_id(self, paper_id: PaperId) -> Paper:
        result = await self.db.execute(
            select(Paper)
            .where(Paper.id == paper_id)
            .options(selectinload(Paper.authors))
            .execution_options(populate_existing=True)
        )
        paper = result.scalar_one_or_none()
        if paper is None:
            raise ResourceNotFoundError(
                "Paper", paper_id, ErrorContext(paper_id=paper_id),
            )
        return paper

    async def get_all_papers(
        self,
        year: int | None = None,
        published_in: str | None = None,
        authors: list[str] | None = None,
        limit: int = DEFAULT_PAGE_LIMIT,
        offset: int = 0,
    ) -> Page[Paper]:
        check_page_bounds(limit, offset)
        filters = build_paper_filters(year, published_in, authors or [])
        return await self.queries.list_papers(filters, limit, offset)

    async def update_paper(self, paper_id: PaperId, data: PaperWrite) -> Paper:
        async with UnitOfWork(self.db, "update_paper"):
            resolved = await self.matcher.resolve(data.authors)
            await self.rewriter.rewrite(paper_id, resolved)
            await self.db.execute(
                update(Paper)
                .where(Paper.id == paper_id)
                .values(
                    title=data.title,
                    published_in=data.published_in,
                    year=data.year,
                )
            )

        logger.info(
            f"Updated paper {paper_id}",
            extra={"paper_id": paper_id, "operation": "update_paper"},
        )
        return await self.get_paper_by_id(paper_id)

    async def delete_paper(self, paper_id: PaperId) -> None:
        async with UnitOfWork(self.db, "delete_paper"):
            await self.rewriter.lock_paper(paper_id)
            await self.db.execute(
                delete(paper_authors).where(paper_authors.c.paper_id == paper_id)
            )
            await self.db.execute(delete(Paper).where(Paper.id == paper_id))

        logger.info(
            f"Deleted paper {paper_id}",
            extra={"paper_id": paper_id, "operation": "delete_paper"},
        )
