"""Query Filter Builder — translates paper filters to SQL and runs paginated listings.

Invariants:
    - Same semantics as core.paper_filters.paper_matches: filters are ANDed,
      each AuthorNameContains is its own EXISTS over the paper's authors
    - total counts every matching paper, ignoring limit/offset
    - Results ordered by paper id ascending; embedded authors by author id
    - LIKE wildcards in user fragments are escaped (autoescape)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from catalog.core.paper_filters import (
    AuthorNameContains, PaperFilter, VenueContains, YearEquals,
)
from catalog.models.author import Author
from catalog.models.paper import Paper

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """One page of results plus pagination metadata."""
    items: list[T]
    total: int
    limit: int
    offset: int


def to_clause(paper_filter: PaperFilter) -> ColumnElement[bool]:
    """SQL predicate for one filter variant."""
    match paper_filter:
        case YearEquals(year=year):
            return Paper.year == year
        case VenueContains(fragment=fragment):
            return Paper.published_in.icontains(fragment, autoescape=True)
        case AuthorNameContains(fragment=fragment):
            return Paper.authors.any(
                Author.name.icontains(fragment, autoescape=True),
            )
    raise TypeError(f"Unknown paper filter: {paper_filter!r}")


async def fetch_page(
    db: AsyncSession,
    model,
    clauses: list[ColumnElement[bool]],
    limit: int,
    offset: int,
    *options,
) -> Page:
    """Filtered rows ordered by id, sliced by limit/offset, with the unsliced count."""
    total = await db.scalar(
        select(func.count()).select_from(model).where(*clauses)
    )
    result = await db.execute(
        select(model)
        .where(*clauses)
        .options(*options)
        .order_by(model.id.asc())
        .limit(limit)
        .offset(offset)
        .execution_options(populate_existing=True)
    )
    return Page(
        items=list(result.scalars().all()),
        total=total or 0,
        limit=limit,
        offset=offset,
    )


class QueryFilterBuilder:
    """Runs filtered, paginated paper listings."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_papers(
        self, filters: list[PaperFilter], limit: int, offset: int,
    ) -> Page[Paper]:
        return await fetch_page(
            self.db, Paper, [to_clause(f) for f in filters], limit, offset,
            selectinload(Paper.authors),
        )
