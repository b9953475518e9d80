"""Paper ORM — a publication with one or more authors.

Invariants:
    - year > 1900 (validated at the API boundary and checked in the table)
    - At least one associated author after every successful write
    - authors are ordered by author id

Design Decisions:
    - authors relationship is viewonly with lazy="raise": callers load it
      explicitly with selectinload, and writes go through AssociationRewriter
"""

from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.core.domain_types import MIN_PUBLICATION_YEAR
from catalog.db.base import Base
from catalog.models.paper_author import paper_authors


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Paper(Base):
    """Paper entity — owns its association rows, not its authors."""
    __tablename__ = "papers"
    __table_args__ = (
        CheckConstraint(f"year > {MIN_PUBLICATION_YEAR}", name="ck_papers_year"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(1000), nullable=False)
    published_in: Mapped[str] = mapped_column(String(500), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow,
    )

    # Relationships
    authors: Mapped[list["Author"]] = relationship(
        "Author", secondary=paper_authors,
        order_by="Author.id", viewonly=True, lazy="raise",
    )
