"""Author ORM — a person who wrote one or more papers.

Invariants:
    - id is an integer surrogate key, assigned on insert, never changed
    - name is non-nullable; email and affiliation are nullable (empty stored as NULL)
    - No unique constraint on (name, email, affiliation): matching is a lookup rule

Design Decisions:
    - Composite index on the matching tuple keeps AuthorMatcher lookups cheap
    - papers relationship is viewonly: association rows are written through
      the paper_authors table only
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.db.base import Base
from catalog.models.paper_author import paper_authors


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Author(Base):
    """Author entity — referenced by papers, never owned by them."""
    __tablename__ = "authors"
    __table_args__ = (
        Index("ix_authors_identity", "name", "email", "affiliation"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(500), nullable=False)
    email: Mapped[str | None] = mapped_column(String(320), nullable=True)
    affiliation: Mapped[str | None] = mapped_column(String(500), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow,
    )

    # Relationships
    papers: Mapped[list["Paper"]] = relationship(
        "Paper", secondary=paper_authors,
        order_by="Paper.id", viewonly=True, lazy="raise",
    )
