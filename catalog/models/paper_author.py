"""PaperAuthor association table — links papers and authors (many-to-many).

Invariants:
    - Composite primary key (paper_id, author_id): a pair appears at most once
    - No payload beyond the two foreign keys
    - Rows are written only by AssociationRewriter, DeletionGuard and paper deletion

Design Decisions:
    - Plain Table, not a mapped class: nothing ever loads a row on its own
    - ON DELETE CASCADE on both keys as a backstop; services delete rows explicitly.
      SQLite enforces the keys only with PRAGMA foreign_keys, which every
      connection turns on (infrastructure/database.py configure_sqlite)
"""

from sqlalchemy import Column, ForeignKey, Index, Integer, Table

from catalog.db.base import Base


paper_authors = Table(
    "paper_authors",
    Base.metadata,
    Column(
        "paper_id", Integer,
        ForeignKey("papers.id", ondelete="CASCADE"), primary_key=True,
    ),
    Column(
        "author_id", Integer,
        ForeignKey("authors.id", ondelete="CASCADE"), primary_key=True,
    ),
    Index("ix_paper_authors_author_id", "author_id"),
)
