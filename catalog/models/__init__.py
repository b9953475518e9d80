"""ORM Models — SQLAlchemy declarative models for all catalog entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from catalog.models.paper_author import paper_authors  # noqa: F401
from catalog.models.author import Author  # noqa: F401
from catalog.models.paper import Paper  # noqa: F401
