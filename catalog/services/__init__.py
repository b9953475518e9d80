"""Services — DB-backed matcher, rewriter, query builder, guard, and the stores that compose them.

Invariants:
    - Services never commit on their own; PaperStore/AuthorStore own the UnitOfWork
    - Errors are raised as CatalogError subclasses, never returned as values
"""
