"""Pagination bounds shared by paper and author listings (pure)."""

from catalog.core.domain_types import MAX_PAGE_LIMIT
from catalog.core.errors import CatalogValidationError


def check_page_bounds(limit: int, offset: int) -> None:
    if not 1 <= limit <= MAX_PAGE_LIMIT:
        raise CatalogValidationError(
            f"Limit must be between 1 and {MAX_PAGE_LIMIT}", field="limit",
        )
    if offset < 0:
        raise CatalogValidationError("Offset cannot be negative", field="offset")
