"""Authorship Enforcement — the rule that no paper ends up without authors.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - A paper blocks an author's deletion iff that author is its only author
    - A rewrite with an empty author set is rejected before any write

Design Decisions:
    - Membership is passed in as a mapping so the same rule serves the
      DB-backed guard and unit tests alike
"""

from collections.abc import Collection, Mapping

from catalog.core.domain_types import AuthorId, PaperId
from catalog.core.errors import CatalogValidationError, ErrorContext


def find_sole_authored_papers(
    author_id: AuthorId,
    memberships: Mapping[PaperId, Collection[AuthorId]],
) -> list[PaperId]:
    """Papers that would be left with zero authors if author_id were removed."""
    return sorted(
        paper_id
        for paper_id, author_ids in memberships.items()
        if set(author_ids) == {author_id}
    )


def check_author_set_not_empty(
    author_ids: Collection[AuthorId], paper_id: PaperId | None = None,
) -> None:
    """Rule: every paper keeps at least one author."""
    if not author_ids:
        raise CatalogValidationError(
            "At least one author is required",
            field="authors",
            context=ErrorContext(paper_id=paper_id, operation="rewrite_authors"),
        )
