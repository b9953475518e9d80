"""Author Matcher — resolves author descriptions to existing author ids.

Invariants:
    - Match iff name, email and affiliation are equal (NULL matches NULL only)
    - Several matching rows: the smallest id wins, regardless of storage order
    - Read-only: never creates rows (AssociationRewriter does)
    - Identical descriptions in one request resolve to one entry

Design Decisions:
    - One query per distinct identity: author lists per paper are short
    - Duplicate rows that already exist are left alone (no auto-merge)
"""

import logging

from sqlalchemy import ColumnElement, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.domain_types import (
    AuthorId, AuthorIdentity, ResolvedAuthor, unique_identities,
)
from catalog.models.author import Author

logger = logging.getLogger(__name__)


def _equals_or_null(column, value: str | None) -> ColumnElement[bool]:
    return column.is_(None) if value is None else column == value


def identity_clause(identity: AuthorIdentity) -> list[ColumnElement[bool]]:
    """WHERE clauses selecting rows that share the identity's matching tuple."""
    return [
        Author.name == identity.name,
        _equals_or_null(Author.email, identity.email),
        _equals_or_null(Author.affiliation, identity.affiliation),
    ]


class AuthorMatcher:
    """Looks up existing authors by matching tuple."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_match(self, identity: AuthorIdentity) -> AuthorId | None:
        """Lowest id among rows sharing the identity, or None."""
        result = await self.db.execute(
            select(Author.id)
            .where(*identity_clause(identity))
            .order_by(Author.id.asc())
            .limit(1)
        )
        author_id = result.scalar_one_or_none()
        return AuthorId(author_id) if author_id is not None else None

    async def resolve(self, descriptions) -> list[ResolvedAuthor]:
        """Resolve each description to an existing id or a creation request."""
        identities = unique_identities(
            [AuthorIdentity.of(d) for d in descriptions],
        )
        resolved = []
        for identity in identities:
            author_id = await self.find_match(identity)
            resolved.append(ResolvedAuthor(identity, author_id))

        logger.debug(
            f"Resolved {len(resolved)} author(s), "
            f"{sum(r.needs_creation for r in resolved)} new",
        )
        return resolved
