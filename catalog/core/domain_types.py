"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - PaperId, AuthorId wrap integer surrogate keys — never reused, never renamed
    - AuthorIdentity is the matching tuple (name, email, affiliation); it is a
      lookup key only, never a primary key
    - Empty email/affiliation are the same identity as absent ones (None)
    - Name comparison is exact: no trimming, no case folding

Design Decisions:
    - NewType for ids: zero runtime cost, full type-checker support
    - Frozen dataclass for AuthorIdentity: hashable, usable as dict key for
      in-request deduplication
"""

from dataclasses import dataclass
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PaperId = NewType("PaperId", int)
AuthorId = NewType("AuthorId", int)


# ─── Constants ───────────────────────────────────────────────────

MIN_PUBLICATION_YEAR = 1900  # exclusive: year must be > 1900
DEFAULT_PAGE_LIMIT = 10
MAX_PAGE_LIMIT = 100


# ─── Value Types ─────────────────────────────────────────────────

def _null_if_empty(value: str | None) -> str | None:
    return value if value else None


@dataclass(frozen=True)
class AuthorIdentity:
    """Matching tuple deciding whether a description refers to an existing author."""

    name: str
    email: str | None = None
    affiliation: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "email", _null_if_empty(self.email))
        object.__setattr__(self, "affiliation", _null_if_empty(self.affiliation))

    @classmethod
    def of(cls, description) -> "AuthorIdentity":
        """Build from any object exposing name/email/affiliation attributes."""
        return cls(
            name=description.name,
            email=getattr(description, "email", None),
            affiliation=getattr(description, "affiliation", None),
        )


@dataclass(frozen=True)
class ResolvedAuthor:
    """Matcher output: an existing author id, or None when the identity must be created."""

    identity: AuthorIdentity
    author_id: AuthorId | None = None

    @property
    def needs_creation(self) -> bool:
        return self.author_id is None


def unique_identities(identities: list[AuthorIdentity]) -> list[AuthorIdentity]:
    """Drop repeated identities, keeping first-seen order."""
    return list(dict.fromkeys(identities))
