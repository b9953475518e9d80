"""Paper Filters — tagged filter variants and their in-memory evaluator.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Filters combine with AND; an empty filter list matches every paper
    - Each AuthorNameContains must be satisfied by SOME author of the paper;
      different terms may be satisfied by different authors (outer AND, inner OR)
    - Substring checks are case-insensitive; year is an exact match

Design Decisions:
    - Filters are data, not query strings: services/query_filter_builder.py
      translates the same variants to SQL, and paper_matches() here is the
      reference semantics the SQL translation is tested against
"""

from dataclasses import dataclass
from typing import Iterable, Union


@dataclass(frozen=True)
class YearEquals:
    year: int


@dataclass(frozen=True)
class VenueContains:
    fragment: str


@dataclass(frozen=True)
class AuthorNameContains:
    fragment: str


PaperFilter = Union[YearEquals, VenueContains, AuthorNameContains]


def build_paper_filters(
    year: int | None = None,
    published_in: str | None = None,
    authors: Iterable[str] = (),
) -> list[PaperFilter]:
    """Translate optional listing parameters into a filter list."""
    filters: list[PaperFilter] = []
    if year is not None:
        filters.append(YearEquals(year))
    if published_in:
        filters.append(VenueContains(published_in))
    # repeated terms add nothing under AND semantics
    for fragment in dict.fromkeys(a for a in authors if a):
        filters.append(AuthorNameContains(fragment))
    return filters


def _contains(haystack: str | None, needle: str) -> bool:
    return haystack is not None and needle.lower() in haystack.lower()


def filter_matches(
    paper_filter: PaperFilter,
    year: int,
    published_in: str,
    author_names: list[str],
) -> bool:
    """Evaluate one filter against a paper's fields."""
    match paper_filter:
        case YearEquals(year=wanted):
            return year == wanted
        case VenueContains(fragment=fragment):
            return _contains(published_in, fragment)
        case AuthorNameContains(fragment=fragment):
            return any(_contains(name, fragment) for name in author_names)
    raise TypeError(f"Unknown paper filter: {paper_filter!r}")


def paper_matches(
    filters: list[PaperFilter],
    year: int,
    published_in: str,
    author_names: list[str],
) -> bool:
    """True iff the paper satisfies every filter."""
    return all(
        filter_matches(f, year, published_in, author_names) for f in filters
    )
