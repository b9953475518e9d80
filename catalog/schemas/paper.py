"""Paper Schemas — paper create/update bodies and responses.

Invariants:
    - title and publishedIn required and non-blank
    - year is a real integer (no string coercion) greater than 1900
    - authors has at least one entry, each with a non-blank name
"""

from datetime import datetime

from pydantic import Field, field_validator

from catalog.core.domain_types import MIN_PUBLICATION_YEAR
from catalog.schemas.author import AuthorSummary, AuthorWrite
from catalog.schemas.common import CamelModel, require_text


class PaperWrite(CamelModel):
    """Body of POST/PUT /api/papers."""
    title: str = Field(max_length=1000)
    published_in: str = Field(max_length=500)
    year: int = Field(gt=MIN_PUBLICATION_YEAR, strict=True)
    authors: list[AuthorWrite] = Field(min_length=1)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        return require_text(v, "Title is required")

    @field_validator("published_in")
    @classmethod
    def venue_not_blank(cls, v: str) -> str:
        return require_text(v, "Published venue is required")


class PaperResponse(CamelModel):
    id: int
    title: str
    published_in: str
    year: int
    created_at: datetime
    updated_at: datetime
    authors: list[AuthorSummary]


class PaperListResponse(CamelModel):
    papers: list[PaperResponse]
    total: int
    limit: int
    offset: int
