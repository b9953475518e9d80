"""Author Schemas — author create/update bodies and responses.

Invariants:
    - AuthorWrite.name is required and non-blank; it is stored as given (no strip)
    - email/affiliation optional; empty strings are stored as null
"""

from datetime import datetime

from pydantic import Field, field_validator

from catalog.schemas.common import CamelModel, require_text


class AuthorWrite(CamelModel):
    """Body of POST/PUT /api/authors and of each entry in a paper's authors."""
    name: str = Field(max_length=500)
    email: str | None = Field(None, max_length=320)
    affiliation: str | None = Field(None, max_length=500)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        return require_text(v, "Author name is required")


class AuthorSummary(CamelModel):
    """Author as embedded in a paper response."""
    id: int
    name: str
    email: str | None
    affiliation: str | None


class PaperSummary(CamelModel):
    """Paper as embedded in an author response."""
    id: int
    title: str
    published_in: str
    year: int


class AuthorResponse(AuthorSummary):
    created_at: datetime
    updated_at: datetime
    papers: list[PaperSummary] = []


class AuthorListResponse(CamelModel):
    authors: list[AuthorResponse]
    total: int
    limit: int
    offset: int
