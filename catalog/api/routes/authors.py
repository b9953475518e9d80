"""Author Routes — REST endpoints for authors.

Invariants:
    - Bodies validated by AuthorWrite (non-blank name)
    - DELETE returns 400 CONSTRAINT_VIOLATION when the author is the sole
      author of any paper
"""

from fastapi import APIRouter, Depends, Path, Query, Response, status

from catalog.api.dependencies import get_author_store
from catalog.core.domain_types import AuthorId, DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from catalog.schemas.author import AuthorListResponse, AuthorResponse, AuthorWrite
from catalog.services.author_store import AuthorStore

router = APIRouter(prefix="/api/authors", tags=["authors"])


@router.get("", response_model=AuthorListResponse)
async def list_authors(
    name: str | None = Query(None),
    affiliation: str | None = Query(None),
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT),
    offset: int = Query(0, ge=0),
    store: AuthorStore = Depends(get_author_store),
):
    page = await store.get_all_authors(
        name=name, affiliation=affiliation, limit=limit, offset=offset,
    )
    return AuthorListResponse(
        authors=[AuthorResponse.model_validate(a) for a in page.items],
        total=page.total,
        limit=page.limit,
        offset=page.offset,
    )


@router.get("/{author_id}", response_model=AuthorResponse)
async def get_author(
    author_id: int = Path(gt=0),
    store: AuthorStore = Depends(get_author_store),
):
    author = await store.get_author_by_id(AuthorId(author_id))
    return AuthorResponse.model_validate(author)


@router.post(
    "", response_model=AuthorResponse, status_code=status.HTTP_201_CREATED,
)
async def create_author(
    body: AuthorWrite, store: AuthorStore = Depends(get_author_store),
):
    author = await store.create_author(body)
    return AuthorResponse.model_validate(author)


@router.put("/{author_id}", response_model=AuthorResponse)
async def update_author(
    body: AuthorWrite,
    author_id: int = Path(gt=0),
    store: AuthorStore = Depends(get_author_store),
):
    author = await store.update_author(AuthorId(author_id), body)
    return AuthorResponse.model_validate(author)


@router.delete("/{author_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_author(
    author_id: int = Path(gt=0),
    store: AuthorStore = Depends(get_author_store),
):
    """Delete an author unless they are the only author of some paper."""
    await store.delete_author(AuthorId(author_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
