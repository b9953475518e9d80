"""Paper Routes — REST endpoints for papers.

Invariants:
    - Bodies validated by PaperWrite before reaching the store
    - Query: year > 1900, publishedIn and every author term not
      whitespace-only (an empty value means no filter),
      limit 1-100 (default 10), offset >= 0 (default 0)
    - Repeated ?author= terms are ANDed (each must match some author)
    - 201 on create, 204 on delete, 404 via ResourceNotFoundError
"""

from fastapi import APIRouter, Depends, Path, Query, Response, status

from catalog.api.dependencies import get_paper_store
from catalog.core.domain_types import (
    DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT, MIN_PUBLICATION_YEAR, PaperId,
)
from catalog.core.errors import CatalogValidationError
from catalog.schemas.paper import PaperListResponse, PaperResponse, PaperWrite
from catalog.services.paper_store import PaperStore

router = APIRouter(prefix="/api/papers", tags=["papers"])


def _check_query_terms(published_in: str | None, authors: list[str]) -> None:
    if published_in and not published_in.strip():
        raise CatalogValidationError(
            "Invalid publishedIn parameter", field="publishedIn",
        )
    if any(a and not a.strip() for a in authors):
        raise CatalogValidationError("Invalid author parameter", field="author")


@router.get("", response_model=PaperListResponse)
async def list_papers(
    year: int | None = Query(None, gt=MIN_PUBLICATION_YEAR),
    published_in: str | None = Query(None, alias="publishedIn"),
    author: list[str] = Query(default=[]),
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT),
    offset: int = Query(0, ge=0),
    store: PaperStore = Depends(get_paper_store),
):
    """List papers matching every supplied filter, ordered by id."""
    _check_query_terms(published_in, author)
    page = await store.get_all_papers(
        year=year, published_in=published_in, authors=author,
        limit=limit, offset=offset,
    )
    return PaperListResponse(
        papers=[PaperResponse.model_validate(p) for p in page.items],
        total=page.total,
        limit=page.limit,
        offset=page.offset,
    )


@router.get("/{paper_id}", response_model=PaperResponse)
async def get_paper(
    paper_id: int = Path(gt=0),
    store: PaperStore = Depends(get_paper_store),
):
    paper = await store.get_paper_by_id(PaperId(paper_id))
    return PaperResponse.model_validate(paper)


@router.post(
    "", response_model=PaperResponse, status_code=status.HTTP_201_CREATED,
)
async def create_paper(
    body: PaperWrite, store: PaperStore = Depends(get_paper_store),
):
    """Create a paper, reusing authors whose name/email/affiliation match exactly."""
    paper = await store.create_paper(body)
    return PaperResponse.model_validate(paper)


@router.put("/{paper_id}", response_model=PaperResponse)
async def update_paper(
    body: PaperWrite,
    paper_id: int = Path(gt=0),
    store: PaperStore = Depends(get_paper_store),
):
    """Replace a paper's fields and its full author list."""
    paper = await store.update_paper(PaperId(paper_id), body)
    return PaperResponse.model_validate(paper)


@router.delete("/{paper_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_paper(
    paper_id: int = Path(gt=0),
    store: PaperStore = Depends(get_paper_store),
):
    await store.delete_paper(PaperId(paper_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
