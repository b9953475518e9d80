"""Association Rewriter — clear-then-reconnect inside a unit of work.

Invariants:
    - Missing paper: ResourceNotFoundError, no authors created, no links cleared
    - Rewritten set is exactly the resolved ids
    - Empty set rejected before any write
"""

import pytest
from sqlalchemy import func, select

from catalog.core.domain_types import AuthorId, AuthorIdentity, PaperId, ResolvedAuthor
from catalog.core.errors import CatalogValidationError, ResourceNotFoundError
from catalog.infrastructure.unit_of_work import UnitOfWork
from catalog.models.author import Author
from catalog.services.association_rewriter import AssociationRewriter
from tests.services.factories import author, paper
from tests.services.snapshots import snapshot


async def test_rewrite_replaces_links(test_db, paper_store):
    created = await paper_store.create_paper(
        paper(authors=[author("Alice"), author("Bob")]),
    )
    paper_id = created.id
    carol = ResolvedAuthor(AuthorIdentity("Carol"))

    async with UnitOfWork(test_db, "test_rewrite"):
        ids = await AssociationRewriter(test_db).rewrite(PaperId(paper_id), [carol])

    reloaded = await paper_store.get_paper_by_id(paper_id)
    assert [a.id for a in reloaded.authors] == ids
    assert [a.name for a in reloaded.authors] == ["Carol"]


async def test_rewrite_keeps_existing_ids(test_db, paper_store):
    created = await paper_store.create_paper(paper(authors=[author("Alice")]))
    paper_id, alice_id = created.id, created.authors[0].id

    async with UnitOfWork(test_db, "test_rewrite"):
        ids = await AssociationRewriter(test_db).rewrite(
            PaperId(paper_id),
            [ResolvedAuthor(AuthorIdentity("Alice"), AuthorId(alice_id))],
        )

    assert ids == [alice_id]
    assert await test_db.scalar(select(func.count()).select_from(Author)) == 1


async def test_missing_paper_creates_nothing(test_db, paper_store):
    await paper_store.create_paper(paper(authors=[author("Alice")]))
    before = await snapshot(test_db)

    with pytest.raises(ResourceNotFoundError):
        async with UnitOfWork(test_db, "test_rewrite"):
            await AssociationRewriter(test_db).rewrite(
                PaperId(999), [ResolvedAuthor(AuthorIdentity("Ghost"))],
            )

    assert await snapshot(test_db) == before


async def test_empty_author_set_rejected(test_db, paper_store):
    created = await paper_store.create_paper(paper())
    paper_id = created.id
    before = await snapshot(test_db)

    with pytest.raises(CatalogValidationError):
        async with UnitOfWork(test_db, "test_rewrite"):
            await AssociationRewriter(test_db).rewrite(PaperId(paper_id), [])

    assert await snapshot(test_db) == before
