"""SQLite connection setup — foreign keys enforced, cascades applied."""

import pytest
from sqlalchemy import delete, select, text

from catalog.core.errors import ConflictError
from catalog.infrastructure.unit_of_work import UnitOfWork
from catalog.models.author import Author
from catalog.models.paper import Paper
from catalog.models.paper_author import paper_authors


async def test_foreign_keys_are_enforced(test_db):
    assert await test_db.scalar(text("PRAGMA foreign_keys")) == 1


async def test_link_to_missing_paper_is_rejected(test_db):
    async with UnitOfWork(test_db, "seed"):
        test_db.add(Author(name="Alice"))

    with pytest.raises(ConflictError):
        async with UnitOfWork(test_db, "dangling_link"):
            await test_db.execute(
                paper_authors.insert(), [{"paper_id": 99, "author_id": 1}],
            )

    links = await test_db.execute(select(paper_authors))
    assert links.all() == []


async def test_deleting_paper_row_cascades_to_links(test_db):
    async with UnitOfWork(test_db, "seed"):
        test_db.add(Author(name="Alice"))
        test_db.add(Paper(title="X", published_in="ICSE", year=2024))
        await test_db.flush()
        await test_db.execute(
            paper_authors.insert(), [{"paper_id": 1, "author_id": 1}],
        )

    async with UnitOfWork(test_db, "drop_paper"):
        await test_db.execute(delete(Paper).where(Paper.id == 1))

    links = await test_db.execute(select(paper_authors))
    assert links.all() == []
    assert await test_db.scalar(select(Author.name)) == "Alice"
