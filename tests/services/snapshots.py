"""Row snapshots for before/after comparisons in atomicity tests."""

from sqlalchemy import select

from catalog.models.author import Author
from catalog.models.paper import Paper
from catalog.models.paper_author import paper_authors


async def snapshot(db) -> dict:
    authors = await db.execute(
        select(Author.id, Author.name, Author.email, Author.affiliation)
        .order_by(Author.id)
    )
    papers = await db.execute(
        select(Paper.id, Paper.title, Paper.published_in, Paper.year)
        .order_by(Paper.id)
    )
    links = await db.execute(
        select(paper_authors.c.paper_id, paper_authors.c.author_id)
        .order_by(paper_authors.c.paper_id, paper_authors.c.author_id)
    )
    return {
        "authors": [tuple(r) for r in authors.all()],
        "papers": [tuple(r) for r in papers.all()],
        "links": [tuple(r) for r in links.all()],
    }
