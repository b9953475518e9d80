"""Database Infrastructure — SQLAlchemy Base and schema bootstrap.

Invariants:
    - Tables are created from Base.metadata; there are no migrations
"""
