"""Infrastructure Layer — database sessions, units of work, logging setup.

Invariants:
    - SQLAlchemy exceptions are mapped to catalog errors before leaving this layer
"""
