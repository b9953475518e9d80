"""Paper Catalog — papers, authors and the relation between them.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
