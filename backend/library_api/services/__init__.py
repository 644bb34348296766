"""Services Layer — per-resource request handlers between routes and repositories.

Invariants:
    - One handler module per resource (handle_authors, handle_books)
    - Handlers own transaction boundaries; repositories never commit

Design Decisions:
    - Async functions over classes: no per-request state to hold
"""
