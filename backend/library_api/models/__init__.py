"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Author is the inverse side of the Book -> Author reference

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from library_api.models.author import Author  # noqa: F401
from library_api.models.book import Book  # noqa: F401
