"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - No commit() here: transaction boundaries belong to the caller
      (infrastructure.database.transaction), repositories only stage changes
"""

from typing import Protocol, Sequence

from library_api.core.domain_types import AuthorId, BookId


class AuthorLike(Protocol):
    """Structural contract for Author objects passed between layers."""
    id: int
    first_name: str | None
    last_name: str | None


class BookLike(Protocol):
    """Structural contract for Book objects passed between layers."""
    id: int
    title: str | None
    cover_text: str | None
    author: AuthorLike | None


class AuthorRepository(Protocol):
    """Contract for author persistence — implemented by shell."""
    async def find_by_id(self, author_id: AuthorId) -> AuthorLike | None: ...
    async def find_all(self) -> Sequence[AuthorLike]: ...
    def add(self, author: AuthorLike) -> None: ...
    async def remove(self, author: AuthorLike) -> None: ...


class BookRepository(Protocol):
    """Contract for book persistence — implemented by shell."""
    async def find_by_id(self, book_id: BookId) -> BookLike | None: ...
    async def find_all(self) -> Sequence[BookLike]: ...
    def add(self, book: BookLike) -> None: ...
    async def remove(self, book: BookLike) -> None: ...
