"""Book Routes — CRUD endpoints under /api/books.

Invariants:
    - GET list always 200 (empty array when no books)
    - GET/PUT/DELETE on an unknown id → 404 with empty body
    - POST → 201 + summary (nested author or null) + Location; PUT/DELETE → 204 empty
    - An unknown idAuthor never fails the request; the book just has no author
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from library_api.api.urls import canonical_url
from library_api.core.domain_types import BookId
from library_api.infrastructure.database import get_db
from library_api.schemas.book import BookPayload, BookSummary
from library_api.schemas.errors import ErrorResponse
from library_api.services import handle_books

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/books", tags=["books"])

_VALIDATION_RESPONSES = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}
_NOT_FOUND_RESPONSES = {status.HTTP_404_NOT_FOUND: {"description": "No such book (empty body)"}}


@router.get("", response_model=list[BookSummary])
async def list_books(db: AsyncSession = Depends(get_db)):
    """List every book (summary view)."""
    books = await handle_books.list_books(db)
    return [BookSummary.model_validate(b) for b in books]


@router.get(
    "/{book_id}", name="get_book", response_model=BookSummary,
    responses=_NOT_FOUND_RESPONSES,
)
async def get_book(book_id: int, db: AsyncSession = Depends(get_db)):
    """Get one book."""
    book = await handle_books.get_book_or_404(db, BookId(book_id))
    return BookSummary.model_validate(book)


@router.post(
    "", response_model=BookSummary,
    status_code=status.HTTP_201_CREATED, responses=_VALIDATION_RESPONSES,
)
async def create_book(
    body: BookPayload,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    """Create a book, linked to idAuthor when it names an existing author."""
    book = await handle_books.create_book(db, body)
    response.headers["Location"] = canonical_url(
        request, "get_book", book_id=book.id,
    )
    return BookSummary.model_validate(book)


@router.put(
    "/{book_id}", status_code=status.HTTP_204_NO_CONTENT,
    responses={**_VALIDATION_RESPONSES, **_NOT_FOUND_RESPONSES},
)
async def update_book(
    book_id: int, body: BookPayload, db: AsyncSession = Depends(get_db),
):
    """Overwrite present fields; idAuthor is re-applied (absent clears the author)."""
    await handle_books.update_book(db, BookId(book_id), body)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{book_id}", status_code=status.HTTP_204_NO_CONTENT,
    responses=_NOT_FOUND_RESPONSES,
)
async def delete_book(book_id: int, db: AsyncSession = Depends(get_db)):
    await handle_books.delete_book(db, BookId(book_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
