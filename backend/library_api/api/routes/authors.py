"""Author Routes — CRUD endpoints under /api/authors.

Invariants:
    - GET list always 200 (empty array when no authors)
    - GET/PUT/DELETE on an unknown id → 404 with empty body
    - POST → 201 + summary + Location; PUT/DELETE → 204 empty
    - Invalid content → 400 with violation details, nothing committed
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from library_api.api.urls import canonical_url
from library_api.core.domain_types import AuthorId
from library_api.infrastructure.database import get_db
from library_api.schemas.author import AuthorPayload, AuthorSummary
from library_api.schemas.errors import ErrorResponse
from library_api.services import handle_authors

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/authors", tags=["authors"])

_VALIDATION_RESPONSES = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}
_NOT_FOUND_RESPONSES = {status.HTTP_404_NOT_FOUND: {"description": "No such author (empty body)"}}


@router.get("", response_model=list[AuthorSummary])
async def list_authors(db: AsyncSession = Depends(get_db)):
    """List every author (summary view)."""
    authors = await handle_authors.list_authors(db)
    return [AuthorSummary.model_validate(a) for a in authors]


@router.get(
    "/{author_id}", name="get_author", response_model=AuthorSummary,
    responses=_NOT_FOUND_RESPONSES,
)
async def get_author(author_id: int, db: AsyncSession = Depends(get_db)):
    """Get one author."""
    author = await handle_authors.get_author_or_404(db, AuthorId(author_id))
    return AuthorSummary.model_validate(author)


@router.post(
    "", response_model=AuthorSummary,
    status_code=status.HTTP_201_CREATED, responses=_VALIDATION_RESPONSES,
)
async def create_author(
    body: AuthorPayload,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    """Create an author. Location points at GET /api/authors/{id}."""
    author = await handle_authors.create_author(db, body)
    response.headers["Location"] = canonical_url(
        request, "get_author", author_id=author.id,
    )
    return AuthorSummary.model_validate(author)


@router.put(
    "/{author_id}", status_code=status.HTTP_204_NO_CONTENT,
    responses={**_VALIDATION_RESPONSES, **_NOT_FOUND_RESPONSES},
)
async def update_author(
    author_id: int, body: AuthorPayload, db: AsyncSession = Depends(get_db),
):
    """Overwrite the fields present in the body."""
    await handle_authors.update_author(db, AuthorId(author_id), body)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{author_id}", status_code=status.HTTP_204_NO_CONTENT,
    responses=_NOT_FOUND_RESPONSES,
)
async def delete_author(author_id: int, db: AsyncSession = Depends(get_db)):
    """Delete an author; their books remain, without an author."""
    await handle_authors.delete_author(db, AuthorId(author_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
