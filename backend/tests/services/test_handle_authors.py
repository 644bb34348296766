"""Author Handlers — update/delete semantics, without HTTP.

Invariants:
    - Failed validation on update rolls back the staged field changes
    - Deleting an author detaches, never deletes, their books
"""

import pytest

from library_api.core.errors import EntityValidationError, ResourceNotFoundError
from library_api.models import Book
from library_api.schemas.author import AuthorPayload
from library_api.services import handle_authors


async def test_create_author_assigns_id(test_db):
    author = await handle_authors.create_author(
        test_db, AuthorPayload(first_name="Octavia", last_name="Butler"),
    )
    assert author.id is not None


async def test_update_author_rolls_back_on_violation(test_db, seed_author):
    author_id = seed_author.id  # rollback expires seed_author
    with pytest.raises(EntityValidationError):
        await handle_authors.update_author(
            test_db, author_id, AuthorPayload(first_name=""),
        )
    reloaded = await handle_authors.get_author_or_404(test_db, author_id)
    assert reloaded.first_name == "Ursula"


async def test_delete_author_detaches_books(test_db, seed_book):
    author_id = seed_book.author_id
    test_db.expunge_all()  # load the author as a request would, books included
    await handle_authors.delete_author(test_db, author_id)

    book = await test_db.get(Book, seed_book.id)
    assert book is not None
    assert book.author is None
    assert book.author_id is None


async def test_get_missing_author_raises_not_found(test_db):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await handle_authors.get_author_or_404(test_db, 404)
    assert exc_info.value.context.resource_id == 404
