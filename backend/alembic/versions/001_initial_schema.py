"""Initial schema — authors and books.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

books.author_id is ON DELETE SET NULL: removing an author detaches its
books instead of deleting them or failing on the foreign key.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "authors",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("first_name", sa.String(255), nullable=True),
        sa.Column("last_name", sa.String(255), nullable=True),
    )

    op.create_table(
        "books",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(255), nullable=True),
        sa.Column("cover_text", sa.Text, nullable=True),
        sa.Column(
            "author_id", sa.Integer,
            sa.ForeignKey("authors.id", ondelete="SET NULL"), nullable=True,
        ),
    )
    op.create_index("ix_books_author_id", "books", ["author_id"])


def downgrade() -> None:
    op.drop_index("ix_books_author_id", table_name="books")
    op.drop_table("books")
    op.drop_table("authors")
