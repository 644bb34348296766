"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - AuthorId, BookId wrap the integer primary keys (1..MAX_ROW_ID)
    - NO_AUTHOR is the wire sentinel for "this book has no author"

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

AuthorId = NewType("AuthorId", int)
BookId = NewType("BookId", int)


# ─── Sentinels ───────────────────────────────────────────────────

NO_AUTHOR = AuthorId(-1)

# Column width shared by names and titles
NAME_MAX_LENGTH = 255

# Primary keys are 32-bit signed integer columns
MAX_ROW_ID = 2**31 - 1


def is_storable_id(value: int) -> bool:
    """True when value can name a row; ids outside 1..MAX_ROW_ID never exist."""
    return 1 <= value <= MAX_ROW_ID
