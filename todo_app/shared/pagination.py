"""Cursor (seek) pagination value objects.

A cursor is an opaque URL-safe token wrapping the id of the last item on the
previous page. Ids are generated by storage and never reused, so resuming
"after id N" is stable even when rows are inserted or deleted between pages.
"""

import base64
import binascii
from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

from todo_app.shared.exceptions import InvalidCursorError, ValidationError

T = TypeVar("T")

_CURSOR_PREFIX = "id:"

# Largest id a signed 64-bit INTEGER column can hold
_MAX_CURSOR_ID = 2**63 - 1


def encode_cursor(last_id: int) -> str:
    """Encode the id of the last returned item as an opaque cursor."""
    raw = f"{_CURSOR_PREFIX}{last_id}".encode("ascii")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def decode_cursor(cursor: str) -> int:
    """Decode a cursor produced by encode_cursor back into an id."""
    if not isinstance(cursor, str) or not cursor:
        raise InvalidCursorError(str(cursor))
    padded = cursor + "=" * (-len(cursor) % 4)
    try:
        raw = base64.urlsafe_b64decode(padded.encode("ascii")).decode("ascii")
    except (binascii.Error, UnicodeError, ValueError):
        raise InvalidCursorError(cursor)

    if not raw.startswith(_CURSOR_PREFIX):
        raise InvalidCursorError(cursor)
    value = raw[len(_CURSOR_PREFIX):]
    if not value.isdigit():
        raise InvalidCursorError(cursor)
    last_id = int(value)
    if last_id > _MAX_CURSOR_ID:
        raise InvalidCursorError(cursor)
    return last_id


@dataclass(frozen=True)
class PaginationRequest:
    """Page size plus an optional cursor returned by a previous page."""

    page_size: int
    cursor: Optional[str] = None

    MAX_PAGE_SIZE = 1000

    def __post_init__(self):
        """Validate pagination parameters."""
        if isinstance(self.page_size, bool) or not isinstance(self.page_size, int):
            raise ValidationError("page_size must be an integer")
        if self.page_size <= 0:
            raise ValidationError("page_size must be positive")
        if self.page_size > self.MAX_PAGE_SIZE:
            raise ValidationError(f"page_size must not exceed {self.MAX_PAGE_SIZE}")

    def after_id(self) -> Optional[int]:
        """Id to resume after, or None for the first page."""
        if self.cursor is None:
            return None
        return decode_cursor(self.cursor)


@dataclass
class PagedResult(Generic[T]):
    """A single page of items and the cursor for the next one."""

    items: List[T] = field(default_factory=list)
    next_cursor: Optional[str] = None

    @property
    def has_next_page(self) -> bool:
        return self.next_cursor is not None
