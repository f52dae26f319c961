"""
Book instance status formatting.

A status line reads ``"<book title> : <status>"``. Missing values render as
the literal text ``null``.
"""

import enum
from typing import Any

from .fields import read_field

MISSING_TEXT = "null"


class BookInstanceStatus(str, enum.Enum):
    """Lifecycle states of a physical copy of a book."""

    AVAILABLE = "Available"
    MAINTENANCE = "Maintenance"
    LOANED = "Loaned"
    RESERVED = "Reserved"


def display_text(value: Any) -> str:
    """Render a value for display, using ``null`` for missing values."""
    if value is None:
        return MISSING_TEXT
    if isinstance(value, enum.Enum):
        return str(value.value)
    return str(value)


def format_book_status_line(record: Any) -> str:
    """Format one book instance with its resolved book for the status page."""
    book = read_field(record, "book")
    title = read_field(book, "title")
    status = read_field(record, "status")
    return f"{display_text(title)} : {display_text(status)}"
