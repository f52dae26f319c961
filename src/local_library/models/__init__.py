"""
Local Library display models.

Pure formatting helpers shared by the catalog pages and the database
schema. Nothing in this package performs I/O.
"""

from .author import format_author_line, format_full_name, format_lifetime
from .book_instance import BookInstanceStatus, display_text, format_book_status_line
from .fields import DateState, TaggedDate, read_field

__all__ = [
    "BookInstanceStatus",
    "DateState",
    "TaggedDate",
    "display_text",
    "format_author_line",
    "format_book_status_line",
    "format_full_name",
    "format_lifetime",
    "read_field",
]
