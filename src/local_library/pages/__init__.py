"""Catalog pages: request handlers that format records for display."""

from .authors import NO_AUTHORS_FOUND, get_author_list, show_all_authors
from .books_status import STATUS_NOT_FOUND, show_all_books_status
from .response import CapturedResponse, Response

__all__ = [
    "NO_AUTHORS_FOUND",
    "STATUS_NOT_FOUND",
    "CapturedResponse",
    "Response",
    "get_author_list",
    "show_all_authors",
    "show_all_books_status",
]
