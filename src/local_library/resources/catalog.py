"""Catalog Resources - Author and Book Status Pages

Serves the catalog pages as read-only resources. Each read opens its own
database session, runs the page against a captured response and returns
the status code and body.

Resources:
- library://authors/list - Authors sorted by family name with lifespans
- library://books/status - Available book instances with their titles
"""

import logging
from typing import Any

from fastmcp.exceptions import ResourceError

from ..database.repository import SqlRecordStore
from ..database.schema import Author, BookInstance
from ..database.session import session_scope
from ..observability import trace_resource
from ..pages.authors import show_all_authors
from ..pages.books_status import show_all_books_status
from ..pages.response import CapturedResponse

logger = logging.getLogger(__name__)

AUTHORS_URI = "library://authors/list"
BOOKS_STATUS_URI = "library://books/status"


@trace_resource("authors", AUTHORS_URI)
async def list_authors_handler() -> dict[str, Any]:
    """Returns the author list page."""
    logger.debug("Resource request - %s", AUTHORS_URI)
    response = CapturedResponse()
    try:
        with session_scope() as session:
            await show_all_authors(response, SqlRecordStore(session, Author))
    except Exception as e:
        logger.exception("Error in %s resource", AUTHORS_URI)
        raise ResourceError(f"Failed to open the author catalog: {e!s}") from e
    return response.to_dict()


@trace_resource("books_status", BOOKS_STATUS_URI)
async def list_books_status_handler() -> dict[str, Any]:
    """Returns the available book instances page."""
    logger.debug("Resource request - %s", BOOKS_STATUS_URI)
    response = CapturedResponse()
    try:
        with session_scope() as session:
            await show_all_books_status(response, SqlRecordStore(session, BookInstance))
    except Exception as e:
        logger.exception("Error in %s resource", BOOKS_STATUS_URI)
        raise ResourceError(f"Failed to open the book catalog: {e!s}") from e
    return response.to_dict()


catalog_resources: list[dict[str, Any]] = [
    {
        "uri": AUTHORS_URI,
        "name": "Author List",
        "description": (
            "All authors sorted by family name, formatted as "
            "'<family name>, <first name> : <birth year> - <death year>'."
        ),
        "mime_type": "application/json",
        "handler": list_authors_handler,
    },
    {
        "uri": BOOKS_STATUS_URI,
        "name": "Available Books",
        "description": "Book instances with status 'Available', formatted as '<title> : <status>'.",
        "mime_type": "application/json",
        "handler": list_books_status_handler,
    },
]
