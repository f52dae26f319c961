"""
Book status page.

Lists every book instance the store returns for the ``Available`` status,
with its book resolved, as ``"<title> : <status>"`` lines.
"""

import logging

from ..database.repository import RecordStore
from ..models.book_instance import BookInstanceStatus, format_book_status_line
from .response import Response

logger = logging.getLogger(__name__)

STATUS_NOT_FOUND = "Status not found"
AVAILABLE_FILTER = {"status": {"$eq": BookInstanceStatus.AVAILABLE.value}}


async def show_all_books_status(response: Response, book_instances: RecordStore) -> None:
    """
    Send the available book instances with status 200.

    The status filter is left to the store; whatever it returns is listed.
    Any failure sends status 500 with ``"Status not found"``.
    """
    try:
        records = await book_instances.find_all(AVAILABLE_FILTER).with_relation("book")
        lines = [format_book_status_line(record) for record in records]
        response.status(200).send(lines)
    except Exception:
        logger.exception("Failed to list book instances by status")
        try:
            response.status(500).send(STATUS_NOT_FOUND)
        except Exception:
            logger.exception("Failed to send the book status error response")
