"""
Author list page.

``get_author_list`` queries every author sorted by family name and formats
one line per author. ``show_all_authors`` sends that list, or a fallback
message when it is empty or cannot be sent.
"""

import logging

from ..database.repository import RecordStore
from ..models.author import format_author_line
from .response import Response

logger = logging.getLogger(__name__)

NO_AUTHORS_FOUND = "No authors found"
AUTHOR_SORT = [("family_name", "ascending")]


async def get_author_list(authors: RecordStore) -> list[str]:
    """
    Return formatted author lines sorted ascending by family name.

    Any failure while querying or formatting yields an empty list.
    """
    try:
        records = await authors.find_all().order_by(AUTHOR_SORT)
        return [format_author_line(record) for record in records]
    except Exception:
        logger.exception("Failed to build the author list")
        return []


async def show_all_authors(response: Response, authors: RecordStore) -> None:
    """Send the author list, or ``"No authors found"``."""
    author_list = await get_author_list(authors)
    try:
        if author_list:
            response.send(author_list)
        else:
            response.send(NO_AUTHORS_FOUND)
    except Exception:
        logger.exception("Failed to send the author list")
        try:
            response.send(NO_AUTHORS_FOUND)
        except Exception:
            logger.exception("Failed to send the author list fallback")
