"""
Sample catalog data for the Local Library.

The sample covers the cases the catalog pages care about: authors with a
full lifespan, only a birth date, or no dates at all, and book instances in
every circulation status.
"""

import logging
from datetime import date

from sqlalchemy.orm import Session

from ..models.book_instance import BookInstanceStatus
from .schema import Author, Book, BookInstance

logger = logging.getLogger(__name__)

SAMPLE_AUTHORS = [
    ("Patrick", "Rothfuss", date(1973, 6, 6), None),
    ("Ben", "Bova", date(1932, 11, 8), None),
    ("Isaac", "Asimov", date(1920, 1, 2), date(1992, 4, 6)),
    ("Bob", "Billings", None, None),
    ("Jim", "Jones", date(1971, 12, 16), None),
]

# (title, author family name, isbn, summary)
SAMPLE_BOOKS = [
    (
        "The Name of the Wind (The Kingkiller Chronicle, #1)",
        "Rothfuss",
        "9781473211896",
        "The tale of Kvothe, told in his own voice.",
    ),
    (
        "The Wise Man's Fear (The Kingkiller Chronicle, #2)",
        "Rothfuss",
        "9788401352836",
        "Kvothe continues his search for answers.",
    ),
    ("Apes and Angels", "Bova", "9780765379528", "Humankind's first explorers beyond the stars."),
    ("Death Wave", "Bova", "9780765379504", "A wave of deadly radiation heads toward Earth."),
    ("Foundation", "Asimov", "9780553293357", "The fall of the Galactic Empire."),
]

# (book title prefix, imprint, status)
SAMPLE_INSTANCES = [
    ("The Name of the Wind", "London Gollancz, 2014.", BookInstanceStatus.AVAILABLE),
    ("The Name of the Wind", "London Gollancz, 2014.", BookInstanceStatus.LOANED),
    ("The Wise Man's Fear", "Gollancz, 2011.", BookInstanceStatus.MAINTENANCE),
    ("Apes and Angels", "New York Tom Doherty Associates, 2016.", BookInstanceStatus.AVAILABLE),
    ("Death Wave", "New York, NY Tom Doherty Associates, LLC, 2015.", BookInstanceStatus.RESERVED),
    ("Foundation", "Bantam Spectra, 1991.", BookInstanceStatus.AVAILABLE),
]


def seed_sample_data(session: Session) -> dict[str, int]:
    """
    Insert the sample catalog into ``session``.

    Returns:
        Number of rows created per table
    """
    authors = {}
    for first_name, family_name, born, died in SAMPLE_AUTHORS:
        author = Author(
            first_name=first_name,
            family_name=family_name,
            date_of_birth=born,
            date_of_death=died,
        )
        session.add(author)
        authors[family_name] = author

    books = []
    for title, family_name, isbn, summary in SAMPLE_BOOKS:
        book = Book(title=title, author=authors[family_name], isbn=isbn, summary=summary)
        session.add(book)
        books.append(book)

    instance_count = 0
    for prefix, imprint, status in SAMPLE_INSTANCES:
        book = next(b for b in books if b.title.startswith(prefix))
        session.add(BookInstance(book=book, imprint=imprint, status=status))
        instance_count += 1

    session.flush()
    counts = {
        "authors": len(authors),
        "books": len(books),
        "book_instances": instance_count,
    }
    logger.info("Seeded sample catalog: %s", counts)
    return counts
