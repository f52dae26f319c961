"""
SQLAlchemy database schema for the Local Library catalog.

Three tables back the catalog pages:

- ``authors``: people with a name and an optional lifespan
- ``books``: catalog entries, each written by one author
- ``book_instances``: physical copies of a book with a circulation status
"""

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import declarative_base, relationship, validates
from sqlalchemy.sql import func

from ..models.author import format_full_name, format_lifetime
from ..models.book_instance import BookInstanceStatus

Base = declarative_base()


class Author(Base):
    """Authors table - read by the author list page."""

    __tablename__ = "authors"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    family_name = Column(String(100), nullable=False, index=True)
    date_of_birth = Column(Date, nullable=True)
    date_of_death = Column(Date, nullable=True)

    created_at = Column(DateTime, nullable=False, default=func.now())

    books = relationship("Book", back_populates="author", cascade="all, delete-orphan")

    __table_args__ = (Index("idx_author_family_name", "family_name"),)

    @validates("date_of_death")
    def validate_date_of_death(self, key, value):  # noqa: ARG002
        """Ensure death date is not before birth date."""
        if value and self.date_of_birth and value < self.date_of_birth:
            raise ValueError("Death date cannot be before birth date")
        return value

    @property
    def name(self) -> str:
        """Display name, empty when either name part is missing."""
        return format_full_name(self.first_name, self.family_name)

    @property
    def lifespan(self) -> str:
        return format_lifetime(self.date_of_birth, self.date_of_death)


class Book(Base):
    """Books table - catalog entries referenced by book instances."""

    __tablename__ = "books"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(500), nullable=False, index=True)
    author_id = Column(Integer, ForeignKey("authors.id"), nullable=False)
    summary = Column(Text, nullable=True)
    isbn = Column(String(13), nullable=True, unique=True)

    author = relationship("Author", back_populates="books")
    instances = relationship("BookInstance", back_populates="book", cascade="all, delete-orphan")

    __table_args__ = (Index("idx_book_author", "author_id"),)


class BookInstance(Base):
    """Book instances table - read by the book status page."""

    __tablename__ = "book_instances"

    id = Column(Integer, primary_key=True, autoincrement=True)
    book_id = Column(Integer, ForeignKey("books.id"), nullable=False)
    imprint = Column(String(200), nullable=True)
    status = Column(
        Enum(
            BookInstanceStatus,
            name="book_instance_status",
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        nullable=False,
        default=BookInstanceStatus.MAINTENANCE,
    )
    due_back = Column(Date, nullable=True)

    book = relationship("Book", back_populates="instances")

    __table_args__ = (
        Index("idx_book_instance_status", "status"),
        Index("idx_book_instance_book", "book_id"),
    )
