"""
Database package for the Local Library catalog.

This package provides:
- SQLAlchemy schema definitions (schema.py)
- Session management and connection handling (session.py)
- The record store used by the catalog pages (repository.py)
- Sample catalog data (seed.py)
"""

from .exceptions import QueryError, RepositoryException
from .repository import QueryBuilder, RecordStore, SqlQuery, SqlRecordStore, build_criteria
from .schema import Author, Base, Book, BookInstance
from .session import (
    DatabaseManager,
    get_db_manager,
    reset_db_manager,
    safe_query,
    session_scope,
)

__all__ = [
    "Author",
    "Base",
    "Book",
    "BookInstance",
    "DatabaseManager",
    "QueryBuilder",
    "QueryError",
    "RecordStore",
    "RepositoryException",
    "SqlQuery",
    "SqlRecordStore",
    "build_criteria",
    "get_db_manager",
    "reset_db_manager",
    "safe_query",
    "session_scope",
]
