"""Exceptions raised by the data-access layer."""


class RepositoryException(Exception):
    """Base exception for data-access operations."""


class QueryError(RepositoryException):
    """Raised when a query cannot be built or executed."""
