"""
Record store abstraction for the catalog pages.

Pages never talk to SQLAlchemy directly. They receive a ``RecordStore`` and
build a query in two steps: ``find_all(filter)`` selects records, then
``order_by(...)`` or ``with_relation(...)`` executes it and resolves to the
list of records. Tests substitute any object with the same shape.

Filters use a small document syntax::

    {"status": "Available"}                 # implicit equality
    {"status": {"$eq": "Available"}}        # explicit operator
    {"family_name": {"$in": ["Austen", "Ghosh"]}}
"""

import logging
import operator
from collections.abc import Callable, Mapping, Sequence
from typing import Any, Protocol

from sqlalchemy import ColumnElement, asc, desc, inspect, select
from sqlalchemy.orm import Session, selectinload

from .exceptions import QueryError
from .schema import Base
from .session import safe_query

logger = logging.getLogger(__name__)

SortKey = tuple[str, str | int]

_OPERATORS: dict[str, Callable[[Any, Any], ColumnElement[bool]]] = {
    "$eq": operator.eq,
    "$ne": operator.ne,
    "$gt": operator.gt,
    "$gte": operator.ge,
    "$lt": operator.lt,
    "$lte": operator.le,
    "$in": lambda column, value: column.in_(list(value)),
    "$nin": lambda column, value: column.not_in(list(value)),
}

_ASCENDING = {"ascending", "asc", "1", 1}
_DESCENDING = {"descending", "desc", "-1", -1}


class QueryBuilder(Protocol):
    """Second step of a query: choose how to execute it."""

    async def order_by(self, keys: Sequence[SortKey]) -> list[Any]: ...

    async def with_relation(self, relation: str) -> list[Any]: ...


class RecordStore(Protocol):
    """First step of a query: select records matching a filter."""

    def find_all(self, filter: Mapping[str, Any] | None = None) -> QueryBuilder: ...


class SqlQuery:
    """A selected-but-not-executed query over one mapped model."""

    def __init__(self, session: Session, model: type[Base], criteria: list[ColumnElement[bool]]):
        self.session = session
        self.model = model
        self.criteria = criteria

    def _base_statement(self):
        statement = select(self.model)
        if self.criteria:
            statement = statement.where(*self.criteria)
        return statement

    def _execute(self, statement) -> list[Any]:
        return safe_query(
            self.session,
            lambda s: list(s.execute(statement).scalars().all()),
            f"Failed to query {self.model.__name__}",
        )

    async def order_by(self, keys: Sequence[SortKey]) -> list[Any]:
        """Execute the query sorted by ``(field, direction)`` keys."""
        clauses = [self._sort_clause(field, direction) for field, direction in keys]
        statement = self._base_statement().order_by(*clauses)
        logger.debug("Querying %s ordered by %s", self.model.__name__, keys)
        return self._execute(statement)

    async def with_relation(self, relation: str) -> list[Any]:
        """Execute the query with ``relation`` resolved on every record."""
        relationships = inspect(self.model).relationships
        if relation not in relationships:
            raise QueryError(f"{self.model.__name__} has no relation named '{relation}'")
        statement = self._base_statement().options(
            selectinload(getattr(self.model, relation))
        )
        logger.debug("Querying %s with relation %s", self.model.__name__, relation)
        return self._execute(statement)

    def _sort_clause(self, field: str, direction: str | int):
        column = _column(self.model, field)
        normalized = direction.lower() if isinstance(direction, str) else direction
        if normalized in _ASCENDING:
            return asc(column)
        if normalized in _DESCENDING:
            return desc(column)
        raise QueryError(f"Invalid sort direction for '{field}': {direction!r}")


class SqlRecordStore:
    """``RecordStore`` over a SQLAlchemy session and one mapped model."""

    def __init__(self, session: Session, model: type[Base]):
        self.session = session
        self.model = model

    def find_all(self, filter: Mapping[str, Any] | None = None) -> SqlQuery:
        """Select records matching ``filter`` (all records when empty)."""
        criteria = build_criteria(self.model, filter or {})
        return SqlQuery(self.session, self.model, criteria)


def build_criteria(model: type[Base], filter: Mapping[str, Any]) -> list[ColumnElement[bool]]:
    """
    Translate a filter document into SQLAlchemy criteria.

    Raises:
        QueryError: On unknown fields or operators
    """
    criteria: list[ColumnElement[bool]] = []
    for field, condition in filter.items():
        column = _column(model, field)
        if isinstance(condition, Mapping):
            for op, value in condition.items():
                try:
                    compare = _OPERATORS[op]
                except KeyError:
                    raise QueryError(f"Unsupported filter operator: {op}") from None
                criteria.append(compare(column, value))
        else:
            criteria.append(column == condition)
    return criteria


def _column(model: type[Base], field: str):
    if field not in inspect(model).columns:
        raise QueryError(f"{model.__name__} has no field named '{field}'")
    return getattr(model, field)
