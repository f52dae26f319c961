"""
Field access helpers for records crossing the formatting boundary.

Records handed to the catalog pages can be SQLAlchemy rows, plain mappings
or any object exposing attributes. Fields may be absent, ``None`` or of the
wrong type, so every value is read through :func:`read_field` and date
values are classified into a :class:`TaggedDate` before display.
"""

import enum
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


def read_field(record: Any, name: str) -> Any:
    """Read ``name`` from a mapping or attribute-bearing record, or ``None``."""
    if record is None:
        return None
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


class DateState(str, enum.Enum):
    """Classification of a raw date field."""

    PRESENT = "present"
    MISSING = "missing"
    INVALID = "invalid"


class TaggedDate(BaseModel):
    """A date field tagged with whether it held a usable value."""

    model_config = ConfigDict(frozen=True)

    state: DateState
    value: date | None = None

    @classmethod
    def from_raw(cls, raw: Any) -> "TaggedDate":
        """Classify a raw field value without ever raising."""
        if raw is None:
            return cls(state=DateState.MISSING)
        # datetime is a date subclass; keep only the calendar part
        if isinstance(raw, datetime):
            return cls(state=DateState.PRESENT, value=raw.date())
        if isinstance(raw, date):
            return cls(state=DateState.PRESENT, value=raw)
        return cls(state=DateState.INVALID)

    @property
    def year_text(self) -> str:
        """Year of the date as text, or an empty string when unusable."""
        if self.state is DateState.PRESENT and self.value is not None:
            return str(self.value.year)
        return ""
