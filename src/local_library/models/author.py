"""
Author display formatting.

An author line reads ``"<family_name>, <first_name> : <birth> - <death>"``.
The name part is dropped entirely when either name is empty, and a year is
left blank when its date is missing or not a date at all.
"""

from typing import Any

from .fields import TaggedDate, read_field


def format_full_name(first_name: Any, family_name: Any) -> str:
    """Return ``"<family>, <first>"`` or an empty string if either is empty."""
    if not first_name or not family_name:
        return ""
    return f"{family_name}, {first_name}"


def format_lifetime(date_of_birth: Any, date_of_death: Any) -> str:
    """Return ``"<birth year> - <death year>"`` with blanks for unusable dates."""
    birth = TaggedDate.from_raw(date_of_birth)
    death = TaggedDate.from_raw(date_of_death)
    return f"{birth.year_text} - {death.year_text}"


def format_author_line(record: Any) -> str:
    """Format one author record for the author list page."""
    name = format_full_name(read_field(record, "first_name"), read_field(record, "family_name"))
    lifetime = format_lifetime(
        read_field(record, "date_of_birth"), read_field(record, "date_of_death")
    )
    return f"{name} : {lifetime}"
