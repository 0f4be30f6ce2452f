import re
from datetime import date
from typing import Optional

from prscope.core.exceptions import (
    DateRangeOrderError,
    EmptyValueError,
    IdentifierTypeError,
    InvalidDateError,
)
from prscope.core.schema.pr import DateRange

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def validate_non_empty_string(value: object, name: str = "value") -> str:
    if not isinstance(value, str):
        raise IdentifierTypeError(value)
    if not value.strip():
        raise EmptyValueError(name)
    return value


def parse_calendar_date(value: object) -> Optional[date]:
    """Parse a strict ``YYYY-MM-DD`` string.

    Returns ``None`` for anything that is not a real calendar day, including
    lexically valid strings such as ``2024-02-30``.
    """
    if not isinstance(value, str) or _DATE_PATTERN.match(value) is None:
        return None
    try:
        parsed = date.fromisoformat(value)
    except ValueError:
        return None
    if not parsed.isoformat().startswith(value):
        return None
    return parsed


def validate_date_range(start_date: object, end_date: object) -> DateRange:
    start = parse_calendar_date(start_date)
    if start is None:
        raise InvalidDateError(f"Invalid start date: {start_date}", start_date)

    end = parse_calendar_date(end_date)
    if end is None:
        raise InvalidDateError(f"Invalid end date: {end_date}", end_date)

    if end < start:
        raise DateRangeOrderError(str(start_date), str(end_date))

    return DateRange(start=start, end=end)
