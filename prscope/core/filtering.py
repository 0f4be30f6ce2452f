from datetime import datetime, timezone
from typing import Iterable, List, Optional, Union

from prscope.core.schema.pr import TIMESTAMP_FIELDS, DateRange, PullRequestRecord
from prscope.core.validation import validate_date_range


def parse_timestamp(value: object) -> Optional[datetime]:
    """Parse an API timestamp (``2011-01-26T19:01:12Z``) into an aware UTC datetime.

    Missing or unparseable values return ``None``. Naive values are read as UTC.
    """
    if not isinstance(value, str) or not value:
        return None
    text = value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def touches_range(record: PullRequestRecord, date_range: DateRange) -> bool:
    for field_name in TIMESTAMP_FIELDS:
        instant = parse_timestamp(record.get(field_name))
        if instant is not None and date_range.contains(instant):
            return True
    return False


def filter_by_date_range(
    records: Iterable[PullRequestRecord],
    start_date: Union[str, DateRange],
    end_date: Optional[str] = None,
) -> List[PullRequestRecord]:
    if isinstance(start_date, DateRange):
        date_range = start_date
    else:
        date_range = validate_date_range(start_date, end_date)
    return [record for record in records if touches_range(record, date_range)]
