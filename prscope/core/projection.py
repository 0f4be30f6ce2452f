from typing import Any, Iterable, Mapping

from prscope.core.filtering import parse_timestamp
from prscope.core.schema.pr import PROJECTED_KEYS, TIMESTAMP_FIELDS, PullRequestRecord


def format_date(value: Any) -> Any:
    """Reduce an API timestamp to its UTC calendar day, ``YYYY-MM-DD``.

    ``None`` passes through. Values that are not timestamps are returned as-is.
    """
    if value is None:
        return None
    parsed = parse_timestamp(value)
    if parsed is None:
        return value
    return parsed.date().isoformat()


def _project_value(key: str, value: Any) -> Any:
    if key == "user" and isinstance(value, Mapping):
        return value.get("login")
    if key in TIMESTAMP_FIELDS:
        return format_date(value)
    return value


def project(
    record: PullRequestRecord,
    keys_to_keep: Iterable[str] = PROJECTED_KEYS,
) -> PullRequestRecord:
    keep = frozenset(keys_to_keep)
    return {
        key: _project_value(key, value)
        for key, value in record.items()
        if key in keep
    }
