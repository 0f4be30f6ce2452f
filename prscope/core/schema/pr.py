from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone
from typing import Any, Dict, List, Mapping, Tuple

PullRequestRecord = Dict[str, Any]

PROJECTED_KEYS: Tuple[str, ...] = ("id", "user", "title", "state", "created_at")
TIMESTAMP_FIELDS: Tuple[str, ...] = (
    "created_at",
    "updated_at",
    "merged_at",
    "closed_at",
)


@dataclass(frozen=True, slots=True)
class PullRequestQuery:
    owner: str
    repo: str
    start_date: str
    end_date: str


@dataclass(frozen=True, slots=True)
class DateRange:
    start: date
    end: date

    @property
    def start_instant(self) -> datetime:
        return datetime.combine(self.start, time.min, tzinfo=timezone.utc)

    @property
    def end_instant(self) -> datetime:
        return datetime.combine(
            self.end,
            time(23, 59, 59, 999000),
            tzinfo=timezone.utc,
        )

    def contains(self, instant: datetime) -> bool:
        # Bounds are millisecond-precise; compare instants at the same precision.
        truncated = instant.replace(microsecond=instant.microsecond // 1000 * 1000)
        return self.start_instant <= truncated <= self.end_instant


@dataclass(frozen=True, slots=True)
class Page:
    records: List[PullRequestRecord]
    headers: Mapping[str, str] = field(default_factory=dict)
