from prscope.core.schema.outcome import Outcome
from prscope.core.schema.pr import (
    PROJECTED_KEYS,
    TIMESTAMP_FIELDS,
    DateRange,
    Page,
    PullRequestQuery,
    PullRequestRecord,
)

__all__ = [
    "PROJECTED_KEYS",
    "TIMESTAMP_FIELDS",
    "DateRange",
    "Page",
    "PullRequestQuery",
    "PullRequestRecord",
    "Outcome",
]
