"""Fetch a repository's pull requests and narrow them to a date window."""

from prscope.core.exceptions import (
    DateRangeOrderError,
    EmptyValueError,
    IdentifierTypeError,
    InvalidDateError,
    OwnerNotFoundError,
    PRScopeError,
    RepoNotFoundError,
)
from prscope.core.schema.pr import PROJECTED_KEYS, PullRequestQuery
from prscope.core.service import PullRequestService
from prscope.setup import get_pull_requests

__all__ = [
    "get_pull_requests",
    "PullRequestService",
    "PullRequestQuery",
    "PROJECTED_KEYS",
    "PRScopeError",
    "IdentifierTypeError",
    "EmptyValueError",
    "InvalidDateError",
    "DateRangeOrderError",
    "OwnerNotFoundError",
    "RepoNotFoundError",
]
