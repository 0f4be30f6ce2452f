from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Dict, List, Sequence

from prscope.core.existence import ExistenceChecker
from prscope.core.filtering import filter_by_date_range
from prscope.core.pagination import PageAggregator
from prscope.core.ports.http_gateway import HttpGateway
from prscope.core.ports.logger import Logger
from prscope.core.projection import project
from prscope.core.schema.outcome import Outcome
from prscope.core.schema.pr import PROJECTED_KEYS, PullRequestQuery, PullRequestRecord
from prscope.core.validation import validate_date_range, validate_non_empty_string

BRANCH_OWNER = "owner"
BRANCH_REPO = "repo"
BRANCH_PULLS = "pulls"

# Failure precedence when several branches fail in the same call.
BRANCH_PRIORITY = (BRANCH_OWNER, BRANCH_REPO, BRANCH_PULLS)


class PullRequestService:
    """Answers "which pull requests touched this repository in this window"."""

    def __init__(self, gateway: HttpGateway, logger: Logger) -> None:
        self._logger = logger
        self._checker = ExistenceChecker(gateway, logger)
        self._aggregator = PageAggregator(gateway, logger)

    def get_pull_requests(self, query: PullRequestQuery) -> List[PullRequestRecord]:
        date_range = validate_date_range(query.start_date, query.end_date)
        validate_non_empty_string(query.owner, "owner")
        validate_non_empty_string(query.repo, "repo")

        outcomes = self._run_concurrently(
            {
                BRANCH_OWNER: lambda: self._checker.owner_exists(query.owner),
                BRANCH_REPO: lambda: self._checker.repo_exists(query.owner, query.repo),
                BRANCH_PULLS: lambda: self._aggregator.fetch_all_pages(
                    query.owner, query.repo
                ),
            }
        )
        pulls = self._resolve(outcomes)

        filtered = filter_by_date_range(pulls, date_range)
        projected = [project(record, PROJECTED_KEYS) for record in filtered]
        self._logger.info(
            "Pull requests selected",
            owner=query.owner,
            repo=query.repo,
            start_date=query.start_date,
            end_date=query.end_date,
            fetched=len(pulls),
            selected=len(projected),
        )
        return projected

    def _run_concurrently(
        self, branches: Dict[str, Callable[[], object]]
    ) -> List[Outcome]:
        with ThreadPoolExecutor(
            max_workers=len(branches),
            thread_name_prefix="prscope",
        ) as executor:
            futures = [
                executor.submit(Outcome.capture, name, func)
                for name, func in branches.items()
            ]
            return [future.result() for future in futures]

    def _resolve(self, outcomes: Sequence[Outcome]) -> List[PullRequestRecord]:
        ordered = sorted(
            outcomes, key=lambda outcome: BRANCH_PRIORITY.index(outcome.name)
        )
        failures = [outcome for outcome in ordered if outcome.failed]
        if failures:
            winner, *suppressed = failures
            for outcome in suppressed:
                self._logger.warning(
                    "Suppressed concurrent failure",
                    branch=outcome.name,
                    error=str(outcome.error),
                )
            raise winner.error

        by_name = {outcome.name: outcome for outcome in ordered}
        return by_name[BRANCH_PULLS].value
