import logging
from typing import List, Optional

from prscope.config import Settings, load_settings
from prscope.core.exceptions import ConfigurationError
from prscope.core.ports.logger import Logger
from prscope.core.schema.pr import PullRequestQuery, PullRequestRecord
from prscope.core.service import PullRequestService
from prscope.infra import (
    ConsoleLogger,
    GitHubHttpClient,
    LogfireLogger,
    configure_logfire,
)


def get_pull_requests(
    owner: str,
    repo: str,
    start_date: str,
    end_date: str,
    *,
    settings: Optional[Settings] = None,
) -> List[PullRequestRecord]:
    """Fetch every pull request of ``owner/repo`` touched between two days.

    ``start_date`` and ``end_date`` are inclusive ``YYYY-MM-DD`` strings.
    Settings are read from the environment (and ``.env``) when not given.
    """
    settings = settings or load_settings()
    logger = build_logger(settings)
    with build_client(settings) as client:
        service = PullRequestService(client, logger)
        return service.get_pull_requests(
            PullRequestQuery(
                owner=owner,
                repo=repo,
                start_date=start_date,
                end_date=end_date,
            )
        )


def build_client(settings: Settings) -> GitHubHttpClient:
    return GitHubHttpClient(
        settings.github.token,
        api_url=settings.github.api_url,
        timeout=settings.github.timeout,
    )


def build_logger(settings: Settings) -> Logger:
    if settings.logging.backend == 'console':
        level = logging.getLevelName(settings.logging.level)
        if not isinstance(level, int):
            raise ConfigurationError(
                f'Unknown log level {settings.logging.level}'
            )
        return ConsoleLogger(settings.logging.name, level=level)
    if settings.logging.backend == 'logfire':
        if not settings.logging.logfire_token:
            raise ConfigurationError(
                'Logfire backend selected but PRSCOPE_LOGFIRE_TOKEN is not set'
            )
        configure_logfire(settings.logging.logfire_token)
        return LogfireLogger(settings.logging.name)
    raise ConfigurationError(f'Unknown logging backend {settings.logging.backend}')
