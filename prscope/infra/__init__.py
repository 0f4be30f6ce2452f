from prscope.infra.github import GitHubHttpClient
from prscope.infra.logging import ConsoleLogger, LogfireLogger, configure_logfire

__all__ = [
    'GitHubHttpClient',
    'ConsoleLogger',
    'LogfireLogger',
    'configure_logfire',
]
