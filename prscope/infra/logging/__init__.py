from prscope.infra.logging.console import ConsoleLogger
from prscope.infra.logging.logfire import LogfireLogger, configure_logfire

__all__ = ["ConsoleLogger", "LogfireLogger", "configure_logfire"]
