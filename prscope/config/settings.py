import os
from dataclasses import dataclass
from typing import Optional

from prscope.core.exceptions import ConfigurationError

DEFAULT_API_URL = "https://api.github.com"


@dataclass(frozen=True, slots=True)
class GitHubSettings:
    token: Optional[str]
    api_url: str = DEFAULT_API_URL
    timeout: float = 30.0


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    backend: str
    name: str
    logfire_token: Optional[str]
    level: str = "INFO"


@dataclass(frozen=True, slots=True)
class Settings:
    github: GitHubSettings
    logging: LoggingSettings


def load_settings() -> Settings:
    from dotenv import load_dotenv

    load_dotenv()

    github_token = _get_env_or_default("GITHUB_TOKEN")
    api_url = _get_env_or_default("PRSCOPE_API_URL", DEFAULT_API_URL)
    timeout = _env_float("PRSCOPE_HTTP_TIMEOUT", 30.0)

    logging_backend = _get_env_or_default("PRSCOPE_LOGGER_BACKEND", "console").lower()
    logging_name = _get_env_or_default("PRSCOPE_LOGGER_NAME", "prscope")
    logfire_token = _get_env_or_default("PRSCOPE_LOGFIRE_TOKEN")
    logging_level = _get_env_or_default("PRSCOPE_LOG_LEVEL", "INFO").upper()

    return Settings(
        github=GitHubSettings(
            token=github_token,
            api_url=api_url.rstrip("/"),
            timeout=timeout,
        ),
        logging=LoggingSettings(
            backend=logging_backend,
            name=logging_name,
            logfire_token=logfire_token,
            level=logging_level,
        ),
    )


def _get_env_or_default(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if not value:
        return default
    return value


def _env_float(name: str, default: float) -> float:
    value = _get_env_or_default(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError as error:
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from error
