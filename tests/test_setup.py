import logging

import pytest

from prscope.config.settings import load_settings
from prscope.core.exceptions import ConfigurationError
from prscope.infra.logging.console import ConsoleLogger
from prscope.setup import build_client, build_logger
from tests.settings import get_test_settings

ENV_VARS = (
    "GITHUB_TOKEN",
    "PRSCOPE_API_URL",
    "PRSCOPE_HTTP_TIMEOUT",
    "PRSCOPE_LOGGER_BACKEND",
    "PRSCOPE_LOGGER_NAME",
    "PRSCOPE_LOGFIRE_TOKEN",
    "PRSCOPE_LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch):  # noqa: ANN001
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestLoadSettings:
    def test_defaults_without_environment(self, clean_env) -> None:  # noqa: ANN001
        settings = load_settings()

        assert settings.github.token is None
        assert settings.github.api_url == "https://api.github.com"
        assert settings.github.timeout == 30.0
        assert settings.logging.backend == "console"
        assert settings.logging.name == "prscope"
        assert settings.logging.level == "INFO"

    def test_reads_environment(self, clean_env) -> None:  # noqa: ANN001
        clean_env.setenv("GITHUB_TOKEN", "abc")
        clean_env.setenv("PRSCOPE_API_URL", "https://ghe.example.com/api/v3/")
        clean_env.setenv("PRSCOPE_HTTP_TIMEOUT", "12.5")
        clean_env.setenv("PRSCOPE_LOGGER_BACKEND", "LOGFIRE")
        clean_env.setenv("PRSCOPE_LOG_LEVEL", "debug")

        settings = load_settings()

        assert settings.github.token == "abc"
        assert settings.github.api_url == "https://ghe.example.com/api/v3"
        assert settings.github.timeout == 12.5
        assert settings.logging.backend == "logfire"
        assert settings.logging.level == "DEBUG"

    def test_empty_token_means_unauthenticated(self, clean_env) -> None:  # noqa: ANN001
        clean_env.setenv("GITHUB_TOKEN", "")

        assert load_settings().github.token is None

    def test_rejects_non_numeric_timeout(self, clean_env) -> None:  # noqa: ANN001
        clean_env.setenv("PRSCOPE_HTTP_TIMEOUT", "soon")

        with pytest.raises(ConfigurationError):
            load_settings()


class TestBuildLogger:
    def test_console_backend(self) -> None:
        logger = build_logger(get_test_settings())

        assert isinstance(logger, ConsoleLogger)
        assert logging.getLogger("prscope-test").level == logging.DEBUG

    def test_logfire_requires_token(self) -> None:
        with pytest.raises(ConfigurationError):
            build_logger(get_test_settings(backend="logfire"))

    def test_unknown_backend(self) -> None:
        with pytest.raises(ConfigurationError):
            build_logger(get_test_settings(backend="syslog"))


class TestBuildClient:
    def test_uses_github_settings(self, test_settings) -> None:  # noqa: ANN001
        with build_client(test_settings) as client:
            assert client.user_url("octocat") == "https://api.test/users/octocat"
