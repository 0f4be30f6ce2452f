import logging
from typing import Any

from prscope.core.ports.logger import Logger

DEFAULT_FORMAT = '%(asctime)s %(levelname)s %(name)s [%(threadName)s]: %(message)s'


class _ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        context = getattr(record, 'context', None)
        if not context:
            return base
        pairs = ' '.join(f'{key}={value!r}' for key, value in context.items())
        return f'{base} | {pairs}'


class ConsoleLogger(Logger):
    def __init__(self, name: str, level: int = logging.INFO) -> None:
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(_ContextFormatter(DEFAULT_FORMAT))
            self._logger.addHandler(handler)
        self._logger.propagate = False

    def debug(self, message: str, **kwargs: Any) -> None:
        self._emit(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._emit(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._emit(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._emit(logging.ERROR, message, kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        self._logger.exception(message, extra={'context': kwargs})

    def _emit(self, level: int, message: str, context: dict) -> None:
        if self._logger.isEnabledFor(level):
            self._logger.log(level, message, extra={'context': context})
