from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Outcome(Generic[T]):
    """Settled result of one concurrent branch: a value or an error, never both."""

    name: str
    value: Optional[T] = None
    error: Optional[BaseException] = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    @classmethod
    def capture(cls, name: str, func: Callable[[], T]) -> "Outcome[T]":
        try:
            return cls(name=name, value=func())
        except Exception as error:
            return cls(name=name, error=error)
