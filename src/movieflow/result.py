"""NetworkResult: the three states a fetch reports to its consumer.

A fetch always reports ``Loading(True)`` first, then exactly one terminal
state: ``Success`` carrying the data or ``Failure`` carrying a message.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")

#: Message used when an error carries no descriptive text.
UNKNOWN_ERROR = "Unknown Error"


@dataclass(frozen=True)
class Loading:
    """The fetch has started and no outcome is known yet."""

    is_loading: bool = True

    @property
    def is_terminal(self) -> bool:
        return False


@dataclass(frozen=True)
class Success(Generic[T]):
    """The fetch completed with data."""

    data: T

    @property
    def is_terminal(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """The fetch failed; ``message`` describes why."""

    message: str

    @property
    def is_terminal(self) -> bool:
        return True

    @classmethod
    def from_exception(cls, exc: BaseException) -> Failure:
        """Flatten any error into a Failure, keeping its text when it has one."""
        return cls(failure_message(exc))


NetworkResult = Union[Loading, Success[T], Failure]


def failure_message(exc: BaseException) -> str:
    """Return the error's description, or ``UNKNOWN_ERROR`` if it has none."""
    # Exception(None) renders as "None".
    if exc.args == (None,):
        return UNKNOWN_ERROR
    text = str(exc)
    return text if text.strip() else UNKNOWN_ERROR


__all__ = [
    "UNKNOWN_ERROR",
    "Failure",
    "Loading",
    "NetworkResult",
    "Success",
    "failure_message",
]
