"""Exception hierarchy and the error capability check for trycall."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from types import TracebackType


class ErrorLike(Protocol):
    """Minimal structural contract of a structured error.

    ``args`` carries the message payload and ``__traceback__`` the stack.
    Every ``BaseException`` satisfies it.
    """

    args: tuple[Any, ...]
    __traceback__: TracebackType | None


def is_error(value: object) -> bool:
    """Return True when *value* exposes the structured-error capability.

    Classes are never errors, even exception classes: only instances carry a
    message.
    """
    if isinstance(value, type):
        return False
    return hasattr(value, "args") and hasattr(value, "__traceback__")


class TrycallError(Exception):
    """Base exception for all trycall errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(TrycallError):
    """Options validation or resolution failed."""


class UnknownError(TrycallError):
    """A callable failed with a value that is not a structured error.

    The message is a serialized diagnostic payload. The same facts stay
    available as attributes so callers never have to parse it.
    """

    def __init__(
        self,
        message: str,
        *,
        cause: Any,
        source: str,
        call_args: tuple[Any, ...] = (),
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        #: The original failure value, unchanged.
        self.cause = cause
        #: Name of the failing callable, or the anonymous label.
        self.source = source
        self.call_args = call_args


class Thrown(Exception):
    """Raise an arbitrary value as a failure.

    Python only raises exceptions, so ``raise Thrown(404)`` is how a callable
    fails with a plain value. ``invoke`` unwraps the carrier and classifies
    ``value`` itself.
    """

    def __init__(self, value: Any) -> None:
        super().__init__(value)
        self.value = value
