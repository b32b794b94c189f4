"""The two-slot result pair returned by ``invoke``."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, NamedTuple, TypeVar

from trycall.errors import Thrown

if TYPE_CHECKING:
    from trycall.errors import ErrorLike

T = TypeVar("T")


class Outcome(NamedTuple, Generic[T]):
    """Result pair ``(error, value)``.

    Exactly one slot is meaningful: ``error`` is None and ``value`` holds the
    result, or ``error`` holds the failure and ``value`` is None. A falsy
    ``value`` is never a failure signal; check ``error`` (or ``ok``).

    Example:
        error, value = await invoke(fetch, ["id-1"])
        if error is not None:
            ...
    """

    error: ErrorLike | None
    value: T | None

    @property
    def ok(self) -> bool:
        """True when the call succeeded."""
        return self.error is None

    def unwrap(self) -> Any:
        """Return ``value``, or raise the captured error as-is.

        Error-like objects that are not exceptions are raised inside a
        ``Thrown`` carrier.
        """
        if self.error is None:
            return self.value
        if isinstance(self.error, BaseException):
            raise self.error
        raise Thrown(self.error)
