"""Call a function and report its outcome as an ``(error, value)`` pair."""

from __future__ import annotations

import asyncio
import inspect
from typing import TYPE_CHECKING, Any, TypeVar

from trycall.errors import TrycallError
from trycall.normalize import callable_label, normalize_error
from trycall.options import DEFAULT_OPTIONS
from trycall.outcome import Outcome

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable

    from trycall.options import Options

T = TypeVar("T")


async def invoke(
    func: Callable[..., Awaitable[T] | T],
    args: Iterable[Any] | None = None,
    *,
    options: Options | None = None,
) -> Outcome[T]:
    """Call *func* with *args* and return ``(error, value)``.

    Works for plain functions, coroutine functions and functions returning
    any awaitable. Every ``Exception`` raised while calling or awaiting is
    reported in the error slot; cancellation and interpreter exits propagate.

    Args:
        func: The callable to run.
        args: Positional arguments, passed through unchanged. None means none.
        options: Labels and thread offloading; defaults apply when omitted.

    Returns:
        ``Outcome(None, value)`` on success, ``Outcome(error, None)`` otherwise.

    Example:
        error, total = await invoke(add, [5, 7])
        assert error is None and total == 12
    """
    opts = options or DEFAULT_OPTIONS
    call_args = tuple(args) if args is not None else ()

    try:
        if opts.offload_sync and not _is_async_callable(func):
            result = await asyncio.to_thread(func, *call_args)
        else:
            result = func(*call_args)
        if inspect.isawaitable(result):
            result = await result
    except Exception as e:
        return Outcome(normalize_error(e, func, call_args, options=opts), None)

    return Outcome(None, result)


def invoke_sync(
    func: Callable[..., T],
    args: Iterable[Any] | None = None,
    *,
    options: Options | None = None,
) -> Outcome[T]:
    """Synchronous counterpart of :func:`invoke` for code without a loop.

    A callable that hands back an awaitable cannot be settled here; the
    awaitable is closed when possible and reported as an error.
    """
    opts = options or DEFAULT_OPTIONS
    call_args = tuple(args) if args is not None else ()

    try:
        result = func(*call_args)
    except Exception as e:
        return Outcome(normalize_error(e, func, call_args, options=opts), None)

    if inspect.isawaitable(result):
        if inspect.iscoroutine(result):
            result.close()
        label = callable_label(func, anonymous_label=opts.anonymous_label)
        return Outcome(
            TrycallError(
                f"{label} returned an awaitable that invoke_sync cannot await",
                hint="Use `await invoke(...)` for asynchronous callables.",
            ),
            None,
        )

    return Outcome(None, result)


def _is_async_callable(func: Any) -> bool:
    if inspect.iscoroutinefunction(func):
        return True
    call = getattr(func, "__call__", None)  # noqa: B004
    return call is not None and inspect.iscoroutinefunction(call)
