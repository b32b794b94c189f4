"""Error normalization: turn whatever a callable raised into a structured error.

Exceptions pass through by identity. Values raised through a ``Thrown``
carrier are classified on their own: error-like values pass through, anything
else is wrapped in an ``UnknownError`` whose message is a compact JSON
payload naming the callable, the arguments and the raised value.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic_core import PydanticSerializationError, to_json

from trycall.errors import Thrown, UnknownError, is_error
from trycall.options import DEFAULT_OPTIONS, MESSAGE_PREFIX

if TYPE_CHECKING:
    from collections.abc import Callable

    from trycall.errors import ErrorLike
    from trycall.options import Options

logger = logging.getLogger(__name__)

__all__ = ["callable_label", "normalize_error", "render_message"]


def callable_label(func: Callable[..., Any], *, anonymous_label: str) -> str:
    """Return the callable's own name, or *anonymous_label* when it has none.

    Lambdas report ``<lambda>`` as their name, which counts as anonymous.
    Partials and callable instances carry no ``__name__`` and fall back too.
    """
    name = getattr(func, "__name__", None)
    if not isinstance(name, str) or not name or name == "<lambda>":
        return anonymous_label
    return name


def render_message(
    label: str,
    call_args: tuple[Any, ...],
    value: Any,
    *,
    prefix: str = MESSAGE_PREFIX,
) -> str:
    """Serialize the diagnostic payload for a non-error failure value.

    Values JSON cannot represent are rendered with ``repr``. Never raises.
    """
    message = f"{prefix}{label}"
    payload = {"message": message, "args": list(call_args), "error": value}
    try:
        return to_json(payload, fallback=_safe_repr).decode("utf-8")
    except (PydanticSerializationError, ValueError, TypeError) as e:
        # Circular references and undecodable bytes land here.
        logger.debug("Falling back to repr() for failure payload: %s", e)

    args_text = ", ".join(_safe_repr(arg) for arg in call_args)
    return (
        f"{{'message': {message!r}, 'args': [{args_text}], "
        f"'error': {_safe_repr(value)}}}"
    )


def _safe_repr(value: Any) -> str:
    try:
        return repr(value)
    except Exception as e:
        logger.debug("repr() failed for %s: %s", type(value).__name__, e)
        return object.__repr__(value)


def normalize_error(
    exc: BaseException,
    func: Callable[..., Any],
    call_args: tuple[Any, ...] = (),
    *,
    options: Options | None = None,
) -> ErrorLike:
    """Return the structured error to report for *exc*.

    Args:
        exc: The exception caught while calling or awaiting *func*.
        func: The callable that failed; only its name is used.
        call_args: Positional arguments the callable received.
        options: Labels for the synthesized message.

    Returns:
        *exc* itself, the error-like value inside a ``Thrown`` carrier, or a
        new ``UnknownError`` for plain values.
    """
    if not isinstance(exc, Thrown):
        return exc

    value = exc.value
    if is_error(value):
        return value

    opts = options or DEFAULT_OPTIONS
    label = callable_label(func, anonymous_label=opts.anonymous_label)
    error = UnknownError(
        render_message(label, call_args, value, prefix=opts.message_prefix),
        cause=value,
        source=label,
        call_args=call_args,
    )
    error.__cause__ = exc
    logger.debug(
        "Wrapped non-error failure from %s (%s)", label, type(value).__name__
    )
    return error
