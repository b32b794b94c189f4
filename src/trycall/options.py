"""Options: frozen configuration for invoke() and invoke_sync()."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import TYPE_CHECKING, Any

from dotenv import dotenv_values, find_dotenv

from trycall.errors import ConfigurationError

if TYPE_CHECKING:
    from pathlib import Path

ANONYMOUS_LABEL = "anonymous function"
MESSAGE_PREFIX = "Unknown error: from "

_ENV_PREFIX = "TRYCALL_"


def _coerce_bool(v: str) -> bool:
    """Convert string to boolean using common conventions."""
    return v.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Options:
    """Immutable options for wrapping a call.

    The defaults produce the standard diagnostic message; most callers never
    pass options at all.

    Example:
        options = Options(offload_sync=True)
        error, value = await invoke(read_blocking, ["data.bin"], options=options)
    """

    #: Label used in messages when the callable has no name of its own.
    anonymous_label: str = ANONYMOUS_LABEL
    message_prefix: str = MESSAGE_PREFIX
    #: Run synchronous callables in a worker thread (``invoke`` only).
    offload_sync: bool = False

    def __post_init__(self) -> None:
        """Validate option shapes early for clear errors."""
        if not isinstance(self.anonymous_label, str) or not self.anonymous_label:
            raise ConfigurationError(
                "anonymous_label must be a non-empty string",
                hint=f"Leave it unset to use {ANONYMOUS_LABEL!r}.",
            )
        if not isinstance(self.message_prefix, str):
            raise ConfigurationError(
                "message_prefix must be a string",
                hint=f"Leave it unset to use {MESSAGE_PREFIX!r}.",
            )
        if not isinstance(self.offload_sync, bool):
            raise ConfigurationError(
                f"offload_sync must be a bool, got {type(self.offload_sync).__name__}",
                hint="Pass offload_sync=True or set TRYCALL_OFFLOAD_SYNC=1.",
            )

    @classmethod
    def from_env(
        cls, *, dotenv_path: str | Path | None = None, **overrides: Any
    ) -> Options:
        """Build options from ``TRYCALL_*`` environment variables.

        Precedence, highest first: keyword overrides, ``os.environ``, then the
        ``.env`` file (*dotenv_path*, or the nearest one from the working
        directory). The process environment is never modified.
        """
        path = dotenv_path if dotenv_path is not None else find_dotenv(usecwd=True)
        env: dict[str, str] = {
            k: v for k, v in dotenv_values(path).items() if v is not None
        }
        env.update(os.environ)

        values: dict[str, Any] = {}
        label = env.get(f"{_ENV_PREFIX}ANONYMOUS_LABEL")
        if label is not None:
            values["anonymous_label"] = label
        prefix = env.get(f"{_ENV_PREFIX}MESSAGE_PREFIX")
        if prefix is not None:
            values["message_prefix"] = prefix
        offload = env.get(f"{_ENV_PREFIX}OFFLOAD_SYNC")
        if offload is not None:
            values["offload_sync"] = _coerce_bool(offload)

        values.update(overrides)
        return cls(**values)


DEFAULT_OPTIONS = Options()
