"""trycall: call anything, get ``(error, value)`` back.

Public API:
    - invoke(): Await a sync or async callable and return an Outcome
    - invoke_sync(): Same contract for synchronous code
    - Outcome: The ``(error, value)`` result pair
    - Thrown: Raise a plain value as a failure
    - Options: Configuration dataclass
"""

from __future__ import annotations

import logging

from trycall.errors import (
    ConfigurationError,
    ErrorLike,
    Thrown,
    TrycallError,
    UnknownError,
    is_error,
)
from trycall.normalize import callable_label, normalize_error
from trycall.options import Options
from trycall.outcome import Outcome
from trycall.runner import invoke, invoke_sync

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("trycall")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("trycall").addHandler(logging.NullHandler())

__all__ = [
    "ConfigurationError",
    "ErrorLike",
    "Options",
    "Outcome",
    "Thrown",
    "TrycallError",
    "UnknownError",
    "callable_label",
    "invoke",
    "invoke_sync",
    "is_error",
    "normalize_error",
]
