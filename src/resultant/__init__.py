"""resultant: explicit success/failure results with structured errors.

Public API:
    - Error: Structured failure descriptor (message, code, cause, metadata)
    - Result: Value-less success/failure outcome
    - ValueResult: Success-with-value/failure outcome
    - combinators: switch, map, bind, bind_try_catch, tap
"""

from __future__ import annotations

import logging

from resultant import combinators
from resultant.combinators import (
    EXCEPTION_METADATA_KEY,
    TRACEBACK_METADATA_KEY,
    bind,
    bind_try_catch,
    switch,
    tap,
)
from resultant.config import FrozenConfig, config_scope, resolve_config
from resultant.core import DEFAULT_ERROR, Error, Result, ValueResult, exception_code
from resultant.errors import (
    ConfigurationError,
    FaultedValueAccessError,
    InvalidResultStateError,
    ResultantError,
    RootErrorAccessError,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("resultant")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("resultant").addHandler(logging.NullHandler())

__all__ = [  # noqa: RUF022
    # Value types
    "Error",
    "DEFAULT_ERROR",
    "Result",
    "ValueResult",
    "exception_code",
    # Combinators (``map`` lives on ``combinators`` to avoid shadowing the builtin)
    "combinators",
    "switch",
    "bind",
    "bind_try_catch",
    "tap",
    "EXCEPTION_METADATA_KEY",
    "TRACEBACK_METADATA_KEY",
    # Configuration
    "FrozenConfig",
    "config_scope",
    "resolve_config",
    # Exceptions
    "ResultantError",
    "InvalidResultStateError",
    "FaultedValueAccessError",
    "RootErrorAccessError",
    "ConfigurationError",
]
