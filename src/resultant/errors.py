"""Exception hierarchy for resultant.

Operational failures travel inside results as ``Error`` values. The
exceptions here are raised only for misuse of the API contract.
"""

from __future__ import annotations


class ResultantError(Exception):
    """Base exception for all resultant errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def __str__(self) -> str:
        """Return the message followed by the hint, when present."""
        msg = super().__str__()
        return f"{msg}. {self.hint}" if self.hint else msg


class InvalidResultStateError(ResultantError):
    """A result was read in a state that does not support the access."""


class FaultedValueAccessError(InvalidResultStateError):
    """``value`` was read on a faulted ValueResult."""

    def __init__(self, message: str = "Cannot access value of a faulted result") -> None:
        super().__init__(
            message,
            hint="Check is_success first, or use value_or()/switch()/map()",
        )


class RootErrorAccessError(InvalidResultStateError):
    """``root_error`` was read on a successful result."""

    def __init__(
        self, message: str = "Cannot access root_error of a successful result"
    ) -> None:
        super().__init__(message)


class ConfigurationError(ResultantError):
    """Configuration validation or resolution failed."""
