"""Value-less outcome of an operation: success, or failure with errors.

State only moves downward. A successful result becomes faulted when an
error is added; a faulted result never becomes successful again, and errors
are only ever appended.

Results are mutated in place by their owner (``add_error``, ``add_errors``,
``combine``) and then handed out for consumption. These mutators are not
safe for concurrent use on the same instance.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Self, TypeVar

from resultant.errors import RootErrorAccessError

from ._validation import _error_list, _require
from .error import Error

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

X = TypeVar("X")


def _reason_to_errors(reason: Any) -> list[Error]:
    """Normalize a failure reason into the initial error list."""
    if reason is None:
        return [Error.DEFAULT.copy()]
    if isinstance(reason, str):
        return [Error(reason)]
    if isinstance(reason, Error):
        return [reason]
    return _error_list(reason, "errors")


class _ErrorTrail(ABC):
    """State and error bookkeeping shared by Result and ValueResult."""

    __slots__ = ("_errors",)

    def __init__(self, errors: Iterable[Error] | None = None) -> None:
        self._errors: list[Error] = list(errors) if errors is not None else []

    @property
    @abstractmethod
    def is_success(self) -> bool: ...

    @abstractmethod
    def _fault(self) -> None:
        """Move to the faulted state, dropping any success payload."""

    @property
    def is_faulted(self) -> bool:
        return not self.is_success

    def __bool__(self) -> bool:
        return self.is_success

    @property
    def errors(self) -> tuple[Error, ...]:
        """Snapshot of the error list; empty when successful."""
        return tuple(self._errors)

    @property
    def root_error(self) -> Error:
        """First error, or ``Error.DEFAULT`` when a faulted result has none.

        Raises:
            RootErrorAccessError: If the result is successful.
        """
        if self.is_success:
            raise RootErrorAccessError()
        return self._errors[0] if self._errors else Error.DEFAULT

    def add_error(self, error: Error) -> Self:
        """Mark faulted and append ``error``."""
        _require(
            condition=isinstance(error, Error),
            message=f"expected Error, got {type(error).__name__}",
            field_name="error",
            exc=TypeError,
        )
        self._fault()
        self._errors.append(error)
        return self

    def add_errors(self, errors: Iterable[Error]) -> Self:
        """Mark faulted and append every error, preserving order."""
        items = _error_list(errors, "errors")
        self._fault()
        self._errors.extend(items)
        return self

    def combine(self, *results: _ErrorTrail) -> Self:
        """Absorb the errors of every faulted result in argument order.

        Successful arguments are skipped; if none is faulted this result is
        left untouched.
        """
        for res in results:
            if res.is_faulted:
                self._fault()
                self._errors.extend(res._errors)
        return self


class Result(_ErrorTrail):
    """Outcome of an operation that produces no value.

    Example:
        res = Result.success()
        if not valid(payload):
            res.add_error(Error("payload rejected", code=422))
    """

    __slots__ = ("_success",)

    def __init__(
        self, is_success: bool, errors: Iterable[Error] | None = None
    ) -> None:
        super().__init__(errors if not is_success else None)
        self._success = is_success

    @property
    def is_success(self) -> bool:
        return self._success

    def _fault(self) -> None:
        self._success = False

    # --- Factories ---

    @classmethod
    def success(cls) -> Result:
        """Create a successful Result with no errors."""
        return cls(True)

    @classmethod
    def failure(cls, reason: str | Error | Iterable[Error] | None = None) -> Result:
        """Create a faulted Result.

        ``reason`` may be omitted (default error), a message, a single
        Error, or an iterable of Errors (possibly empty).
        """
        return cls(False, _reason_to_errors(reason))

    @classmethod
    def from_bool(cls, ok: bool) -> Result:
        """``True`` maps to success, ``False`` to the default failure."""
        return cls.success() if ok else cls.failure()

    @classmethod
    def from_error(cls, error: Error) -> Result:
        """Create a failure holding ``error``."""
        return cls.failure(error)

    @classmethod
    def from_errors(cls, errors: Iterable[Error]) -> Result:
        """Create a failure holding every error in order."""
        return cls(False, _error_list(errors, "errors"))

    @classmethod
    def from_exception(cls, exc: BaseException) -> Result:
        """Wrap ``exc`` with :meth:`Error.from_exception` into a failure."""
        return cls.failure(Error.from_exception(exc))

    # --- Combinator shortcuts ---

    def switch(
        self,
        on_success: Callable[[], object],
        on_failure: Callable[[tuple[Error, ...]], object],
    ) -> None:
        from resultant import combinators

        combinators.switch(self, on_success, on_failure)

    def map(
        self,
        on_success: Callable[[], X],
        on_failure: Callable[[tuple[Error, ...]], X],
    ) -> X:
        from resultant import combinators

        return combinators.map(self, on_success, on_failure)

    # --- Dunder ---

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._success == other._success and self._errors == other._errors

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._success:
            return "Result.success()"
        return f"Result.failure({self._errors!r})"
