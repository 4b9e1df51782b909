"""Outcome of an operation that yields a value on success.

The value is held in a private slot object that exists only while the
result is successful. Every transition to faulted drops the slot, so a
faulted result never exposes stale data.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Generic, TypeVar

from resultant.errors import FaultedValueAccessError

from ._validation import _error_list
from .error import Error
from .result import Result, _ErrorTrail, _reason_to_errors

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

T = TypeVar("T")
U = TypeVar("U")
X = TypeVar("X")


@dataclasses.dataclass(frozen=True, slots=True)
class _Present(Generic[T]):
    value: T


class ValueResult(_ErrorTrail, Generic[T]):
    """Success carrying a value of type ``T``, or failure carrying errors.

    Example:
        def parse_age(raw: str) -> ValueResult[int]:
            if not raw.isdigit():
                return ValueResult.failure(f"not a number: {raw!r}")
            return ValueResult.success(int(raw))
    """

    __slots__ = ("_slot",)

    def __init__(
        self,
        slot: _Present[T] | None,
        errors: Iterable[Error] | None = None,
    ) -> None:
        super().__init__(errors if slot is None else None)
        self._slot = slot

    @property
    def is_success(self) -> bool:
        return self._slot is not None

    def _fault(self) -> None:
        self._slot = None

    @property
    def value(self) -> T:
        """The success value.

        Raises:
            FaultedValueAccessError: If the result is faulted.
        """
        slot = self._slot
        if slot is None:
            raise FaultedValueAccessError()
        return slot.value

    def value_or(self, default: T) -> T:
        """The success value, or ``default`` when faulted."""
        slot = self._slot
        return default if slot is None else slot.value

    def to_result(self) -> Result:
        """Drop the value, keeping state and a copy of the errors."""
        if self.is_success:
            return Result.success()
        return Result(False, self._errors)

    # --- Factories ---

    @classmethod
    def success(cls, value: T) -> ValueResult[T]:
        """Create a successful ValueResult holding ``value``."""
        return cls(_Present(value))

    @classmethod
    def failure(
        cls, reason: str | Error | Iterable[Error] | None = None
    ) -> ValueResult[T]:
        """Create a faulted ValueResult; ``reason`` as in ``Result.failure``."""
        return cls(None, _reason_to_errors(reason))

    @classmethod
    def from_value(cls, value: T) -> ValueResult[T]:
        """Same as :meth:`success`."""
        return cls.success(value)

    @classmethod
    def from_error(cls, error: Error) -> ValueResult[T]:
        """Create a failure holding ``error``."""
        return cls.failure(error)

    @classmethod
    def from_errors(cls, errors: Iterable[Error]) -> ValueResult[T]:
        """Create a failure holding every error in order."""
        return cls(None, _error_list(errors, "errors"))

    # --- Combinator shortcuts ---

    def switch(
        self,
        on_success: Callable[[T], object],
        on_failure: Callable[[tuple[Error, ...]], object],
    ) -> None:
        from resultant import combinators

        combinators.switch(self, on_success, on_failure)

    def map(
        self,
        on_success: Callable[[T], X],
        on_failure: Callable[[tuple[Error, ...]], X],
    ) -> X:
        from resultant import combinators

        return combinators.map(self, on_success, on_failure)

    def bind(self, func: Callable[[T], ValueResult[U]]) -> ValueResult[U]:
        from resultant import combinators

        return combinators.bind(self, func)

    def bind_try_catch(
        self,
        func: Callable[[T], U],
        fallback_error: Error,
        *,
        catch: type[BaseException] | tuple[type[BaseException], ...] = Exception,
    ) -> ValueResult[U]:
        from resultant import combinators

        return combinators.bind_try_catch(self, func, fallback_error, catch=catch)

    def tap(self, action: Callable[[T], object]) -> ValueResult[T]:
        from resultant import combinators

        return combinators.tap(self, action)

    # --- Dunder ---

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._slot == other._slot and self._errors == other._errors

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._slot is not None:
            return f"ValueResult.success({self._slot.value!r})"
        return f"ValueResult.failure({self._errors!r})"
