"""Stateless functions that compose results into railway-style pipelines.

Once a pipeline stage fails, later stages are skipped and the original
errors flow through untouched. None of these functions mutate the result
they are given.

Example:
    ```python
    from resultant import Error, ValueResult
    from resultant.combinators import bind, bind_try_catch, tap

    res = bind(ValueResult.success("42"), parse_id)
    res = bind_try_catch(res, repository.load, Error("load failed", code=503))
    tap(res, audit.record)
    ```
"""

from __future__ import annotations

import logging
import traceback
from typing import TYPE_CHECKING, TypeVar, overload

from resultant.config import current_config, default_config
from resultant.core.value_result import ValueResult
from resultant.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Callable

    from resultant.config import FrozenConfig
    from resultant.core.error import Error
    from resultant.core.result import Result

log = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
X = TypeVar("X")

#: Metadata key under which ``bind_try_catch`` stores the caught exception.
EXCEPTION_METADATA_KEY = "exception"
#: Metadata key for the formatted traceback when ``capture_traceback`` is on.
TRACEBACK_METADATA_KEY = "traceback"

__all__ = [
    "EXCEPTION_METADATA_KEY",
    "TRACEBACK_METADATA_KEY",
    "bind",
    "bind_try_catch",
    "map",
    "switch",
    "tap",
]


@overload
def switch(
    result: ValueResult[T],
    on_success: Callable[[T], object],
    on_failure: Callable[[tuple[Error, ...]], object],
) -> None: ...


@overload
def switch(
    result: Result,
    on_success: Callable[[], object],
    on_failure: Callable[[tuple[Error, ...]], object],
) -> None: ...


def switch(result, on_success, on_failure):  # type: ignore[no-untyped-def]
    """Invoke exactly one branch based on the result's state.

    A ValueResult passes its value to ``on_success``; a Result calls it with
    no arguments. ``on_failure`` receives the errors.
    """
    if result.is_faulted:
        on_failure(result.errors)
    elif isinstance(result, ValueResult):
        on_success(result.value)
    else:
        on_success()


@overload
def map(  # noqa: A001
    result: ValueResult[T],
    on_success: Callable[[T], X],
    on_failure: Callable[[tuple[Error, ...]], X],
) -> X: ...


@overload
def map(  # noqa: A001
    result: Result,
    on_success: Callable[[], X],
    on_failure: Callable[[tuple[Error, ...]], X],
) -> X: ...


def map(result, on_success, on_failure):  # type: ignore[no-untyped-def]  # noqa: A001
    """Return whichever branch's value matches the result's state."""
    if result.is_faulted:
        return on_failure(result.errors)
    if isinstance(result, ValueResult):
        return on_success(result.value)
    return on_success()


def bind(
    result: ValueResult[T],
    func: Callable[[T], ValueResult[U]],
) -> ValueResult[U]:
    """Chain ``func`` onto a successful result.

    ``func``'s result is returned as-is. A faulted input short-circuits:
    ``func`` is not called and a new failure carrying the same errors is
    returned.
    """
    if result.is_faulted:
        log.debug(
            "bind short-circuited past %s with %d error(s)",
            getattr(func, "__qualname__", func),
            len(result.errors),
        )
        return ValueResult.from_errors(result.errors)
    return func(result.value)


def bind_try_catch(
    result: ValueResult[T],
    func: Callable[[T], U],
    fallback_error: Error,
    *,
    catch: type[BaseException] | tuple[type[BaseException], ...] = Exception,
) -> ValueResult[U]:
    """Chain an exception-raising ``func`` onto a successful result.

    A normal return is wrapped as success. An exception matching ``catch``
    becomes a failure holding a copy of ``fallback_error`` with the exception
    stored under ``EXCEPTION_METADATA_KEY``. Exceptions outside ``catch``
    propagate unchanged. A faulted input short-circuits like :func:`bind`.

    Args:
        result: Upstream result.
        func: Operation that signals failure by raising.
        fallback_error: Error describing the failure; never mutated, so one
            instance can be shared across calls.
        catch: Exception class or tuple of classes to convert.

    Returns:
        ValueResult wrapping ``func``'s return value or the failure.
    """
    if result.is_faulted:
        return ValueResult.from_errors(result.errors)

    try:
        out = func(result.value)
    except catch as exc:
        cfg = _handler_config()
        log.log(
            cfg.log_level,
            "bind_try_catch converted %s into error %r: %s",
            type(exc).__name__,
            fallback_error.message,
            exc,
        )
        error = fallback_error.copy().add_metadata(EXCEPTION_METADATA_KEY, exc)
        if cfg.capture_traceback:
            error.add_metadata(
                TRACEBACK_METADATA_KEY,
                "".join(traceback.format_exception(exc)),
            )
        return ValueResult.failure(error)

    return ValueResult.success(out)


def _handler_config() -> FrozenConfig:
    """Configuration for converting a caught exception; never raises."""
    try:
        return current_config()
    except ConfigurationError as e:
        log.warning("Invalid resultant configuration, using defaults: %s", e)
        return default_config()


def tap(result: ValueResult[T], action: Callable[[T], object]) -> ValueResult[T]:
    """Run ``action`` on the value of a successful result; return the result."""
    if result.is_success:
        action(result.value)
    return result
