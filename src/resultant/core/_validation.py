"""Internal validation helpers shared by the core value types."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .error import Error


def _require(
    *,
    condition: bool,
    message: str,
    exc: type[Exception] = ValueError,
    field_name: str | None = None,
) -> None:
    """Centralized validation with optional field context for clearer errors."""
    if not condition:
        if field_name:
            raise exc(f"{field_name}: {message}")
        raise exc(message)


def _freeze_mapping(m: dict[str, Any] | None = None) -> MappingProxyType[str, Any]:
    """Return a read-only view over a copy of ``m``."""
    return MappingProxyType(dict(m or {}))

def _error_list(errors: Iterable[Any], field_name: str) -> list[Error]:
    """Materialize ``errors`` into a list, rejecting anything but Error items."""
    from .error import Error

    _require(
        condition=not isinstance(errors, (str, bytes, Error)),
        message="must be an iterable of Error, not a single value",
        field_name=field_name,
        exc=TypeError,
    )
    items = list(errors)
    for item in items:
        _require(
            condition=isinstance(item, Error),
            message=f"expected Error items, got {type(item).__name__}",
            field_name=field_name,
            exc=TypeError,
        )
    return items
