"""Structured failure descriptor carried by results.

An ``Error`` is immutable apart from its ``metadata`` mapping, which may be
appended to after construction with :meth:`Error.add_metadata`.
"""

from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import Any, ClassVar
import zlib

from ._validation import _freeze_mapping, _require

# Codes derived from class names stay within a signed 32-bit range.
_CODE_MASK = 0x7FFFFFFF


def exception_code(exc: BaseException) -> int:
    """Return a numeric code for ``exc``.

    - An integer ``errno`` (``OSError`` and friends) wins.
    - Otherwise an integer ``status_code`` attribute (HTTP-style errors).
    - Otherwise a stable CRC32 of the exception class's qualified name, so
      every exception of the same class maps to the same code across runs.
    """
    errno = getattr(exc, "errno", None)
    if isinstance(errno, int) and not isinstance(errno, bool):
        return errno
    status_code = getattr(exc, "status_code", None)
    if isinstance(status_code, int) and not isinstance(status_code, bool):
        return status_code
    cls = type(exc)
    qualified = f"{cls.__module__}.{cls.__qualname__}"
    return zlib.crc32(qualified.encode("utf-8")) & _CODE_MASK


@dataclasses.dataclass(frozen=True, slots=True)
class Error:
    """A failure with a message, a numeric code, an optional cause and metadata.

    Example:
        err = Error("user not found", code=404).add_metadata("user_id", 42)
    """

    DEFAULT: ClassVar[Error]

    message: str
    code: int = 0
    #: Passive reference to the underlying exception, if any.
    cause: BaseException | None = None
    metadata: dict[str, Any] = dataclasses.field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        """Validate field types."""
        _require(
            condition=isinstance(self.message, str),
            message="must be str",
            field_name="message",
            exc=TypeError,
        )
        _require(
            condition=isinstance(self.code, int) and not isinstance(self.code, bool),
            message="must be int",
            field_name="code",
            exc=TypeError,
        )
        _require(
            condition=self.cause is None or isinstance(self.cause, BaseException),
            message="must be an exception or None",
            field_name="cause",
            exc=TypeError,
        )

    @property
    def has_cause(self) -> bool:
        """True when an underlying exception is attached."""
        return self.cause is not None

    def add_metadata(self, key: str, value: Any) -> Error:
        """Attach ``value`` under ``key`` and return this Error.

        Raises:
            KeyError: If ``key`` is already present. Existing entries are
                never overwritten.
            TypeError: If the metadata is read-only (``Error.DEFAULT``).
        """
        if isinstance(self.metadata, MappingProxyType):
            raise TypeError(
                "metadata of a shared Error is read-only; call copy() first"
            )
        if key in self.metadata:
            raise KeyError(f"An item with the same key has already been added: {key!r}")
        self.metadata[key] = value
        return self

    def copy(self) -> Error:
        """Return an independent Error with a shallow copy of the metadata."""
        return Error(
            self.message, self.code, self.cause, metadata=dict(self.metadata)
        )

    @classmethod
    def from_exception(
        cls,
        exc: BaseException,
        message: str | None = None,
        code: int | None = None,
    ) -> Error:
        """Build an Error from an exception, keeping it as the ``cause``.

        ``message`` defaults to ``str(exc)`` (or the class name when that is
        empty) and ``code`` defaults to :func:`exception_code`.
        """
        if message is None:
            message = str(exc) or type(exc).__name__
        if code is None:
            code = exception_code(exc)
        return cls(message, code, exc)


# Default failures receive copies; the shared instance keeps read-only metadata.
Error.DEFAULT = Error("Default", 0, metadata=_freeze_mapping())  # type: ignore[arg-type]

DEFAULT_ERROR = Error.DEFAULT
