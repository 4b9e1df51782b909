"""Configuration: pydantic settings wall, frozen runtime payload, ambient scope.

Resolution precedence is defaults < environment < overrides. Environment
variables use the ``RESULTANT_`` prefix, e.g. ``RESULTANT_CAPTURE_TRACEBACK=1``.

Only :func:`resultant.combinators.bind_try_catch` reads configuration: it
decides at which level caught exceptions are logged and whether their
traceback is attached to the produced Error. An invalid environment value
never makes it raise: it logs a warning and uses :func:`default_config`.
"""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
from dataclasses import dataclass
from functools import cache
import logging
import os
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, Field, ValidationError, field_validator

from resultant.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping

ENV_PREFIX = "RESULTANT_"

LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseModel):
    """Schema, defaults and validation rules for configuration fields."""

    caught_exception_log_level: LogLevelName = Field(default="DEBUG")
    capture_traceback: bool = Field(default=False)

    model_config = {"extra": "forbid"}

    @field_validator("caught_exception_log_level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept level names in any case, with surrounding whitespace."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


@cache
def _default_settings() -> dict[str, Any]:
    return Settings().model_dump()


@dataclass(frozen=True)
class FrozenConfig:
    """Validated, immutable configuration consumed at runtime."""

    caught_exception_log_level: LogLevelName
    capture_traceback: bool

    @property
    def log_level(self) -> int:
        """Numeric ``logging`` level for caught exceptions."""
        return logging.getLevelNamesMapping()[self.caught_exception_log_level]


_AMBIENT: contextvars.ContextVar[FrozenConfig | None] = contextvars.ContextVar(
    "resultant_ambient_config", default=None
)

_DOTENV_LOADED: bool = False


def _try_load_dotenv() -> None:
    """Load a ``.env`` file once via python-dotenv, ignoring any failure."""
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    _DOTENV_LOADED = True
    try:
        from dotenv import load_dotenv

        load_dotenv()
    except Exception:
        return


def load_env() -> dict[str, str]:
    """Return known settings found in ``RESULTANT_*`` environment variables."""
    out: dict[str, str] = {}
    for name in Settings.model_fields:
        raw = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
        if raw is not None:
            out[name] = raw
    return out


def resolve_config(overrides: Mapping[str, Any] | None = None) -> FrozenConfig:
    """Resolve configuration from defaults, environment and overrides.

    Raises:
        ConfigurationError: If the merged values fail validation.
    """
    _try_load_dotenv()

    merged: dict[str, Any] = dict(_default_settings())
    merged.update(load_env())
    merged.update(overrides or {})

    try:
        settings = Settings.model_validate(merged)
    except ValidationError as e:
        err = e.errors()[0]
        loc = ".".join(str(p) for p in err.get("loc", ()))
        msg = err.get("msg") or "invalid value"
        if msg.startswith("Value error, "):
            msg = msg[13:]
        raise ConfigurationError(
            f"Configuration validation failed: {loc}: {msg}",
            hint=f"Check {ENV_PREFIX}{loc.upper()} or the override passed in code",
        ) from e

    return FrozenConfig(
        caught_exception_log_level=settings.caught_exception_log_level,
        capture_traceback=settings.capture_traceback,
    )


def default_config() -> FrozenConfig:
    """Return the configuration built from schema defaults alone."""
    return FrozenConfig(**_default_settings())


def current_config() -> FrozenConfig:
    """Return the ambient config set by :func:`config_scope`, else resolve."""
    cfg = _AMBIENT.get()
    return cfg if cfg is not None else resolve_config()


@contextmanager
def config_scope(
    cfg_or_overrides: Mapping[str, Any] | FrozenConfig | None = None,
    **overrides: Any,
) -> Generator[FrozenConfig]:
    """Run a block with a specific configuration. Thread- and async-safe.

    Example:
        with config_scope(capture_traceback=True):
            res = bind_try_catch(parsed, load, Error("load failed"))
    """
    if isinstance(cfg_or_overrides, FrozenConfig):
        cfg = cfg_or_overrides
    else:
        cfg = resolve_config({**(cfg_or_overrides or {}), **overrides})

    token = _AMBIENT.set(cfg)
    try:
        yield cfg
    finally:
        _AMBIENT.reset(token)
