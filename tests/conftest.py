"""Pytest configuration and fixtures.

Provides environment isolation, logging configuration and small recording
doubles shared by the combinator tests.
"""

from __future__ import annotations

from contextlib import suppress
from dataclasses import dataclass, field
import logging
import os
from typing import Any

import pytest

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class Recorder:
    """Callable that records every call's positional arguments.

    Use as a switch/map/tap branch to assert which branch ran and with what.
    """

    returns: Any = None
    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.returns

    @property
    def call_count(self) -> int:
        return len(self.calls)


@pytest.fixture
def recorder() -> type[Recorder]:
    """Return the Recorder class so tests can build as many as they need."""
    return Recorder


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests."""
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_resultant_env(monkeypatch):
    """Clear RESULTANT_* env vars so configuration starts from defaults."""
    for key in list(os.environ.keys()):
        if key.startswith("RESULTANT_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("pydantic").setLevel(logging.WARNING)
