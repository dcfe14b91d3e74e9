"""Shared fixtures for rustify tests."""

from __future__ import annotations

import os
from typing import Callable

import pytest

from rustify.foundation.config import clear_settings_cache
from rustify.observability import reset_logging


class Recorder:
    """Callable that records every call and returns a fixed value."""

    def __init__(self, returns: object = None) -> None:
        self.returns = returns
        self.calls: list[tuple[object, ...]] = []

    def __call__(self, *args: object) -> object:
        self.calls.append(args)
        return self.returns

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> object:
    """Strip RUSTIFY_* variables and reset cached settings/logging around each test."""
    for key in [k for k in os.environ if k.startswith("RUSTIFY_")]:
        monkeypatch.delenv(key)
    clear_settings_cache()
    reset_logging()
    yield
    clear_settings_cache()
    reset_logging()


@pytest.fixture
def recorder() -> Callable[..., Recorder]:
    """Factory for call-counting callbacks: recorder(returns=...)."""
    return Recorder
