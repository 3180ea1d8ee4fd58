"""Shared fixtures for rust_app tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from rust_app.config import get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test from default settings."""
    monkeypatch.delenv("RUST_LOG", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    """Undo handler changes made by setup_logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
