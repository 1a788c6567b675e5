"""Shared test fixtures."""
from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

from lazyvoids.cli.config import clear_config_cache


@pytest.fixture(autouse=True)
def _reset_global_state() -> Iterator[None]:
    """Undo logging configuration and cached config left behind by CLI runs."""
    yield
    structlog.reset_defaults()
    clear_config_cache()
