"""CLI module."""

from __future__ import annotations

from lazyvoids.cli.config import LazyVoidsConfig, get_config
from lazyvoids.cli.main import app

__all__ = ["LazyVoidsConfig", "app", "get_config"]
