"""Pytest configuration and fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Undo any logging configuration done by a test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def data_path() -> Path:
    return Path(__file__).parent / "data" / "dockerauth"


@pytest.fixture
def credentials_path(data_path: Path) -> Path:
    return data_path / "config.json"


@pytest.fixture
def config_path(data_path: Path) -> Path:
    return data_path / "config.yaml"
