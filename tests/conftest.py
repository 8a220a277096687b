"""Shared pytest fixtures and configuration for the lukkari test suite.

Guidelines
----------
* Every test that touches a timetable file uses ``tmp_path``.
* Core tests must be pure — the store is faked with a ``MagicMock``.
* Tests must not depend on the current working directory.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from lukkari.core.models import blank_grid
from lukkari.infra.csv_store import CsvGridStore


@pytest.fixture
def timetable_path(tmp_path: Path) -> Path:
    """Path of a not-yet-existing timetable file."""
    return tmp_path / "timetable.csv"


@pytest.fixture
def store(timetable_path: Path) -> CsvGridStore:
    """Store backed by an empty temporary directory."""
    return CsvGridStore(timetable_path)


@pytest.fixture
def blank_store(store: CsvGridStore) -> CsvGridStore:
    """Store whose file already holds the blank template."""
    store.save(blank_grid())
    return store


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Drop handlers installed by ``main`` so they never outlive a test."""
    yield
    package_logger = logging.getLogger("lukkari")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
