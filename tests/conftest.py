"""Pytest fixtures for the hyogwa test suite."""

from __future__ import annotations

import pytest

from tests.fixtures_console import ConsoleRecorder


@pytest.fixture
def console() -> ConsoleRecorder:
    return ConsoleRecorder("hi")
