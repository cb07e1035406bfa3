"""Shared pytest fixtures for the full wordcraft test suite."""

from __future__ import annotations

import pytest

from wordcraft.random_source import RandomSource


@pytest.fixture
def seeded_source() -> RandomSource:
    """Provide a deterministic random source so generation tests are reproducible."""

    return RandomSource.seeded(20240611)
