"""Pytest configuration and fixtures."""

import numpy as np
import pytest


@pytest.fixture
def rng():
    """Seeded random source for reproducible weight initialization."""
    return np.random.default_rng(42)
