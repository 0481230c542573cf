"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def five_scores():
    """The canonical 1..5 sample."""
    return [1.0, 2.0, 3.0, 4.0, 5.0]


@pytest.fixture
def assessment_scores(rng):
    """40 assessment scores on a 1-5 scale, rounded to one decimal."""
    return np.round(np.clip(rng.normal(3.2, 0.8, 40), 1.0, 5.0), 1)


@pytest.fixture
def treatment_control(rng):
    """Two independent groups with a clear mean shift (n=12 each)."""
    treatment = rng.normal(4.0, 0.6, 12)
    control = rng.normal(3.0, 0.6, 12)
    return treatment, control


@pytest.fixture
def large_groups(rng):
    """Two groups large enough (df >= 30) for the normal approximation."""
    a = rng.normal(10.0, 2.0, 40)
    b = rng.normal(11.0, 2.0, 35)
    return a, b
