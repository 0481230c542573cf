"""
Shared fixtures for ANOVA tests.
"""

import numpy as np
import pytest


@pytest.fixture
def oneway_balanced():
    """3-group balanced design (n=10 each), clear group differences."""
    rng = np.random.default_rng(42)
    return [
        rng.normal(10.0, 2.0, 10),
        rng.normal(15.0, 2.0, 10),
        rng.normal(20.0, 2.0, 10),
    ]


@pytest.fixture
def oneway_unbalanced():
    """4 groups of unequal size, modest differences."""
    rng = np.random.default_rng(123)
    return [
        rng.normal(3.0, 1.0, 8),
        rng.normal(3.4, 1.0, 12),
        rng.normal(3.1, 1.0, 6),
        rng.normal(3.8, 1.0, 15),
    ]


@pytest.fixture
def oneway_equal_means():
    """Groups drawn from the same distribution."""
    rng = np.random.default_rng(7)
    return [rng.normal(5.0, 1.0, 20) for _ in range(3)]
