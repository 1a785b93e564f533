"""Shared pytest fixtures for all tests."""

import numpy as np
import pytest


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator so randomized inputs are reproducible."""
    return np.random.default_rng(20201019)


@pytest.fixture
def brute_force_concordance():
    """O(n^2) reference for bivariate ranks of distinct values."""

    def count(x, y, weights=None):
        n = len(x)
        w = np.ones(n) if weights is None else np.asarray(weights, dtype=float)
        return np.array(
            [
                sum(w[j] for j in range(n) if x[j] < x[i] and y[j] < y[i])
                for i in range(n)
            ],
            dtype=float,
        )

    return count
