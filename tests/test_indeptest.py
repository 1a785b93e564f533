"""Tests for test statistics and asymptotic p-values."""

import math

import numpy as np
import pytest
from scipy.stats import norm

from weightdep.core.errors import InvalidArgument, InvalidInput, UnsupportedMeasure
from weightdep.stats.common import indeptest
from weightdep.stats.common.indeptest import (
    HOEFFDING_GRID,
    HOEFFDING_PVALUES,
    asymptotic_p_value,
    linear_interp,
    phoeffb,
)

MEASURES = ["pearson", "spearman", "kendall", "blomqvist", "hoeffding"]


def _hoeffding_stat(b_scaled, n):
    """Invert the rescaling applied inside `phoeffb`."""
    return b_scaled / (0.5 * math.pi**4 * (n - 1))


def test_linear_interp_hits_grid_points_exactly():
    for x, v in zip(HOEFFDING_GRID, HOEFFDING_PVALUES):
        assert linear_interp(x, HOEFFDING_GRID, HOEFFDING_PVALUES) == v


def test_linear_interp_midpoint():
    grid, values = [0.0, 1.0, 2.0], [1.0, 0.5, 0.0]
    assert linear_interp(0.5, grid, values) == pytest.approx(0.75)
    assert linear_interp(1.25, grid, values) == pytest.approx(0.375)


def test_linear_interp_rejects_points_off_the_grid():
    with pytest.raises(InvalidArgument):
        linear_interp(0.5, HOEFFDING_GRID, HOEFFDING_PVALUES)
    with pytest.raises(InvalidArgument):
        linear_interp(9.0, HOEFFDING_GRID, HOEFFDING_PVALUES)
    with pytest.raises(InvalidArgument):
        linear_interp(1.0, [0.0, 2.0], [1.0])


def test_hoeffding_table_is_monotone():
    assert len(HOEFFDING_GRID) == len(HOEFFDING_PVALUES) == 86
    assert all(np.diff(HOEFFDING_GRID) > 0)
    assert all(np.diff(HOEFFDING_PVALUES) < 0)


def test_phoeffb_uses_table_inside_grid():
    n = 100
    assert phoeffb(_hoeffding_stat(2.0, n), n) == pytest.approx(0.1453)
    assert phoeffb(_hoeffding_stat(2.025, n), n) == pytest.approx(0.1406)


def test_phoeffb_tails():
    n = 50
    far = phoeffb(_hoeffding_stat(10.0, n), n)
    assert far == pytest.approx(math.exp(0.3885037 - 1.164879 * 10.0))
    assert phoeffb(_hoeffding_stat(100.0, n), n) == 1e-12
    assert phoeffb(0.0, n) == 1.0
    assert phoeffb(-0.01, n) == 1.0
    assert phoeffb(_hoeffding_stat(1.0, n), n) == HOEFFDING_PVALUES[0]


def test_phoeffb_nan():
    assert math.isnan(phoeffb(float("nan"), 20))


@pytest.mark.parametrize("method", MEASURES)
def test_p_value_non_increasing_in_statistic(method):
    n_eff = 40.0
    stats = np.linspace(0.0, 0.5, 400)
    p = [asymptotic_p_value(s, method, n_eff) for s in stats]
    assert all(0.0 <= v <= 1.0 for v in p)
    assert all(b <= a + 1e-15 for a, b in zip(p, p[1:]))


@pytest.mark.parametrize("method", ["pearson", "spearman", "kendall", "blomqvist"])
def test_normal_p_value_is_symmetric(method):
    assert asymptotic_p_value(-1.3, method) == asymptotic_p_value(1.3, method)
    assert asymptotic_p_value(1.3, method) == pytest.approx(2 * norm.sf(1.3))


def test_hoeffding_p_value_requires_n_eff():
    with pytest.raises(InvalidArgument):
        asymptotic_p_value(0.01, "hoeffd")
    assert 0.0 < asymptotic_p_value(0.01, "hoeffd", 30.0) <= 1.0


def test_unknown_measure():
    with pytest.raises(UnsupportedMeasure):
        asymptotic_p_value(1.0, "chatterjee")
    with pytest.raises(UnsupportedMeasure):
        indeptest.test_statistic(0.1, "chatterjee", 10.0)


def test_statistic_formulas():
    n = 28.0
    assert indeptest.test_statistic(0.2, "prho", n) == pytest.approx(
        math.atanh(0.2) * 5.0
    )
    assert indeptest.test_statistic(0.2, "rho", n) == pytest.approx(
        math.atanh(0.2) * math.sqrt(25.0 / 1.06)
    )
    assert indeptest.test_statistic(0.2, "tau", n) == pytest.approx(
        0.2 * math.sqrt(9.0 * n / 4.0)
    )
    assert indeptest.test_statistic(0.2, "beta", n) == pytest.approx(0.2 * math.sqrt(n))
    assert indeptest.test_statistic(0.3, "d", n) == pytest.approx(
        0.3 / 30.0 + 1.0 / (36.0 * n)
    )


def test_statistic_of_perfect_correlation_is_infinite():
    z = indeptest.test_statistic(1.0, "pearson", 10.0)
    assert math.isinf(z)
    assert asymptotic_p_value(z, "pearson") == 0.0


def test_statistic_requires_enough_effective_observations():
    with pytest.raises(InvalidInput):
        indeptest.test_statistic(0.1, "pearson", 3.0)
    with pytest.raises(InvalidInput):
        indeptest.test_statistic(0.1, "kendall", 0.0)
    assert indeptest.test_statistic(0.1, "kendall", 1.0) == pytest.approx(0.15)


@pytest.mark.parametrize("method", ["pearson", "spearman"])
def test_correlation_outside_unit_interval_is_rejected(method):
    with pytest.raises(InvalidInput, match=r"\[-1, 1\]"):
        indeptest.test_statistic(1.5, method, 10.0)
    with pytest.raises(InvalidInput):
        indeptest.test_statistic(-1.0001, method, 10.0)
    assert math.isinf(indeptest.test_statistic(-1.0, method, 10.0))
