"""
weightdep.stats.common.indeptest
================================

Asymptotic independence tests for dependence measures.

A measure value (computed elsewhere) is first standardized into a test
statistic and then mapped to a two-sided p-value for the null hypothesis
of independence.

Mathematical Background
-----------------------
With n the effective sample size, the statistics are

    Pearson:    Z = atanh(r) * sqrt(n - 3)
    Spearman:   Z = atanh(rho) * sqrt((n - 3) / 1.06)
    Kendall:    Z = tau * sqrt(9 n / 4)
    Blomqvist:  Z = beta * sqrt(n)
    Hoeffding:  B = D / 30 + 1 / (36 n)

The first four are asymptotically standard normal, p = 2 * Phi(-|Z|).
B is the Blum-Kiefer-Rosenblatt statistic; n * B converges to a
non-normal law whose upper tail is tabulated below and interpolated
linearly, with an exponential approximation outside the table.

References:
    Blum, J.R., Kiefer, J. and Rosenblatt, M. (1961). Distribution free
    tests of independence based on the sample distribution function.
    Annals of Mathematical Statistics 32(2), 485-498.

Examples
--------
>>> z = test_statistic(0.5, "kendall", 36)
>>> z
4.5
>>> round(asymptotic_p_value(z, "kendall"), 6)
7e-06
"""

from __future__ import annotations
import logging
import math
from typing import Sequence, Tuple, Union

import numpy as np
from scipy.stats import norm

from weightdep.core.errors import InvalidArgument, InvalidInput
from weightdep.core.names import Measure

logger = logging.getLogger(__name__)

# Upper-tail probabilities of the rescaled Blum-Kiefer-Rosenblatt statistic.
HOEFFDING_GRID: Tuple[float, ...] = (
    1.1, 1.15, 1.2, 1.25, 1.3, 1.35, 1.4, 1.45, 1.5, 1.55, 1.6,
    1.65, 1.7, 1.75, 1.8, 1.85, 1.9, 1.95, 2.0, 2.05, 2.1, 2.15, 2.2,
    2.25, 2.3, 2.35, 2.4, 2.45, 2.5, 2.55, 2.6, 2.65, 2.7, 2.75,
    2.8, 2.85, 2.9, 2.95, 3.0, 3.05, 3.1, 3.15, 3.2, 3.25, 3.3, 3.35,
    3.4, 3.45, 3.5, 3.55, 3.6, 3.65, 3.7, 3.75, 3.8, 3.85, 3.9, 3.95,
    4.0, 4.05, 4.1, 4.15, 4.2, 4.25, 4.3, 4.35, 4.4, 4.45, 4.5, 4.55,
    4.6, 4.65, 4.7, 4.75, 4.8, 4.85, 4.9, 4.95, 5.0, 5.5, 6.0, 6.5, 7.0,
    7.5, 8.0, 8.5,
)  # fmt: skip

HOEFFDING_PVALUES: Tuple[float, ...] = (
    0.5297, 0.4918, 0.4565, 0.4236, 0.3930, 0.3648, 0.3387, 0.3146,
    0.2924, 0.2719, 0.2530, 0.2355, 0.2194, 0.2045, 0.1908, 0.1781,
    0.1663, 0.1554, 0.1453, 0.1359, 0.1273, 0.1192, 0.1117, 0.1047,
    0.0982, 0.0921, 0.0864, 0.0812, 0.0762, 0.0716, 0.0673, 0.0633,
    0.0595, 0.0560, 0.0527, 0.0496, 0.0467, 0.0440, 0.0414, 0.0390,
    0.0368, 0.0347, 0.0327, 0.0308, 0.0291, 0.0274, 0.0259, 0.0244,
    0.0230, 0.0217, 0.0205, 0.0194, 0.0183, 0.0173, 0.0163, 0.0154,
    0.0145, 0.0137, 0.0130, 0.0123, 0.0116, 0.0110, 0.0104, 0.0098,
    0.0093, 0.0087, 0.0083, 0.0078, 0.0074, 0.0070, 0.0066, 0.0063,
    0.0059, 0.0056, 0.0053, 0.0050, 0.0047, 0.0045, 0.0042, 0.0025,
    0.0014, 0.0008, 0.0005, 0.0003, 0.0002, 0.0001,
)  # fmt: skip

# Exponential tail p = exp(a - b * B) used outside the table.
_TAIL_INTERCEPT = 0.3885037
_TAIL_SLOPE = 1.164879
_MIN_PVALUE = 1e-12


def linear_interp(x: float, grid: Sequence[float], values: Sequence[float]) -> float:
    """
    Piecewise-linear interpolation on an increasing grid.

    The bracketing interval is found by scanning from the low end. At a
    grid point the tabulated value is returned exactly.

    Args:
        x: Point to evaluate
        grid: Strictly increasing grid points
        values: Values at the grid points

    Returns:
        Interpolated value at x

    Raises:
        InvalidArgument: grid and values differ in length, or x lies
            outside [grid[0], grid[-1]]

    Examples:
        >>> linear_interp(1.5, [1.0, 2.0, 3.0], [10.0, 20.0, 40.0])
        15.0
        >>> linear_interp(3.0, [1.0, 2.0, 3.0], [10.0, 20.0, 40.0])
        40.0
    """
    if len(grid) != len(values) or len(grid) < 2:
        raise InvalidArgument("grid and values must have the same size (at least 2)")
    if not (grid[0] <= x <= grid[-1]):
        raise InvalidArgument(
            f"x = {x} is outside the interpolation grid [{grid[0]}, {grid[-1]}]"
        )

    # find upper end point of interval
    i = 1
    while x > grid[i]:
        i += 1

    w = (x - grid[i - 1]) / (grid[i] - grid[i - 1])
    return (1.0 - w) * values[i - 1] + w * values[i]


def phoeffb(b: float, n: float) -> float:
    """
    Asymptotic p-value of Hoeffding's B under independence.

    Args:
        b: Sample estimate of the Blum-Kiefer-Rosenblatt statistic B
        n: (Effective) sample size

    Returns:
        Approximate upper-tail probability in [1e-12, 1]

    Note:
        Inside the table the p-value is interpolated; above it the
        exponential tail is used. Below the table the exponential tail is
        not allowed to fall under the first tabulated probability, which
        keeps the p-value non-increasing in B.
    """
    b_scaled = b * 0.5 * math.pi**4 * (n - 1)
    if math.isnan(b_scaled):
        return float("nan")

    if HOEFFDING_GRID[0] < b_scaled < HOEFFDING_GRID[-1]:
        logger.debug("hoeffding p-value from table at B = %.4f", b_scaled)
        return linear_interp(b_scaled, HOEFFDING_GRID, HOEFFDING_PVALUES)

    logger.debug("hoeffding p-value from exponential tail at B = %.4f", b_scaled)
    p = math.exp(min(_TAIL_INTERCEPT - _TAIL_SLOPE * b_scaled, 0.0))
    if b_scaled <= HOEFFDING_GRID[0]:
        p = max(p, HOEFFDING_PVALUES[0])
    return max(_MIN_PVALUE, p)


def test_statistic(
    measure_value: float, method: Union[Measure, str], n_eff: float
) -> float:
    """
    Standardize a dependence measure into its test statistic.

    Args:
        measure_value: Value of the dependence measure
        method: Measure name or alias
        n_eff: Effective sample size of the underlying data

    Returns:
        The test statistic (see the module docstring for the formulas)

    Raises:
        UnsupportedMeasure: unknown measure name
        InvalidInput: n_eff too small for the standardization, or a
            Pearson/Spearman value outside [-1, 1]
    """
    measure = Measure.parse(method)
    min_n_eff = 3.0 if measure in (Measure.PEARSON, Measure.SPEARMAN) else 0.0
    if not n_eff > min_n_eff:
        raise InvalidInput(
            f"effective sample size must exceed {min_n_eff:g} for "
            f"{measure.value}, got {n_eff}"
        )

    if measure is Measure.HOEFFDING:
        return measure_value / 30.0 + 1.0 / (36.0 * n_eff)
    if measure is Measure.KENDALL:
        return measure_value * math.sqrt(9.0 * n_eff / 4.0)
    if measure is Measure.BLOMQVIST:
        return measure_value * math.sqrt(n_eff)

    if abs(measure_value) > 1.0:
        raise InvalidInput(
            f"{measure.value} correlation must lie in [-1, 1], got {measure_value}"
        )
    # |r| = 1 maps to an infinite statistic, i.e. a p-value of 0
    with np.errstate(divide="ignore"):
        z = float(np.arctanh(measure_value))
    if measure is Measure.PEARSON:
        return z * math.sqrt(n_eff - 3.0)
    return z * math.sqrt((n_eff - 3.0) / 1.06)


def asymptotic_p_value(
    statistic: float, method: Union[Measure, str], n_eff: float = 0.0
) -> float:
    """
    Asymptotic two-sided p-value of an independence test.

    Args:
        statistic: Value returned by `test_statistic`
        method: Measure name or alias
        n_eff: Effective sample size; only used (and required) for Hoeffding

    Returns:
        p-value in [0, 1]

    Raises:
        UnsupportedMeasure: unknown measure name
        InvalidArgument: Hoeffding without a positive n_eff

    Examples:
        >>> asymptotic_p_value(0.0, "pearson")
        1.0
        >>> round(asymptotic_p_value(1.959964, "spearman"), 4)
        0.05
    """
    measure = Measure.parse(method)
    if measure is Measure.HOEFFDING:
        if not n_eff > 0:
            raise InvalidArgument("must provide n_eff > 0 for method 'hoeffding'")
        return phoeffb(statistic, n_eff)
    return 2.0 * float(norm.cdf(-abs(statistic)))
