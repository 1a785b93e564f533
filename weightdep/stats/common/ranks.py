"""
weightdep.stats.common.ranks
============================

Weighted ranks, bivariate ranks and the weighted median.

Ranks are 0-based and measured in weight: the rank of an observation is
the total weight of the observations below it, so with unit weights the
smallest value has rank 0 and the largest has rank n - 1 (absent ties).

Mathematical Background
-----------------------
For a tie group with weights w_1, ..., w_m and total W, the `average`
policy adds the weighted mean of the within-group offsets,

    sum_{i<j} w_i w_j / W,

which reduces to (m - 1) / 2 for unit weights.

The bivariate rank of observation i is the weight of the observations
that come before it in the joint (x, y) order and have a strictly smaller
y. For distinct values this is

    sum_j w_j 1{x_j < x_i, y_j < y_i},

the concordance count shared by Kendall's tau and Hoeffding's D.

Examples
--------
>>> rank([1.0, 1.0, 2.0], ties_method="average").tolist()
[0.5, 0.5, 2.0]
>>> bivariate_rank([1.0, 2.0, 3.0], [1.0, 3.0, 2.0]).tolist()
[0.0, 1.0, 1.0]
>>> median([1.0, 2.0, 3.0, 4.0])
2.5
"""

from __future__ import annotations
import logging
from typing import Optional, Sequence, Union

import numpy as np

from weightdep.core.errors import InvalidInput
from weightdep.core.names import TiesMethod
from weightdep.stats.common.ordering import (
    as_weights,
    check_sizes,
    get_order,
    invert_permutation,
    merge_sort_count_per_element,
    perm_sum,
    sort_all,
)

logger = logging.getLogger(__name__)

SeedLike = Union[None, int, np.random.Generator]


def rank(
    x: Sequence[float],
    weights: Optional[Sequence[float]] = None,
    ties_method: Union[TiesMethod, str] = "min",
    seed: SeedLike = None,
) -> np.ndarray:
    """
    Compute weighted ranks such that the smallest element has rank 0.

    Missing values are ranked last with zero weight, so they add nothing
    to the ranks of the others, and come back as NaN.

    Args:
        x: Input sample
        weights: Optional weights, one per observation
        ties_method: One of
            - "min": all tied values get the smallest rank of the group
            - "average": all tied values get the weighted average rank
            - "first": ties are ranked in order of appearance
            - "random": ties are ranked in a random order
        seed: Seed or `numpy.random.Generator` for the "random" policy;
            None draws fresh entropy on every call

    Returns:
        New float array of ranks aligned with `x`

    Raises:
        InvalidArgument: unknown ties method, or weights of the wrong size

    Examples:
        >>> rank([1.0, 1.0, 2.0]).tolist()
        [0.0, 0.0, 2.0]
        >>> rank([1.0, 1.0, 2.0], ties_method="first").tolist()
        [0.0, 1.0, 2.0]
        >>> rank([3.0, float("nan"), 1.0], weights=[1.0, 5.0, 2.0]).tolist()
        [2.0, nan, 0.0]
    """
    method = TiesMethod.parse(ties_method)
    xx = np.array(x, dtype=float)
    n = len(xx)
    w = as_weights(n, weights)

    nans = np.isnan(xx)
    if nans.any():
        xx[nans] = np.finfo(float).max
        w[nans] = 0.0

    ranks = np.zeros(n, dtype=float)
    if n == 0:
        return ranks

    perm = get_order(xx)
    xs = xx[perm]
    rng = np.random.default_rng(seed) if method is TiesMethod.RANDOM else None

    # first sorted position of every batch of tied values
    starts = np.flatnonzero(np.r_[True, xs[1:] != xs[:-1]])
    ends = np.r_[starts[1:], n]

    w_acc = 0.0
    for start, end in zip(starts, ends):
        group = perm[start:end]
        w_group = w[group]
        w_batch = float(w_group.sum())

        ranks[group] = w_acc
        w_acc += w_batch

        if len(group) <= 1:
            continue

        if method is TiesMethod.FIRST:
            ranks[group] += np.cumsum(w_group) - w_group
        elif method is TiesMethod.RANDOM:
            shuffled = group[rng.permutation(len(group))]
            w_shuffled = w[shuffled]
            ranks[shuffled] += np.cumsum(w_shuffled) - w_shuffled
        elif method is TiesMethod.AVERAGE and w_batch > 0:
            ranks[group] += perm_sum(w_group, 2) / w_batch

    logger.debug(
        "ranked %d values in %d groups (ties_method=%s)", n, len(starts), method.value
    )
    ranks[nans] = np.nan
    return ranks


def bivariate_rank(
    x: Sequence[float],
    y: Sequence[float],
    weights: Optional[Sequence[float]] = None,
) -> np.ndarray:
    """
    Weighted count of concordant predecessors for each observation.

    Args:
        x, y: Paired samples of equal length
        weights: Optional weights, one per observation

    Returns:
        Float array aligned with the input holding, for each observation,
        the weight of the observations preceding it in (x, y) order with a
        strictly smaller y.

    Raises:
        InvalidArgument: the sequences have different lengths

    Algorithm:
        1. Sort x, y and weights jointly by x, breaking ties with y
        2. Merge-sort y, crediting each element with the weight of the
           strictly smaller elements merged ahead of it from the left
        3. Scatter the counts back to the original positions
    """
    perm, _, ys, ws = sort_all(x, y, weights)
    counts_sorted = merge_sort_count_per_element(ys, ws)

    return counts_sorted[invert_permutation(perm)]


def median(x: Sequence[float], weights: Optional[Sequence[float]] = None) -> float:
    """
    Weighted median of a sample.

    The median is the value whose "average" rank equals the weighted
    average rank ``sum_{i<j} w_i w_j / sum(w)``; if no value hits it
    exactly, the midpoint of the two values bracketing it is returned.

    Args:
        x: Input sample
        weights: Optional weights, one per observation

    Returns:
        The weighted median

    Raises:
        InvalidArgument: x and weights differ in length
        InvalidInput: x is empty or the weights sum to zero

    Examples:
        >>> median([1.0, 2.0, 3.0, 4.0], weights=[1.0, 1.0, 1.0, 3.0])
        3.0
    """
    check_sizes(x, x, weights)
    n = len(x)
    if n == 0:
        raise InvalidInput("cannot compute the median of an empty sample")

    xx = np.asarray(x, dtype=float)
    w = as_weights(n, weights)
    w_total = float(w.sum())
    if w_total <= 0:
        raise InvalidInput("weights must have a positive sum")

    perm = get_order(xx)
    xs, ws = xx[perm], w[perm]
    ranks = rank(xs, ws, TiesMethod.AVERAGE)
    rank_avrg = perm_sum(w, 2) / w_total
    tol = 1e-12 * max(1.0, rank_avrg)

    i = 0
    while i < n - 1 and ranks[i] < rank_avrg - tol:
        i += 1

    if i == 0 or abs(ranks[i] - rank_avrg) <= tol:
        return float(xs[i])
    return float(0.5 * (xs[i - 1] + xs[i]))
