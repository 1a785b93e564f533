"""
weightdep.stats.common.ordering
===============================

Ordering and counting utilities.

Provides the building blocks shared by the ranker and the concordance
counter: sorting permutations, weight bookkeeping, elementary symmetric
sums of weights, and a merge-sort that counts weighted inversions per
element. These functions are measure-agnostic.
"""

from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

import numpy as np

from weightdep.core.errors import InvalidArgument


def check_sizes(
    x: Sequence[float],
    y: Sequence[float],
    weights: Optional[Sequence[float]] = None,
) -> None:
    """Raise `InvalidArgument` unless x, y (and non-empty weights) align.

    Examples:
        >>> check_sizes([1, 2], [3, 4], [0.5, 0.5])
        >>> check_sizes([1, 2], [3])
        Traceback (most recent call last):
        ...
        weightdep.core.errors.InvalidArgument: x and y must have same size; got 2 and 1
    """
    if len(x) != len(y):
        raise InvalidArgument(
            f"x and y must have same size; got {len(x)} and {len(y)}"
        )
    if weights is not None and len(weights) > 0 and len(weights) != len(x):
        raise InvalidArgument(
            f"weights and data must have same size; got {len(weights)} and {len(x)}"
        )


def as_weights(n: int, weights: Optional[Sequence[float]] = None) -> np.ndarray:
    """Return a float copy of `weights`, or unit weights if none are given."""
    if weights is None or len(weights) == 0:
        return np.ones(n, dtype=float)
    w = np.array(weights, dtype=float)
    if len(w) != n:
        raise InvalidArgument(
            f"weights and data must have same size; got {len(w)} and {n}"
        )
    return w


def get_order(x: Sequence[float]) -> np.ndarray:
    """Permutation that sorts `x` in ascending order.

    The sort is stable, so tied values keep their order of appearance.

    Examples:
        >>> get_order([3.0, 1.0, 2.0, 1.0]).tolist()
        [1, 3, 2, 0]
    """
    return np.argsort(np.asarray(x, dtype=float), kind="stable")


def invert_permutation(perm: Sequence[int]) -> np.ndarray:
    """Inverse of a permutation, i.e. `inv[perm[i]] == i`."""
    p = np.asarray(perm, dtype=np.intp)
    inv = np.empty_like(p)
    inv[p] = np.arange(len(p), dtype=np.intp)
    return inv


def sort_all(
    x: Sequence[float],
    y: Sequence[float],
    weights: Optional[Sequence[float]] = None,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Jointly sort x, y and weights by x, breaking ties with y.

    Returns:
        Tuple of (permutation, x_sorted, y_sorted, weights_sorted); the
        permutation maps sorted positions to original positions.
    """
    check_sizes(x, y, weights)
    xx = np.asarray(x, dtype=float)
    yy = np.asarray(y, dtype=float)
    w = as_weights(len(xx), weights)
    # lexsort uses the last key as primary
    perm = np.lexsort((yy, xx))
    return perm, xx[perm], yy[perm], w[perm]


def perm_sum(w: Sequence[float], k: int = 2) -> float:
    """Sum over all k-subsets of `w` of the product of their elements.

    This is the elementary symmetric polynomial of order `k`. For `k = 2`
    and unit weights it equals the number of pairs, `n * (n - 1) / 2`.

    Examples:
        >>> perm_sum([1.0, 1.0, 1.0])
        3.0
        >>> perm_sum([1.0, 2.0, 3.0], k=3)
        6.0
    """
    if k < 0:
        raise InvalidArgument(f"k must be non-negative, got {k}")
    # e[j] holds the order-j polynomial of the prefix processed so far
    e = [1.0] + [0.0] * k
    for wi in w:
        for j in range(k, 0, -1):
            e[j] += e[j - 1] * float(wi)
    return e[k]


def effective_sample_size(n: int, weights: Optional[Sequence[float]] = None) -> float:
    """Sample size used to scale asymptotic statistics.

    Args:
        n: Number of observations
        weights: Optional observation weights

    Returns:
        `n` for unweighted data, the sum of the weights otherwise
    """
    if weights is None or len(weights) == 0:
        return float(n)
    return float(np.sum(np.asarray(weights, dtype=float)))


def merge_sort_count_per_element(
    y: Sequence[float], weights: Optional[Sequence[float]] = None
) -> np.ndarray:
    """Weighted count of earlier elements with strictly smaller value.

    For each position i, computes ``sum(w[j] for j < i if y[j] < y[i])``
    in O(n log n) by merge-sorting `y` and crediting every element of the
    right half with the weight taken from the left half before it. Equal
    values earn no credit in either direction.

    Examples:
        >>> merge_sort_count_per_element([2.0, 1.0, 3.0, 3.0]).tolist()
        [0.0, 0.0, 2.0, 2.0]
        >>> merge_sort_count_per_element([1.0, 2.0, 3.0], [2.0, 1.0, 1.0]).tolist()
        [0.0, 2.0, 3.0]
    """
    yy = np.asarray(y, dtype=float).tolist()
    w = as_weights(len(yy), weights).tolist()
    counts = [0.0] * len(yy)
    _merge_sort_count(list(range(len(yy))), yy, w, counts)
    return np.asarray(counts, dtype=float)


def _merge_sort_count(
    idx: List[int], y: List[float], w: List[float], counts: List[float]
) -> List[int]:
    """Sort `idx` by `y` while accumulating credits in `counts`."""
    n = len(idx)
    if n <= 1:
        return idx

    left = _merge_sort_count(idx[: n // 2], y, w, counts)
    right = _merge_sort_count(idx[n // 2 :], y, w, counts)

    merged: List[int] = []
    i = j = 0
    w_acc = 0.0
    while i < len(left) and j < len(right):
        if y[left[i]] < y[right[j]]:
            w_acc += w[left[i]]
            merged.append(left[i])
            i += 1
        else:
            counts[right[j]] += w_acc
            merged.append(right[j])
            j += 1

    merged.extend(left[i:])
    for k in right[j:]:
        counts[k] += w_acc
        merged.append(k)

    return merged
