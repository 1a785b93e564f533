"""
weightdep.stats.common
======================

Numeric primitives shared by every weighted dependence measure.

Components:
- `preprocess` / `preprocessed`: NaN removal and minimum-size checks
- `rank`: weighted ranks with min/average/first/random tie policies
- `bivariate_rank`: O(n log n) weighted concordance counts
- `median`: weighted median
- `test_statistic` / `asymptotic_p_value`: asymptotic independence tests

These functions are measure-agnostic: the closed-form coefficients
(Pearson, Spearman, Kendall, Blomqvist, Hoeffding) are built on top of
them.

Doctest (basic usage):
>>> from weightdep.stats.common import rank, bivariate_rank
>>> rank([2.0, 1.0, 2.0], ties_method="min").tolist()
[1.0, 0.0, 1.0]
>>> bivariate_rank([1.0, 2.0, 3.0], [1.0, 2.0, 3.0], weights=[1.0, 2.0, 3.0]).tolist()
[0.0, 1.0, 3.0]
"""

from __future__ import annotations

# Import all public components
from weightdep.stats.common.indeptest import (
    asymptotic_p_value,
    linear_interp,
    phoeffb,
    test_statistic,
)
from weightdep.stats.common.nan_handling import (
    any_nan,
    preprocess,
    preprocessed,
    remove_incomplete,
)
from weightdep.stats.common.ordering import (
    effective_sample_size,
    merge_sort_count_per_element,
    perm_sum,
)
from weightdep.stats.common.ranks import bivariate_rank, median, rank

__all__ = [
    "any_nan",
    "asymptotic_p_value",
    "bivariate_rank",
    "effective_sample_size",
    "linear_interp",
    "median",
    "merge_sort_count_per_element",
    "perm_sum",
    "phoeffb",
    "preprocess",
    "preprocessed",
    "rank",
    "remove_incomplete",
    "test_statistic",
]
