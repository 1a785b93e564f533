"""
weightdep: weighted dependence measures and independence tests.

Pearson's r, Spearman's rho, Kendall's tau, Blomqvist's beta and
Hoeffding's D differ in their closed forms, but they are all computed from
the same few ingredients: a cleaned paired sample, weighted ranks,
per-observation concordance counts, a weighted median, and an asymptotic
null distribution. weightdep provides these ingredients with observation
weights throughout, so that every measure accepts survey or importance
weights without special cases.

The expensive step of rank correlations, counting concordant pairs, is
done in O(n log n) with a merge-sort rather than by comparing all pairs.

Example
-------
>>> import weightdep
>>> assert hasattr(weightdep, "core")
>>> assert hasattr(weightdep, "stats")
>>> assert hasattr(weightdep, "api")
"""

from weightdep import api, core, stats  # noqa: F401
