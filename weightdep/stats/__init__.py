"""
Statistical primitives for weighted dependence measures.

1. **Common** (weightdep.stats.common):
   Ranking, concordance counting, weighted medians, NaN handling and
   asymptotic independence tests. Every dependence measure is assembled
   from these pieces.

Example:
--------
>>> from weightdep.stats.common.ranks import rank
>>> rank([0.3, 0.1, 0.2]).tolist()
[2.0, 0.0, 1.0]
"""
