"""
weightdep.api - User-Friendly Facade
====================================

One configuration object, `DependenceConfig`, drives preprocessing,
ranking and independence testing, so callers validate their options once
instead of passing measure and tie-policy strings to every primitive.

Examples
--------
>>> from weightdep.api.dependence import DependenceConfig, independence_test
>>> config = DependenceConfig(method="spearman")
>>> result = independence_test(0.0, n=50, config=config)
>>> result.p_value
1.0

Architecture
------------
This facade delegates to:
- weightdep.core: names and errors
- weightdep.stats.common: the numeric primitives
"""

from weightdep.api.dependence import (
    CleanSample,
    DependenceConfig,
    IndependenceTestResult,
    clean_sample,
    independence_test,
    rank_sample,
)

__all__ = [
    "CleanSample",
    "DependenceConfig",
    "IndependenceTestResult",
    "clean_sample",
    "independence_test",
    "rank_sample",
]
