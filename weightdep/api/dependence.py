"""
weightdep.api.dependence
========================

Facade over the statistical primitives with a single validated config.

Examples
--------
>>> from weightdep.api.dependence import DependenceConfig, clean_sample, independence_test
>>> config = DependenceConfig(method="kendall", remove_missing=True)
>>> sample = clean_sample([1.0, 2.0, float("nan")], [2.0, 1.0, 3.0], config=config)
>>> sample.n, sample.is_degenerate
(2, False)
>>> result = independence_test(0.5, n=36, config=config)
>>> result.statistic
4.5
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from weightdep.core.errors import InvalidArgument
from weightdep.core.names import Measure, PreprocessOutcome, TiesMethod
from weightdep.stats.common.indeptest import asymptotic_p_value, test_statistic
from weightdep.stats.common.nan_handling import preprocessed
from weightdep.stats.common.ordering import effective_sample_size
from weightdep.stats.common.ranks import SeedLike, rank

logger = logging.getLogger(__name__)


@dataclass
class DependenceConfig:
    """
    Options shared by the facade functions.

    Attributes
    ----------
    method : str, default="pearson"
        Dependence measure, any alias accepted by `Measure.parse`
    remove_missing : bool, default=True
        Drop incomplete observations instead of raising
    ties_method : str, default="average"
        Tie policy for ranking, one of "min", "average", "first", "random"
    seed : int or numpy.random.Generator, optional
        Seed for the "random" tie policy; None gives fresh entropy per call.
        A Generator is used as is, so one random stream can be shared
        across calls

    Examples
    --------
    >>> DependenceConfig(method="tau").measure.value
    'kendall'
    >>> DependenceConfig(ties_method="dense").validate()
    Traceback (most recent call last):
    ...
    weightdep.core.errors.InvalidArgument: ties method must be one of 'min', 'average', 'first', 'random'; got 'dense'
    """

    method: str = "pearson"
    remove_missing: bool = True
    ties_method: str = "average"
    seed: SeedLike = None

    def validate(self) -> None:
        """Validate the configuration."""
        Measure.parse(self.method)
        TiesMethod.parse(self.ties_method)
        if self.seed is None or isinstance(self.seed, np.random.Generator):
            return
        if isinstance(self.seed, bool) or not isinstance(self.seed, (int, np.integer)):
            raise InvalidArgument(
                "seed must be an int or numpy.random.Generator, "
                f"got {type(self.seed).__name__}"
            )
        if self.seed < 0:
            raise InvalidArgument(f"seed must be non-negative, got {self.seed}")

    @property
    def measure(self) -> Measure:
        return Measure.parse(self.method)


@dataclass
class CleanSample:
    """
    A paired sample after preprocessing.

    Attributes
    ----------
    x, y : np.ndarray
        Complete observations
    weights : np.ndarray or None
        Weights of the complete observations, None if unweighted
    outcome : PreprocessOutcome
        Whether the sample is usable or the measure should be reported as NaN
    """

    x: np.ndarray
    y: np.ndarray
    weights: Optional[np.ndarray]
    outcome: PreprocessOutcome

    @property
    def n(self) -> int:
        return len(self.x)

    @property
    def is_degenerate(self) -> bool:
        return self.outcome is PreprocessOutcome.RETURN_NAN


@dataclass
class IndependenceTestResult:
    """
    Result of an asymptotic independence test.

    Attributes
    ----------
    method : Measure
        Dependence measure the test is based on
    measure_value : float
        Value of the dependence measure
    n_eff : float
        Effective sample size
    statistic : float
        Standardized test statistic
    p_value : float
        Asymptotic p-value; NaN when the measure value is NaN
    """

    method: Measure
    measure_value: float
    n_eff: float
    statistic: float
    p_value: float


def _resolve(config: Optional[DependenceConfig]) -> DependenceConfig:
    config = config if config is not None else DependenceConfig()
    config.validate()
    return config


def clean_sample(
    x: Sequence[float],
    y: Sequence[float],
    weights: Optional[Sequence[float]] = None,
    config: Optional[DependenceConfig] = None,
) -> CleanSample:
    """
    Preprocess a paired sample without touching the caller's data.

    Parameters
    ----------
    x, y : sequence of float
        Paired observations
    weights : sequence of float, optional
        Observation weights
    config : DependenceConfig, optional
        Measure and missing-value policy; defaults to `DependenceConfig()`

    Returns
    -------
    CleanSample
        Cleaned arrays and the preprocessing outcome
    """
    config = _resolve(config)
    outcome, xx, yy, ww = preprocessed(
        x, y, weights, config.measure, config.remove_missing
    )
    return CleanSample(x=xx, y=yy, weights=ww, outcome=outcome)


def rank_sample(
    x: Sequence[float],
    weights: Optional[Sequence[float]] = None,
    config: Optional[DependenceConfig] = None,
) -> np.ndarray:
    """
    Weighted ranks using the tie policy and seed from `config`.

    Examples
    --------
    >>> rank_sample([2.0, 2.0, 1.0]).tolist()
    [1.5, 1.5, 0.0]
    """
    config = _resolve(config)
    return rank(x, weights, config.ties_method, seed=config.seed)


def independence_test(
    measure_value: float,
    n: int,
    weights: Optional[Sequence[float]] = None,
    config: Optional[DependenceConfig] = None,
) -> IndependenceTestResult:
    """
    Asymptotic test of independence from a measure value.

    Parameters
    ----------
    measure_value : float
        Value of the dependence measure named by `config.method`
    n : int
        Number of (complete) observations the measure was computed from
    weights : sequence of float, optional
        Weights of those observations; they set the effective sample size
    config : DependenceConfig, optional
        Which measure the value belongs to

    Returns
    -------
    IndependenceTestResult
        Statistic and p-value; both NaN when `measure_value` is NaN

    Raises
    ------
    InvalidArgument
        `weights` is given and its length differs from `n`
    """
    config = _resolve(config)
    if weights is not None and len(weights) > 0 and len(weights) != n:
        raise InvalidArgument(
            f"weights and data must have same size; got {len(weights)} and {n}"
        )
    measure = config.measure
    n_eff = effective_sample_size(n, weights)

    if math.isnan(measure_value):
        logger.debug("measure value is NaN; skipping %s test", measure.value)
        nan = float("nan")
        return IndependenceTestResult(measure, measure_value, n_eff, nan, nan)

    stat = test_statistic(measure_value, measure, n_eff)
    p_value = asymptotic_p_value(stat, measure, n_eff)
    return IndependenceTestResult(measure, measure_value, n_eff, stat, p_value)
