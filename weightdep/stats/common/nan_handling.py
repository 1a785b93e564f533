"""
weightdep.stats.common.nan_handling
===================================

Validation and cleaning of paired samples.

`preprocess` is the gate every measure passes through before any
ranking or counting happens. It works on the caller's buffers: with
``remove_missing=True`` the lists `x`, `y` and `weights` are truncated in
place, in lock-step, and must not be reused by the caller afterwards.
`preprocessed` is the copying variant for callers that need to keep
their inputs (or hold immutable arrays).

Examples
--------
>>> nan = float("nan")
>>> x, y = [1.0, nan, 3.0, 4.0], [1.0, 2.0, nan, 5.0]
>>> preprocess(x, y, None, "pearson", remove_missing=True).value
'continue'
>>> x, y
([1.0, 4.0], [1.0, 5.0])
"""

from __future__ import annotations
import logging
from collections.abc import MutableSequence
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from weightdep.core.errors import (
    InvalidArgument,
    InvalidInput,
    MissingValuesPresent,
)
from weightdep.core.names import Measure, PreprocessOutcome
from weightdep.stats.common.ordering import check_sizes

logger = logging.getLogger(__name__)


def any_nan(x: Optional[Sequence[float]]) -> bool:
    """Whether `x` contains a NaN (an absent or empty `x` contains none)."""
    if x is None or len(x) == 0:
        return False
    return bool(np.isnan(np.asarray(x, dtype=float)).any())


def remove_incomplete(
    x: Sequence[float],
    y: Sequence[float],
    weights: Optional[Sequence[float]] = None,
) -> int:
    """Drop every observation where x, y or the weight is NaN, in place.

    Args:
        x, y: Paired samples; truncated in place when rows are dropped
        weights: Optional weights, truncated alongside x and y

    Returns:
        Number of observations removed

    Note:
        Only mutable sequences (e.g. lists) can be truncated; passing a
        numpy array that contains missing rows raises `InvalidArgument`.
    """
    check_sizes(x, y, weights)
    has_weights = weights is not None and len(weights) > 0

    incomplete = np.isnan(np.asarray(x, dtype=float)) | np.isnan(
        np.asarray(y, dtype=float)
    )
    if has_weights:
        incomplete |= np.isnan(np.asarray(weights, dtype=float))

    n_removed = int(incomplete.sum())
    if n_removed == 0:
        return 0

    buffers = [x, y, weights] if has_weights else [x, y]
    for buf in buffers:
        if not isinstance(buf, MutableSequence):
            raise InvalidArgument(
                "cannot remove missing values in place from "
                f"{type(buf).__name__}; pass lists or use preprocessed()"
            )

    keep = np.flatnonzero(~incomplete).tolist()
    for buf in buffers:
        buf[:] = [buf[i] for i in keep]

    logger.debug("removed %d incomplete observations, %d left", n_removed, len(x))
    return n_removed


def preprocess(
    x: Sequence[float],
    y: Sequence[float],
    weights: Optional[Sequence[float]],
    method: Union[Measure, str],
    remove_missing: bool,
) -> PreprocessOutcome:
    """
    Validate a paired sample and optionally strip missing observations.

    Args:
        x, y: Paired samples (consumed when rows are removed)
        weights: Optional weights, or None / empty for unit weights
        method: Measure the sample is prepared for; fixes the minimum size
        remove_missing: Strip incomplete observations instead of failing

    Returns:
        `PreprocessOutcome.CONTINUE` if the sample is usable, or
        `PreprocessOutcome.RETURN_NAN` if removal left fewer observations
        than the measure needs.

    Raises:
        UnsupportedMeasure: `method` is not a known measure alias
        InvalidArgument: the sequences have different lengths
        MissingValuesPresent: NaNs present and `remove_missing` is False
        InvalidInput: too few observations and `remove_missing` is False

    Examples:
        >>> nan = float("nan")
        >>> x, y = [1.0, nan, 3.0], [1.0, 2.0, nan]
        >>> preprocess(x, y, None, "pearson", remove_missing=True).value
        'return_nan'
        >>> preprocess([1.0, nan], [1.0, 2.0], None, "pearson", remove_missing=False)
        Traceback (most recent call last):
        ...
        weightdep.core.errors.MissingValuesPresent: there are missing values in the data; try remove_missing=True
    """
    measure = Measure.parse(method)
    check_sizes(x, y, weights)
    min_nobs = measure.min_nobs

    if remove_missing:
        remove_incomplete(x, y, weights)
        if len(x) < min_nobs:
            logger.warning(
                "only %d complete observations for %s (need %d); result is NaN",
                len(x),
                measure.value,
                min_nobs,
            )
            return PreprocessOutcome.RETURN_NAN
        return PreprocessOutcome.CONTINUE

    if any_nan(x) or any_nan(y) or any_nan(weights):
        raise MissingValuesPresent(
            "there are missing values in the data; try remove_missing=True"
        )
    if len(x) < min_nobs:
        raise InvalidInput(
            f"need at least {min_nobs} observations for {measure.value}, got {len(x)}"
        )
    return PreprocessOutcome.CONTINUE


def preprocessed(
    x: Sequence[float],
    y: Sequence[float],
    weights: Optional[Sequence[float]],
    method: Union[Measure, str],
    remove_missing: bool,
) -> Tuple[PreprocessOutcome, np.ndarray, np.ndarray, Optional[np.ndarray]]:
    """Copying variant of `preprocess`; the inputs are left untouched.

    Returns:
        Tuple of (outcome, x, y, weights) where the samples are new float
        arrays and weights is None when no weights were given.
    """
    xx = np.asarray(x, dtype=float).tolist()
    yy = np.asarray(y, dtype=float).tolist()
    has_weights = weights is not None and len(weights) > 0
    ww = np.asarray(weights, dtype=float).tolist() if has_weights else None

    outcome = preprocess(xx, yy, ww, method, remove_missing)

    return (
        outcome,
        np.asarray(xx, dtype=float),
        np.asarray(yy, dtype=float),
        np.asarray(ww, dtype=float) if ww is not None else None,
    )
