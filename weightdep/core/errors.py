"""
weightdep.core.errors
=====================

Exceptions raised by weightdep.

All of them are contract violations detected synchronously; none is
transient. Each concrete error is also a `ValueError`, so callers that
already guard numeric code with ``except ValueError`` keep working.

- `InvalidArgument`: malformed option or mismatched sequence lengths
- `InvalidInput`: a sample too small for the requested computation
- `MissingValuesPresent`: NaNs found while removal was not requested
- `UnsupportedMeasure`: a measure name outside the known alias table
"""


class WeightDepError(Exception):
    """Base class for all weightdep errors."""


class InvalidArgument(WeightDepError, ValueError):
    pass


class InvalidInput(WeightDepError, ValueError):
    pass


class MissingValuesPresent(WeightDepError, ValueError):
    pass


class UnsupportedMeasure(WeightDepError, ValueError):
    pass
