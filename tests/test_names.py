"""Tests for measure and tie-policy name parsing."""

import pytest

from weightdep.core.errors import InvalidArgument, UnsupportedMeasure, WeightDepError
from weightdep.core.names import Measure, PreprocessOutcome, TiesMethod


@pytest.mark.parametrize(
    "alias, expected",
    [
        ("pearson", Measure.PEARSON),
        ("prho", Measure.PEARSON),
        ("cor", Measure.PEARSON),
        ("spearman", Measure.SPEARMAN),
        ("srho", Measure.SPEARMAN),
        ("rho", Measure.SPEARMAN),
        ("kendall", Measure.KENDALL),
        ("ktau", Measure.KENDALL),
        ("tau", Measure.KENDALL),
        ("blomqvist", Measure.BLOMQVIST),
        ("bbeta", Measure.BLOMQVIST),
        ("beta", Measure.BLOMQVIST),
        ("hoeffding", Measure.HOEFFDING),
        ("hoeffd", Measure.HOEFFDING),
        ("d", Measure.HOEFFDING),
        ("  Kendall ", Measure.KENDALL),
    ],
)
def test_measure_aliases(alias, expected):
    """Every documented alias maps to its canonical measure."""
    assert Measure.parse(alias) is expected


def test_measure_parse_accepts_members():
    assert Measure.parse(Measure.BLOMQVIST) is Measure.BLOMQVIST


def test_unknown_measure_is_rejected():
    with pytest.raises(UnsupportedMeasure, match="distance"):
        Measure.parse("distance")


def test_min_nobs():
    """Hoeffding's D needs five observations, the others two."""
    assert Measure.HOEFFDING.min_nobs == 5
    for measure in (Measure.PEARSON, Measure.SPEARMAN, Measure.KENDALL, Measure.BLOMQVIST):
        assert measure.min_nobs == 2


def test_ties_method_parse():
    assert TiesMethod.parse("first") is TiesMethod.FIRST
    assert TiesMethod.parse(TiesMethod.RANDOM) is TiesMethod.RANDOM
    with pytest.raises(InvalidArgument):
        TiesMethod.parse("max")


def test_enums_compare_equal_to_strings():
    """Callers may keep comparing against plain strings."""
    assert PreprocessOutcome.CONTINUE == "continue"
    assert PreprocessOutcome.RETURN_NAN == "return_nan"
    assert Measure.HOEFFDING == "hoeffding"


def test_errors_share_base_and_value_error():
    with pytest.raises(WeightDepError):
        TiesMethod.parse("dense")
    with pytest.raises(ValueError):
        Measure.parse("nope")
