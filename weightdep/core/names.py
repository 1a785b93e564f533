"""
weightdep.core.names
====================

Typed names shared across the package.

- `Measure`: an Enum for the supported dependence measures.
- `TiesMethod`: an Enum for the tie-breaking policies of the ranker.
- `PreprocessOutcome`: what the caller should do after preprocessing.

Each Enum is a `str` subclass and is parsed from user input once, at the
package boundary, through its alias table.

Examples
--------
>>> from weightdep.core.names import Measure, TiesMethod
>>> Measure.parse("tau").value
'kendall'
>>> Measure.parse("hoeffd").min_nobs
5
>>> TiesMethod.parse("average") is TiesMethod.AVERAGE
True
"""

from __future__ import annotations
from enum import Enum
from typing import Dict, Union

from weightdep.core.errors import InvalidArgument, UnsupportedMeasure


class Measure(str, Enum):
    """Dependence measures with an asymptotic independence test.

    - PEARSON: Pearson's product-moment correlation
    - SPEARMAN: Spearman's rho
    - KENDALL: Kendall's tau
    - BLOMQVIST: Blomqvist's beta
    - HOEFFDING: Hoeffding's D
    """

    PEARSON = "pearson"
    SPEARMAN = "spearman"
    KENDALL = "kendall"
    BLOMQVIST = "blomqvist"
    HOEFFDING = "hoeffding"

    @classmethod
    def parse(cls, name: Union["Measure", str]) -> "Measure":
        """Map a measure or one of its aliases to the canonical member."""
        if isinstance(name, Measure):
            return name
        key = str(name).strip().lower()
        if key not in MEASURE_ALIASES:
            raise UnsupportedMeasure(
                f"Unknown measure {name!r}; expected one of {sorted(MEASURE_ALIASES)}"
            )
        return MEASURE_ALIASES[key]

    @property
    def min_nobs(self) -> int:
        """Smallest sample size for which the measure is defined."""
        return 5 if self is Measure.HOEFFDING else 2


class TiesMethod(str, Enum):
    """Tie-breaking policies for weighted ranks.

    - MIN: every tied value gets the smallest rank of its group
    - AVERAGE: every tied value gets the weighted average rank of its group
    - FIRST: ties are ranked in order of appearance
    - RANDOM: ties are ranked in a random order
    """

    MIN = "min"
    AVERAGE = "average"
    FIRST = "first"
    RANDOM = "random"

    @classmethod
    def parse(cls, name: Union["TiesMethod", str]) -> "TiesMethod":
        if isinstance(name, TiesMethod):
            return name
        try:
            return cls(name)
        except ValueError:
            raise InvalidArgument(
                "ties method must be one of 'min', 'average', 'first', 'random'; "
                f"got {name!r}"
            ) from None


class PreprocessOutcome(str, Enum):
    """Result of preprocessing a paired sample.

    - CONTINUE: the cleaned sample is usable
    - RETURN_NAN: the cleaned sample is too small; report NaN instead
    """

    CONTINUE = "continue"
    RETURN_NAN = "return_nan"


MEASURE_ALIASES: Dict[str, Measure] = {
    "pearson": Measure.PEARSON,
    "prho": Measure.PEARSON,
    "cor": Measure.PEARSON,
    "spearman": Measure.SPEARMAN,
    "srho": Measure.SPEARMAN,
    "rho": Measure.SPEARMAN,
    "kendall": Measure.KENDALL,
    "ktau": Measure.KENDALL,
    "tau": Measure.KENDALL,
    "blomqvist": Measure.BLOMQVIST,
    "bbeta": Measure.BLOMQVIST,
    "beta": Measure.BLOMQVIST,
    "hoeffding": Measure.HOEFFDING,
    "hoeffd": Measure.HOEFFDING,
    "d": Measure.HOEFFDING,
}
