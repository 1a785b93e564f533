"""
weightdep.core
==============

Names and errors shared by every part of the package.

- `weightdep.core.names`: `Measure`, `TiesMethod`, `PreprocessOutcome`
- `weightdep.core.errors`: the `WeightDepError` hierarchy
"""
