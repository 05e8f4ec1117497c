"""Value types for versions, comparators, ranges and options."""

from __future__ import annotations

from .comparator import Comparator, Operator
from .options import DEFAULT_OPTIONS, Options, OptionsBuilder
from .range import ComparatorSet, Range
from .version import Version

__all__ = [
    "Comparator",
    "ComparatorSet",
    "DEFAULT_OPTIONS",
    "Operator",
    "Options",
    "OptionsBuilder",
    "Range",
    "Version",
]
