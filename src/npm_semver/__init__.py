"""npm-semver: npm-compatible semantic version parsing and range matching.

The models in :mod:`npm_semver.models` hold the parsed values; the functions
re-exported here are the stateless entry points most callers need.
"""

from __future__ import annotations

from .api import (
    clean,
    cmp,
    compare,
    compare_build,
    max_satisfying,
    min_satisfying,
    parse,
    rsort,
    satisfies,
    sort,
    valid,
    valid_range,
)
from .errors import InvalidRange, InvalidVersion, SemverError
from .models import (
    DEFAULT_OPTIONS,
    Comparator,
    ComparatorSet,
    Operator,
    Options,
    OptionsBuilder,
    Range,
    Version,
)

__version__ = "0.1.0"

__all__ = [
    "Comparator",
    "ComparatorSet",
    "DEFAULT_OPTIONS",
    "InvalidRange",
    "InvalidVersion",
    "Operator",
    "Options",
    "OptionsBuilder",
    "Range",
    "SemverError",
    "Version",
    "clean",
    "cmp",
    "compare",
    "compare_build",
    "max_satisfying",
    "min_satisfying",
    "parse",
    "rsort",
    "satisfies",
    "sort",
    "valid",
    "valid_range",
]
