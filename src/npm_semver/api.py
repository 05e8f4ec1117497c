"""Stateless convenience functions over the version and range models."""

from __future__ import annotations

from functools import cmp_to_key
from collections.abc import Iterable

from .errors import InvalidRange, InvalidVersion
from .models.comparator import Operator
from .models.options import Options, resolve
from .models.range import Range
from .models.version import Version
from .parsers import grammar


def parse(version: str | Version, options: Options | None = None) -> Version:
    """Parse a version string; raises InvalidVersion."""
    return Version.parse(version, options)


def valid(version: str | Version, options: Options | None = None) -> str | None:
    """Return the normalized version string, or None when it does not parse."""
    try:
        return parse(version, options).version
    except InvalidVersion:
        return None


def clean(version: str, options: Options | None = None) -> str | None:
    """Strip surrounding whitespace and leading ``=``/``v`` and normalize.

    ``clean("  =v1.2.3  ")`` returns ``"1.2.3"``; garbage returns None.
    """
    if not isinstance(version, str):
        return None
    stripped = grammar.CLEAN_PREFIX.sub("", version.strip())
    return valid(stripped, options)


def compare(a: str | Version, b: str | Version, options: Options | None = None) -> int:
    """Return -1, 0 or 1 comparing ``a`` with ``b`` by precedence."""
    return parse(a, options).compare(parse(b, options))


def compare_build(a: str | Version, b: str | Version, options: Options | None = None) -> int:
    """Like :func:`compare`, with build metadata breaking ties."""
    return parse(a, options).compare_build(parse(b, options))


def cmp(
    a: str | Version,
    op: str | Operator,
    b: str | Version,
    options: Options | None = None,
) -> bool:
    """Evaluate ``a <op> b``; ``op`` is any symbol Operator.from_symbol accepts."""
    operator = op if isinstance(op, Operator) else Operator.from_symbol(op)
    return operator.apply(compare(a, b, options))


def satisfies(
    version: str | Version,
    range_: str | Range,
    options: Options | None = None,
) -> bool:
    """True if ``version`` satisfies ``range_``.

    Raises:
        InvalidRange: if the range does not parse.
        InvalidVersion: if the version does not parse.
    """
    opts = resolve(options)
    compiled = range_ if isinstance(range_, Range) else Range.parse(range_, opts)
    return compiled.test(Version.parse(version, compiled.options))


def valid_range(range_: str, options: Options | None = None) -> str | None:
    """Return the normalized range, or None when it does not parse."""
    try:
        return Range.parse(range_, options).range or "*"
    except InvalidRange:
        return None


def sort(versions: Iterable[str | Version], options: Options | None = None) -> list[Version]:
    """Sort ascending; versions equal by precedence are ordered by build metadata."""
    parsed = [parse(v, options) for v in versions]
    return sorted(parsed, key=cmp_to_key(Version.compare_build))


def rsort(versions: Iterable[str | Version], options: Options | None = None) -> list[Version]:
    """Sort descending, mirroring :func:`sort`."""
    parsed = [parse(v, options) for v in versions]
    return sorted(parsed, key=cmp_to_key(Version.compare_build), reverse=True)


def _satisfying(
    versions: Iterable[str | Version],
    range_: str | Range,
    options: Options | None,
) -> list[Version]:
    opts = resolve(options)
    compiled = range_ if isinstance(range_, Range) else Range.parse(range_, opts)
    found = []
    for candidate in versions:
        try:
            version = Version.parse(candidate, compiled.options)
        except InvalidVersion:
            continue
        if compiled.test(version):
            found.append(version)
    return found


def max_satisfying(
    versions: Iterable[str | Version],
    range_: str | Range,
    options: Options | None = None,
) -> Version | None:
    """Highest candidate satisfying the range; unparsable candidates are skipped."""
    found = _satisfying(versions, range_, options)
    return max(found) if found else None


def min_satisfying(
    versions: Iterable[str | Version],
    range_: str | Range,
    options: Options | None = None,
) -> Version | None:
    """Lowest candidate satisfying the range; unparsable candidates are skipped."""
    found = _satisfying(versions, range_, options)
    return min(found) if found else None
