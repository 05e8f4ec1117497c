"""Regular expressions for the version and range grammars.

The building blocks follow the npm semver grammar. Every pattern exists in a
strict and a loose flavour; ``[0-9]`` is used instead of ``\\d`` so that only
ASCII digits are accepted.
"""

from __future__ import annotations

import re

MAX_LENGTH = 256

# A single `0`, or a non-zero digit followed by zero or more digits.
NUMERIC_IDENTIFIER = r"0|[1-9][0-9]*"
NUMERIC_IDENTIFIER_LOOSE = r"[0-9]+"

# Zero or more digits, followed by a letter or hyphen, then letters, digits or hyphens.
NON_NUMERIC_IDENTIFIER = r"[0-9]*[a-zA-Z-][a-zA-Z0-9-]*"

MAIN_VERSION = rf"({NUMERIC_IDENTIFIER})\.({NUMERIC_IDENTIFIER})\.({NUMERIC_IDENTIFIER})"
MAIN_VERSION_LOOSE = (
    rf"({NUMERIC_IDENTIFIER_LOOSE})\.({NUMERIC_IDENTIFIER_LOOSE})\.({NUMERIC_IDENTIFIER_LOOSE})"
)

PRERELEASE_IDENTIFIER = rf"(?:{NUMERIC_IDENTIFIER}|{NON_NUMERIC_IDENTIFIER})"
PRERELEASE_IDENTIFIER_LOOSE = rf"(?:{NUMERIC_IDENTIFIER_LOOSE}|{NON_NUMERIC_IDENTIFIER})"

PRERELEASE = rf"(?:-({PRERELEASE_IDENTIFIER}(?:\.{PRERELEASE_IDENTIFIER})*))"
PRERELEASE_LOOSE = rf"(?:-?({PRERELEASE_IDENTIFIER_LOOSE}(?:\.{PRERELEASE_IDENTIFIER_LOOSE})*))"

BUILD_IDENTIFIER = r"[0-9A-Za-z-]+"
BUILD = rf"(?:\+({BUILD_IDENTIFIER}(?:\.{BUILD_IDENTIFIER})*))"

FULL_PLAIN = rf"v?{MAIN_VERSION}{PRERELEASE}?{BUILD}?"
LOOSE_PLAIN = rf"[v=\s]*{MAIN_VERSION_LOOSE}{PRERELEASE_LOOSE}?{BUILD}?"

GTLT = r"((?:<|>)?=?)"

XRANGE_IDENTIFIER = rf"{NUMERIC_IDENTIFIER}|x|X|\*"
XRANGE_IDENTIFIER_LOOSE = rf"{NUMERIC_IDENTIFIER_LOOSE}|x|X|\*"

# Groups: major, minor, patch, prerelease, build.
XRANGE_PLAIN = (
    rf"[v=\s]*({XRANGE_IDENTIFIER})"
    rf"(?:\.({XRANGE_IDENTIFIER})"
    rf"(?:\.({XRANGE_IDENTIFIER})"
    rf"(?:{PRERELEASE})?{BUILD}?)?)?"
)
XRANGE_PLAIN_LOOSE = (
    rf"[v=\s]*({XRANGE_IDENTIFIER_LOOSE})"
    rf"(?:\.({XRANGE_IDENTIFIER_LOOSE})"
    rf"(?:\.({XRANGE_IDENTIFIER_LOOSE})"
    rf"(?:{PRERELEASE_LOOSE})?{BUILD}?)?)?"
)

LONE_TILDE = r"(?:~>?)"
LONE_CARET = r"(?:\^)"

# Versions. Loose mode additionally tolerates a missing patch component.
VERSION = re.compile(rf"^{FULL_PLAIN}$")
VERSION_LOOSE = re.compile(
    rf"^[v=\s]*({NUMERIC_IDENTIFIER_LOOSE})\.({NUMERIC_IDENTIFIER_LOOSE})"
    rf"(?:\.({NUMERIC_IDENTIFIER_LOOSE}))?{PRERELEASE_LOOSE}?{BUILD}?$"
)

# A single comparator: operator followed by a full version, or nothing.
COMPARATOR = re.compile(rf"^{GTLT}\s*({FULL_PLAIN})$|^$")
COMPARATOR_LOOSE = re.compile(rf"^{GTLT}\s*({LOOSE_PLAIN})$|^$")

# Shorthand forms, matched against a single whitespace-free token.
XRANGE = re.compile(rf"^{GTLT}\s*{XRANGE_PLAIN}$")
XRANGE_LOOSE = re.compile(rf"^{GTLT}\s*{XRANGE_PLAIN_LOOSE}$")
TILDE = re.compile(rf"^{LONE_TILDE}{XRANGE_PLAIN}$")
TILDE_LOOSE = re.compile(rf"^{LONE_TILDE}{XRANGE_PLAIN_LOOSE}$")
CARET = re.compile(rf"^{LONE_CARET}{XRANGE_PLAIN}$")
CARET_LOOSE = re.compile(rf"^{LONE_CARET}{XRANGE_PLAIN_LOOSE}$")

# Whole-segment hyphen range. Groups: from, 5 x from parts, to, 5 x to parts.
HYPHEN_RANGE = re.compile(rf"^\s*({XRANGE_PLAIN})\s+-\s+({XRANGE_PLAIN})\s*$")
HYPHEN_RANGE_LOOSE = re.compile(
    rf"^\s*({XRANGE_PLAIN_LOOSE})\s+-\s+({XRANGE_PLAIN_LOOSE})\s*$"
)

# Whitespace between an operator and its version: `> 1.2.3` -> `>1.2.3`.
COMPARATOR_TRIM = re.compile(rf"(\s*){GTLT}\s*({LOOSE_PLAIN}|{XRANGE_PLAIN})")
TILDE_TRIM = re.compile(rf"(\s*){LONE_TILDE}\s+")
CARET_TRIM = re.compile(rf"(\s*){LONE_CARET}\s+")

STAR = re.compile(r"(<|>)?=?\s*\*")
GTE0 = re.compile(r"^\s*>=\s*0\.0\.0\s*$")

OR_SPLIT = re.compile(r"\s*\|\|\s*")
SPACES = re.compile(r"\s+")

CLEAN_PREFIX = re.compile(r"^[=v]+")


def is_any(identifier: str | None) -> bool:
    """Return True for an omitted or wildcard version component."""
    return not identifier or identifier.lower() == "x" or identifier == "*"
