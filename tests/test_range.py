from __future__ import annotations

import logging

import pytest

from npm_semver import InvalidRange, InvalidVersion, Options, Range, Version
from npm_semver.parsers.ranges import (
    replace_carets,
    replace_hyphen,
    replace_stars,
    replace_tildes,
    replace_xranges,
)

LOOSE = Options(loose=True)
INCLUDE_PRERELEASE = Options(include_prerelease=True)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("^1.2.3", ">=1.2.3 <2.0.0"),
        ("^1.2.0", ">=1.2.0 <2.0.0"),
        ("^1.2", ">=1.2.0 <2.0.0"),
        ("^2.0", ">=2.0.0 <3.0.0"),
        ("^2", ">=2.0.0 <3.0.0"),
        ("^0.2.3", ">=0.2.3 <0.3.0"),
        ("^0.0.3", ">=0.0.3 <0.0.4"),
        ("^0.2", ">=0.2.0 <0.3.0"),
        ("^0.0", ">=0.0.0 <0.1.0"),
        ("^1.2.3-beta.2", ">=1.2.3-beta.2 <2.0.0"),
        ("^0.0.3-beta", ">=0.0.3-beta <0.0.4"),
        ("^", "*"),
    ],
)
def test_replace_carets(text: str, expected: str) -> None:
    assert replace_carets(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("~2", ">=2.0.0 <3.0.0"),
        ("~2.0", ">=2.0.0 <2.1.0"),
        ("~1.2", ">=1.2.0 <1.3.0"),
        ("~1.2.3", ">=1.2.3 <1.3.0"),
        ("~1.2.0", ">=1.2.0 <1.3.0"),
        ("~>1.2", ">=1.2.0 <1.3.0"),
        ("~1.2.3-beta.2", ">=1.2.3-beta.2 <1.3.0"),
        ("~", "*"),
    ],
)
def test_replace_tildes(text: str, expected: str) -> None:
    assert replace_tildes(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        (">1", ">=2.0.0"),
        (">1.2", ">=1.3.0"),
        ("<=0.7.x", "<0.8.0"),
        ("<=7.x", "<8.0.0"),
        ("<1.2", "<1.2.0"),
        (">=1.2", ">=1.2.0"),
        ("1.2.x", ">=1.2.0 <1.3.0"),
        ("1.x", ">=1.0.0 <2.0.0"),
        ("1", ">=1.0.0 <2.0.0"),
        ("=1.2", ">=1.2.0 <1.3.0"),
        ("*", "*"),
        (">*", "<0.0.0-0"),
        ("1.2.3", "1.2.3"),
    ],
)
def test_replace_xranges(text: str, expected: str) -> None:
    assert replace_xranges(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1.2.3 - 1.2.4", ">=1.2.3 <=1.2.4"),
        ("1.2 - 2.3", ">=1.2.0 <2.4.0"),
        ("1.2.3 - 2.3", ">=1.2.3 <2.4.0"),
        ("1.2.3 - 2", ">=1.2.3 <3.0.0"),
        ("1 - 2.3.4", ">=1.0.0 <=2.3.4"),
        ("* - 2", "<3.0.0"),
        ("1.2.3 - *", ">=1.2.3"),
        ("1.2.3 - 2.3.4-beta+b", ">=1.2.3 <=2.3.4-beta"),
        (">=1.2.3", ">=1.2.3"),
    ],
)
def test_replace_hyphen(text: str, expected: str) -> None:
    assert replace_hyphen(text) == expected


def test_replace_stars() -> None:
    assert replace_stars("*") == ""
    assert replace_stars(">=*") == ""


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1.0.0 - 2.0.0", ">=1.0.0 <=2.0.0"),
        ("1.0.0", "1.0.0"),
        (">=*", ""),
        ("", ""),
        ("*", ""),
        ("x", ""),
        (">=1.0.0", ">=1.0.0"),
        ("> 1.0.0", ">1.0.0"),
        ("<=   2.0.0", "<=2.0.0"),
        ("> 1.2.3 < 1.2.5", ">1.2.3 <1.2.5"),
        ("1.2.3 || 2.x", "1.2.3||>=2.0.0 <3.0.0"),
        ("~ 1.2.3", ">=1.2.3 <1.3.0"),
        ("^ 1.2.3", ">=1.2.3 <2.0.0"),
        ("~>3.2.1", ">=3.2.1 <3.3.0"),
        ("^1.2.3 ^1.2.3", ">=1.2.3 <2.0.0"),
        (">=0.0.0", ""),
        (">=1.2.3 *", ">=1.2.3"),
        ("* || 1.2.3", ""),
        (">* || 1.2.3", "1.2.3"),
        (">*", "<0.0.0-0"),
        ("1.2.3 - 2.3.4 || ^3.0.0", ">=1.2.3 <=2.3.4||>=3.0.0 <4.0.0"),
        ("v1.2.3", "1.2.3"),
    ],
)
def test_normalized_range(text: str, expected: str) -> None:
    assert Range.parse(text).range == expected


@pytest.mark.parametrize(
    "version, expr, expected",
    [
        ("1.2.3", "^1.2.3", True),
        ("2.0.0", "^1.2.3", False),
        ("0.2.3", "^0.2.3", True),
        ("0.3.0", "^0.2.3", False),
        ("0.0.3", "^0.0.3", True),
        ("0.0.4", "^0.0.3", False),
        ("1.2.9", "~1.2.3", True),
        ("1.3.0", "~1.2.3", False),
        ("1.9.9", "~1", True),
        ("2.0.0", "~1", False),
        ("2.3.4", "1.2.3 - 2.3.4", True),
        ("2.3.5", "1.2.3 - 2.3.4", False),
        ("2.3.9", "1.2 - 2.3", True),
        ("2.4.0", "1.2 - 2.3", False),
        ("1.2.3", "1.0.0 - 1.1.0 || 1.2.0 - 1.3.0", True),
        ("1.1.5", "1.0.0 - 1.1.0 || 1.2.0 - 1.3.0", False),
        ("1.2.7", "1.2.7 || >=1.2.9 <2.0.0", True),
        ("1.2.8", "1.2.7 || >=1.2.9 <2.0.0", False),
        ("1.4.6", "1.2.7 || >=1.2.9 <2.0.0", True),
        ("1.2.3+build", "1.2.3", True),
        ("5.0.0", "*", True),
        ("0.0.0", "", True),
        ("1.2.3", ">*", False),
        ("1.2.3-alpha", ">=1.2.3", False),
        ("1.2.3-pr.2", "^1.2.3-pr.1", True),
        ("1.2.4-alpha", "^1.2.3-pr.1", False),
        ("1.0.0-beta", "*", False),
        ("1.2.3-beta", "1.2.3-beta", True),
    ],
)
def test_satisfies_table(version: str, expr: str, expected: bool) -> None:
    assert Range.parse(expr).test(version) is expected


@pytest.mark.parametrize(
    "version, expr, expected",
    [
        ("1.2.4-alpha", ">=1.2.3", True),
        ("1.2.3-alpha", ">=1.2.3", False),
        ("1.0.0-beta", "*", True),
        ("1.3.0-rc.1", "^1.2.3", True),
    ],
)
def test_include_prerelease(version: str, expr: str, expected: bool) -> None:
    assert Range.parse(expr, INCLUDE_PRERELEASE).test(version) is expected


@pytest.mark.parametrize(
    "text",
    ["not-a-range-!!", ">=1.2.3 garbage", "1.2.3 -", "~01.2.3", "latest", "workspace:*"],
)
def test_invalid_ranges(text: str) -> None:
    with pytest.raises(InvalidRange):
        Range.parse(text)


def test_invalid_range_carries_offending_input() -> None:
    with pytest.raises(InvalidRange) as excinfo:
        Range.parse(">=1.2.3 garbage")
    assert excinfo.value.input == "garbage"


def test_loose_range_drops_unparsable_tokens() -> None:
    r = Range.parse(">=1.2.3 garbage", LOOSE)
    assert r.range == ">=1.2.3"
    with pytest.raises(InvalidRange):
        Range.parse("not-a-range-!!", LOOSE)


def test_loose_range_accepts_leading_zeros() -> None:
    r = Range.parse("~01.02.03", LOOSE)
    assert r.range == ">=1.2.3 <1.3.0"
    assert r.test("1.2.9")


def test_test_accepts_strings_and_versions() -> None:
    r = Range.parse("^1.2.3")
    assert r.test(Version(1, 5, 0))
    assert "1.5.0" in r
    assert 150 not in r
    with pytest.raises(InvalidVersion):
        r.test("garbage")


def test_sets_are_exposed_in_order() -> None:
    r = Range.parse("^1.0.0 || ~2.1.0")
    assert [str(s) for s in r] == [">=1.0.0 <2.0.0", ">=2.1.0 <2.2.0"]
    assert [len(s) for s in r] == [2, 2]
    assert r.raw == "^1.0.0 || ~2.1.0"


def test_compilation_is_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="npm_semver.parsers.ranges")
    Range.parse("^1.2.3")
    assert ">=1.2.3 <2.0.0" in caplog.text
