"""Version model: parsing, precedence and rendering."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering
from collections.abc import Iterable, Mapping
from typing import Any, Union

from ..errors import InvalidVersion
from ..parsers import grammar
from .options import Options, resolve

Identifier = Union[int, str]

_IDENTIFIER = re.compile(grammar.BUILD_IDENTIFIER)
_NUMERIC = re.compile(r"[0-9]+")


def _coerce_identifier(raw: str) -> Identifier:
    return int(raw) if raw.isdigit() else raw


def _split_identifiers(raw: str | None) -> tuple[str, ...]:
    return tuple(raw.split(".")) if raw else ()


def compare_identifiers(a: Identifier, b: Identifier) -> int:
    """Numeric identifiers sort numerically and before alphanumeric ones."""
    a_num = isinstance(a, int)
    b_num = isinstance(b, int)
    if a_num and not b_num:
        return -1
    if b_num and not a_num:
        return 1
    if a == b:
        return 0
    return -1 if a < b else 1  # type: ignore[operator]


def _compare_sequences(a: tuple[Identifier, ...], b: tuple[Identifier, ...]) -> int:
    for left, right in zip(a, b):
        result = compare_identifiers(left, right)
        if result:
            return result
    return (len(a) > len(b)) - (len(a) < len(b))


def _compare_build_sequences(a: tuple[str, ...], b: tuple[str, ...]) -> int:
    for left, right in zip(a, b):
        # `001` and `1` are numerically equal but still distinct identifiers.
        result = compare_identifiers(_coerce_identifier(left), _coerce_identifier(right))
        if not result:
            result = (left > right) - (left < right)
        if result:
            return result
    return (len(a) > len(b)) - (len(a) < len(b))


def _normalize_prerelease(identifier: Identifier) -> Identifier:
    if isinstance(identifier, bool):
        raise ValueError(f"Invalid prerelease identifier: {identifier!r}")
    if isinstance(identifier, int):
        if identifier < 0:
            raise ValueError("Numeric prerelease identifiers must be non-negative")
        return identifier
    if not isinstance(identifier, str) or not _IDENTIFIER.fullmatch(identifier):
        raise ValueError(f"Invalid prerelease identifier: {identifier!r}")
    if _NUMERIC.fullmatch(identifier):
        if len(identifier) > 1 and identifier.startswith("0"):
            raise ValueError(f"Numeric prerelease identifier has a leading zero: {identifier!r}")
        return int(identifier)
    return identifier


@total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """A concrete semantic version.

    ``build`` is carried for rendering only: equality, ordering and hashing
    look at ``major``, ``minor``, ``patch`` and ``prerelease``.
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[Identifier, ...] = ()
    build: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer")
        # Digit-only strings become ints so records and parsed text agree.
        object.__setattr__(
            self, "prerelease", tuple(_normalize_prerelease(i) for i in self.prerelease)
        )
        for identifier in self.build:
            if not isinstance(identifier, str) or not _IDENTIFIER.fullmatch(identifier):
                raise ValueError(f"Invalid build identifier: {identifier!r}")

    @classmethod
    def parse(cls, text: str, options: Options | None = None) -> Version:
        """Parse ``text`` under the strict or loose grammar.

        Raises:
            InvalidVersion: if the trimmed input does not match the grammar.
        """
        if isinstance(text, Version):
            return text
        if not isinstance(text, str) or len(text) > grammar.MAX_LENGTH:
            raise InvalidVersion(str(text))

        opts = resolve(options)
        pattern = grammar.VERSION_LOOSE if opts.loose else grammar.VERSION
        m = pattern.match(text.strip())
        if not m:
            raise InvalidVersion(text)

        major, minor, patch, prerelease, build = m.groups()
        return cls(
            major=int(major),
            minor=int(minor),
            patch=int(patch) if patch is not None else 0,
            prerelease=tuple(_coerce_identifier(i) for i in _split_identifiers(prerelease)),
            build=_split_identifiers(build),
        )

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    @property
    def triple(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    @property
    def version(self) -> str:
        """Rendered version without build metadata."""
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(str(i) for i in self.prerelease)
        return text

    def __str__(self) -> str:
        if self.build:
            return f"{self.version}+{'.'.join(self.build)}"
        return self.version

    def compare_main(self, other: Version) -> int:
        a, b = self.triple, other.triple
        return (a > b) - (a < b)

    def compare_pre(self, other: Version) -> int:
        # A release sorts above any prerelease of the same triple.
        if self.prerelease and not other.prerelease:
            return -1
        if not self.prerelease and other.prerelease:
            return 1
        return _compare_sequences(self.prerelease, other.prerelease)

    def compare(self, other: Version) -> int:
        """Return -1, 0 or 1 according to precedence."""
        return self.compare_main(other) or self.compare_pre(other)

    def compare_build(self, other: Version) -> int:
        """Precedence, then build metadata as a final tie-break."""
        result = self.compare(other)
        if result:
            return result
        return _compare_build_sequences(self.build, other.build)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.prerelease))

    def to_dict(self) -> dict[str, object]:
        return {
            "major": self.major,
            "minor": self.minor,
            "patch": self.patch,
            "prerelease": list(self.prerelease),
            "build": list(self.build),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Version:
        return cls(
            major=data["major"],
            minor=data["minor"],
            patch=data["patch"],
            prerelease=tuple(data.get("prerelease") or ()),
            build=tuple(data.get("build") or ()),
        )

    @classmethod
    def from_parts(
        cls,
        major: int,
        minor: int,
        patch: int,
        prerelease: Iterable[Identifier] = (),
        build: Iterable[str] = (),
    ) -> Version:
        return cls(major, minor, patch, tuple(prerelease), tuple(build))
