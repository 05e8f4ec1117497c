"""Range model: OR-ed comparator sets."""

from __future__ import annotations

from dataclasses import dataclass, field
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from .comparator import Comparator
from .options import DEFAULT_OPTIONS, Options, resolve
from .version import Version


@dataclass(frozen=True)
class ComparatorSet:
    """Comparators that must all hold for a version to match."""

    comparators: tuple[Comparator, ...]
    options: Options = field(default=DEFAULT_OPTIONS, compare=False)

    def __iter__(self) -> Iterator[Comparator]:
        return iter(self.comparators)

    def __len__(self) -> int:
        return len(self.comparators)

    def test(self, version: Version) -> bool:
        if not all(c.matches(version) for c in self.comparators):
            return False

        if version.is_prerelease and not self.options.include_prerelease:
            # Only a comparator anchored on a prerelease of the same triple
            # lets prereleases in, e.g. ^1.2.3-pr.1 admits 1.2.3-pr.2 but
            # not 1.2.4-alpha.
            return any(c.allows_prerelease_of(version) for c in self.comparators)

        return True

    def __str__(self) -> str:
        return " ".join(str(c) for c in self.comparators).strip()


@dataclass(frozen=True)
class Range:
    """A version range: satisfied when any of its sets is satisfied."""

    raw: str
    set: tuple[ComparatorSet, ...]
    options: Options = field(default=DEFAULT_OPTIONS, compare=False)

    @classmethod
    def parse(cls, text: str, options: Options | None = None) -> Range:
        """Compile ``text`` into comparator sets.

        Raises:
            InvalidRange: if ``text`` is not a valid range under ``options``.
        """
        from ..parsers.ranges import compile_range

        opts = resolve(options)
        sets = compile_range(text, opts)
        return cls(
            raw=text,
            set=tuple(ComparatorSet(tuple(s), opts) for s in sets),
            options=opts,
        )

    @classmethod
    def from_sets(
        cls,
        sets: Iterable[Iterable[Comparator]],
        options: Options | None = None,
        raw: str | None = None,
    ) -> Range:
        opts = resolve(options)
        comparator_sets = tuple(ComparatorSet(tuple(s), opts) for s in sets)
        if not comparator_sets or not all(comparator_sets):
            raise ValueError("A range needs at least one non-empty comparator set")
        rendered = "||".join(str(s) for s in comparator_sets)
        return cls(raw=rendered if raw is None else raw, set=comparator_sets, options=opts)

    def __iter__(self) -> Iterator[ComparatorSet]:
        return iter(self.set)

    def test(self, version: Version | str) -> bool:
        """True if ``version`` satisfies at least one comparator set."""
        if not isinstance(version, Version):
            version = Version.parse(version, self.options)
        return any(s.test(version) for s in self.set)

    def __contains__(self, version: object) -> bool:
        if not isinstance(version, (Version, str)):
            return False
        return self.test(version)

    @property
    def range(self) -> str:
        """Normalized expression: sets joined by ``||``."""
        return "||".join(str(s) for s in self.set)

    def __str__(self) -> str:
        return self.range

    def to_dict(self) -> dict[str, object]:
        return {
            "raw": self.raw,
            "set": [[c.to_dict() for c in s] for s in self.set],
            "options": self.options.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Range:
        opts = Options.from_dict(data.get("options") or {})
        sets = [[Comparator.from_dict(c, opts) for c in s] for s in data["set"]]
        return cls.from_sets(sets, opts, raw=data.get("raw"))
