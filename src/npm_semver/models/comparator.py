"""Comparator model: a single operator + anchor version test."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from collections.abc import Mapping
from typing import Any

from ..errors import InvalidRange, InvalidVersion
from ..parsers import grammar
from .options import DEFAULT_OPTIONS, Options, resolve
from .version import Version


class Operator(str, enum.Enum):
    EQ = "="
    NE = "!="
    GT = ">"
    GTE = ">="
    LT = "<"
    LTE = "<="

    @classmethod
    def from_symbol(cls, symbol: str) -> Operator:
        """Accept the canonical symbols plus ``""``, ``==``, ``===`` and ``!==``."""
        symbol = symbol.strip()
        if symbol in _ALIASES:
            return _ALIASES[symbol]
        try:
            return cls(symbol)
        except ValueError:
            raise ValueError(f"Invalid operator: {symbol!r}") from None

    def apply(self, ordering: int) -> bool:
        """Evaluate the operator against a ``compare`` result."""
        if self is Operator.EQ:
            return ordering == 0
        if self is Operator.NE:
            return ordering != 0
        if self is Operator.GT:
            return ordering > 0
        if self is Operator.GTE:
            return ordering >= 0
        if self is Operator.LT:
            return ordering < 0
        return ordering <= 0

    def __str__(self) -> str:
        return self.value


_ALIASES = {
    "": Operator.EQ,
    "==": Operator.EQ,
    "===": Operator.EQ,
    "!==": Operator.NE,
}


@dataclass(frozen=True)
class Comparator:
    """``operator`` applied to ``anchor``; ``anchor=None`` is the wildcard."""

    operator: Operator = Operator.EQ
    anchor: Version | None = None
    options: Options = field(default=DEFAULT_OPTIONS, compare=False)

    @classmethod
    def any(cls, options: Options | None = None) -> Comparator:
        return cls(Operator.EQ, None, resolve(options))

    @classmethod
    def parse(cls, text: str, options: Options | None = None) -> Comparator:
        """Parse ``<op><version>`` (or the empty string, the wildcard).

        Raises:
            InvalidRange: if ``text`` is not a comparator.
        """
        opts = resolve(options)
        text = text.strip()
        pattern = grammar.COMPARATOR_LOOSE if opts.loose else grammar.COMPARATOR
        m = pattern.match(text)
        if not m:
            raise InvalidRange(text, "invalid comparator")

        symbol, version = m.group(1), m.group(2)
        if version is None:
            return cls.any(opts)
        try:
            anchor = Version.parse(version, opts)
        except InvalidVersion as exc:
            raise InvalidRange(text, str(exc)) from exc
        return cls(Operator.from_symbol(symbol or ""), anchor, opts)

    @property
    def is_any(self) -> bool:
        return self.anchor is None

    def matches(self, version: Version) -> bool:
        """Relational test only, without the prerelease-visibility rule."""
        if self.anchor is None:
            return True
        return self.operator.apply(version.compare(self.anchor))

    def allows_prerelease_of(self, version: Version) -> bool:
        """True when the anchor is a prerelease of ``version``'s triple."""
        return (
            self.anchor is not None
            and self.anchor.is_prerelease
            and self.anchor.triple == version.triple
        )

    def test(self, version: Version | str) -> bool:
        """Test ``version`` against this comparator.

        A prerelease version is only visible to a comparator anchored on a
        prerelease of the same ``major.minor.patch``, unless
        ``include_prerelease`` is set. The wildcard matches everything.
        """
        if not isinstance(version, Version):
            version = Version.parse(version, self.options)
        if self.anchor is None:
            return True
        if (
            version.is_prerelease
            and not self.options.include_prerelease
            and not self.allows_prerelease_of(version)
        ):
            return False
        return self.matches(version)

    def __str__(self) -> str:
        if self.anchor is None:
            return ""
        symbol = "" if self.operator is Operator.EQ else self.operator.value
        return f"{symbol}{self.anchor.version}"

    def to_dict(self) -> dict[str, object]:
        return {
            "operator": self.operator.value,
            "version": self.anchor.to_dict() if self.anchor is not None else None,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], options: Options | None = None) -> Comparator:
        version = data.get("version")
        return cls(
            operator=Operator.from_symbol(data.get("operator", "=")),
            anchor=Version.from_dict(version) if version is not None else None,
            options=resolve(options),
        )
