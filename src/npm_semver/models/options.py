"""Parsing options and their builder."""

from __future__ import annotations

from dataclasses import dataclass, replace
from collections.abc import Mapping
from typing import Any

_KEYS = {"loose", "includePrerelease"}


@dataclass(frozen=True)
class Options:
    """Immutable configuration threaded through every parse call.

    loose: accept not-quite-valid version strings (leading ``v``/``=`` runs,
        leading zeros, a missing patch component, ``1.2.3beta``).
    include_prerelease: let prerelease versions satisfy comparators anchored
        on a different ``major.minor.patch``.
    """

    loose: bool = False
    include_prerelease: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.loose, bool):
            raise TypeError("loose must be a boolean")
        if not isinstance(self.include_prerelease, bool):
            raise TypeError("include_prerelease must be a boolean")

    @staticmethod
    def builder() -> OptionsBuilder:
        return OptionsBuilder()

    def to_dict(self) -> dict[str, bool]:
        return {
            "loose": self.loose,
            "includePrerelease": self.include_prerelease,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Options:
        unknown = set(data) - _KEYS
        if unknown:
            raise ValueError(f"Unknown option(s): {', '.join(sorted(unknown))}")
        return cls(
            loose=data.get("loose", False),
            include_prerelease=data.get("includePrerelease", False),
        )


DEFAULT_OPTIONS = Options()


class OptionsBuilder:
    """Fluent builder: ``Options.builder().loose(True).build()``."""

    def __init__(self) -> None:
        self._options = DEFAULT_OPTIONS

    def loose(self, loose: bool = True) -> OptionsBuilder:
        self._options = replace(self._options, loose=loose)
        return self

    def include_prerelease(self, include: bool = True) -> OptionsBuilder:
        self._options = replace(self._options, include_prerelease=include)
        return self

    def build(self) -> Options:
        return self._options


def resolve(options: Options | None) -> Options:
    """Return ``options`` or the defaults when None is passed."""
    return DEFAULT_OPTIONS if options is None else options
