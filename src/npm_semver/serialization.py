"""Plain-record serialization of versions, comparators, ranges and options.

Record layouts are a public contract:

- version: ``{"major", "minor", "patch", "prerelease", "build"}``
- comparator: ``{"operator", "version"}`` (``version`` is null for the wildcard)
- range: ``{"raw", "set", "options"}`` where ``set`` is a list of comparator lists
- options: ``{"loose", "includePrerelease"}``
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any, Union

from .errors import SerializationError
from .models.comparator import Comparator
from .models.options import Options
from .models.range import Range
from .models.version import Version
from .validators.records import validate_document

Record = Union[Version, Comparator, Range, Options]

_BUILDERS: dict[str, Callable[[dict[str, Any]], Record]] = {
    "version": Version.from_dict,
    "comparator": Comparator.from_dict,
    "range": Range.from_dict,
    "options": Options.from_dict,
}

_KIND_BY_TYPE: dict[type, str] = {
    Version: "version",
    Comparator: "comparator",
    Range: "range",
    Options: "options",
}


def kind_of(value: Record) -> str:
    try:
        return _KIND_BY_TYPE[type(value)]
    except KeyError:
        raise TypeError(f"Cannot serialize {type(value).__name__}") from None


def to_record(value: Record) -> dict[str, Any]:
    return value.to_dict()


def from_record(kind: str, data: Any) -> Record:
    """Validate ``data`` against the ``kind`` schema and rebuild the value.

    Raises:
        SerializationError: if the record is malformed or violates a model
            invariant.
    """
    validate_document(kind, data)
    try:
        return _BUILDERS[kind](data)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Invalid {kind} record: {exc}") from exc


def dumps(value: Record, **kwargs: Any) -> str:
    return json.dumps(to_record(value), **kwargs)


def loads(kind: str, text: str | bytes) -> Record:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Invalid JSON for {kind} record: {exc.msg}") from exc
    return from_record(kind, data)
