"""JSON Schema validation for serialized versions, comparators, ranges and options.

Can also be run as a script to validate a JSON document on disk:

    python -m npm_semver.validators.records --kind range --input range.json
"""

from __future__ import annotations

import argparse
import json
import sys
from functools import lru_cache
from pathlib import Path
from collections.abc import Iterable
from typing import Any

from jsonschema import Draft202012Validator, ValidationError

from ..errors import SerializationError

SCHEMA_PATH = Path(__file__).resolve().parents[1] / "schemas" / "semver.schema.json"
KINDS = ("version", "comparator", "range", "options")


def _load_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


@lru_cache(maxsize=None)
def get_validator(kind: str) -> Draft202012Validator:
    """Return a validator for one record kind, sharing the bundled ``$defs``."""
    if kind not in KINDS:
        raise ValueError(f"Unknown record kind {kind!r}; expected one of {', '.join(KINDS)}")
    schema = dict(_load_json(SCHEMA_PATH))
    schema["$ref"] = f"#/$defs/{kind}"
    return Draft202012Validator(schema)


def _format_errors(errors: Iterable[ValidationError]) -> str:
    return "\n".join(
        f"- {'/'.join(str(p) for p in error.path) or '<root>'}: {error.message}" for error in errors
    )


def validate_document(kind: str, document: Any) -> None:
    """Raise SerializationError listing every schema violation in ``document``."""
    validator = get_validator(kind)
    errors = sorted(validator.iter_errors(document), key=lambda e: [str(p) for p in e.path])
    if errors:
        raise SerializationError(f"Invalid {kind} record:\n" + _format_errors(errors))


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--kind", choices=KINDS, required=True, help="Record kind")
    parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="Path to the JSON record to validate",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        validate_document(args.kind, _load_json(args.input))
    except FileNotFoundError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as exc:
        print(f"ERROR: Failed to read JSON: {exc}", file=sys.stderr)
        return 1
    except SerializationError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    print(f"{args.input} is a valid {args.kind} record")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
