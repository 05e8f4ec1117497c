from __future__ import annotations

import json
from pathlib import Path

import pytest

from npm_semver import Comparator, Options, Range, Version
from npm_semver.errors import SerializationError
from npm_semver.serialization import dumps, from_record, kind_of, loads, to_record
from npm_semver.validators.records import main as validate_main
from npm_semver.validators.records import validate_document


def test_version_record_layout() -> None:
    record = to_record(Version.parse("1.2.3-rc.1+sha.5"))
    assert record == {
        "major": 1,
        "minor": 2,
        "patch": 3,
        "prerelease": ["rc", 1],
        "build": ["sha", "5"],
    }
    validate_document("version", record)


def test_version_round_trip_keeps_build() -> None:
    v = Version.parse("1.2.3+build.7")
    restored = loads("version", dumps(v))
    assert restored == v
    assert str(restored) == "1.2.3+build.7"


def test_version_record_with_digit_string_prerelease() -> None:
    restored = loads("version", '{"major": 1, "minor": 0, "patch": 0, "prerelease": ["1"], "build": []}')
    assert restored == Version.parse("1.0.0-1")
    assert restored.prerelease == (1,)
    assert restored < Version.parse("1.0.0-2")


def test_version_record_with_leading_zero_prerelease_is_rejected() -> None:
    with pytest.raises(SerializationError):
        loads("version", '{"major": 1, "minor": 0, "patch": 0, "prerelease": ["01"], "build": []}')


def test_comparator_records() -> None:
    assert to_record(Comparator.any()) == {"operator": "=", "version": None}
    comp = Comparator.parse("<2.0.0")
    assert from_record("comparator", to_record(comp)) == comp


def test_range_record_round_trip() -> None:
    opts = Options(loose=True, include_prerelease=True)
    r = Range.parse("^1.2.3 || 3.x", opts)
    record = to_record(r)
    assert record["raw"] == "^1.2.3 || 3.x"
    assert record["options"] == {"loose": True, "includePrerelease": True}
    assert [[c["operator"] for c in s] for s in record["set"]] == [[">=", "<"], [">=", "<"]]

    restored = loads("range", json.dumps(record))
    assert isinstance(restored, Range)
    assert restored.range == r.range
    assert restored.options == opts
    assert restored.test("1.5.0-beta")


def test_options_record() -> None:
    assert loads("options", '{"loose": true}') == Options(loose=True)


def test_schema_violations_are_reported_with_pointers() -> None:
    with pytest.raises(SerializationError) as excinfo:
        from_record("version", {"major": -1, "minor": 0, "patch": "3", "prerelease": []})
    message = str(excinfo.value)
    assert "major" in message
    assert "patch" in message
    assert "build" in message


def test_rejects_unknown_operator_and_empty_sets() -> None:
    with pytest.raises(SerializationError):
        from_record("comparator", {"operator": "~", "version": None})
    with pytest.raises(SerializationError):
        from_record("range", {"set": []})


def test_rejects_invalid_json() -> None:
    with pytest.raises(SerializationError):
        loads("options", "{not json")


def test_kind_of() -> None:
    assert kind_of(Options()) == "options"
    with pytest.raises(TypeError):
        kind_of("1.2.3")  # type: ignore[arg-type]


def test_validator_cli(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    good = tmp_path / "range.json"
    good.write_text(dumps(Range.parse(">=1.0.0")), encoding="utf-8")
    assert validate_main(["--kind", "range", "--input", str(good)]) == 0
    assert "valid range record" in capsys.readouterr().out

    bad = tmp_path / "bad.json"
    bad.write_text('{"major": 1}', encoding="utf-8")
    assert validate_main(["--kind", "version", "--input", str(bad)]) == 1
    assert "ERROR" in capsys.readouterr().err

    assert validate_main(["--kind", "version", "--input", str(tmp_path / "missing.json")]) == 1
