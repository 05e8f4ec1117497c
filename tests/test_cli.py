from __future__ import annotations

import json
from pathlib import Path

import pytest

from npm_semver.cli import main
from npm_semver.config import CONFIG_PATH_ENV_VAR


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_PATH_ENV_VAR, raising=False)


def _package(tmp_path: Path, deps: dict[str, str]) -> Path:
    tmp_path.mkdir(parents=True, exist_ok=True)
    (tmp_path / "package.json").write_text(json.dumps({"dependencies": deps}), encoding="utf-8")
    return tmp_path


def test_prints_report_and_succeeds(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    root = _package(tmp_path, {"a": "^3.0.0", "b": "~2.0.0"})
    assert main(["--root", str(root)]) == 0
    report = json.loads(capsys.readouterr().out)
    assert report["totals"]["satisfied"] == 1
    assert report["totals"]["invalid"] == 0


def test_invalid_ranges_fail_unless_allowed(tmp_path: Path) -> None:
    root = _package(tmp_path, {"a": "latest"})
    assert main(["--root", str(root)]) == 10
    assert main(["--root", str(root), "--allow-invalid"]) == 0


def test_loose_flag(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    root = _package(tmp_path, {"a": ">=01.0.0"})
    assert main(["--root", str(root), "--loose", "--probe", "v3.0"]) == 0
    report = json.loads(capsys.readouterr().out)
    assert report["probe"] == "3.0.0"
    assert report["options"]["loose"] is True


def test_config_file_and_summary(tmp_path: Path) -> None:
    root = _package(tmp_path / "repo", {"a": ">=2.0.0"})
    config = tmp_path / "options.json"
    config.write_text('{"includePrerelease": true}', encoding="utf-8")
    summary = tmp_path / "summary.md"
    code = main(
        ["--root", str(root), "--probe", "3.0.0-rc.1", "--config", str(config), "--summary", str(summary)]
    )
    assert code == 0
    assert "| >=2.0.0 | yes |" in summary.read_text(encoding="utf-8")


def test_bad_probe_and_bad_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    root = _package(tmp_path, {"a": "*"})
    assert main(["--root", str(root), "--probe", "three"]) == 1
    assert "Invalid version" in capsys.readouterr().err

    assert main(["--root", str(root), "--config", str(tmp_path / "missing.json")]) == 1
    assert "not found" in capsys.readouterr().err
