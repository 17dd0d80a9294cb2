from __future__ import annotations

from pathlib import Path

import cbor2
import pytest
from typer.testing import CliRunner

from astarte_srvinfo.cli.app import app
from astarte_srvinfo.cli.deps import reset_settings
from astarte_srvinfo.serviceinfo import ServiceInfo


@pytest.fixture(autouse=True)
def _env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ASTARTE_SRVINFO_ENV", "test")
    monkeypatch.delenv("ASTARTE_SRVINFO_STRICT_BASE_URL", raising=False)
    reset_settings()


def _encode(runner: CliRunner, path: Path, *extra: str) -> None:
    result = runner.invoke(
        app,
        [
            "encode",
            str(path),
            "--realm",
            "test",
            "--secret",
            "s3cr3t",
            "--base-url",
            "http://api.astarte.localhost",
            "--device-id",
            "2TBn-jNESuuHamE2Zo1anA",
            *extra,
        ],
    )
    assert result.exit_code == 0, result.output


def test_cli_encode_and_inspect(tmp_path: Path) -> None:
    runner = CliRunner()
    target = tmp_path / "srvinfo.cbor"
    _encode(runner, target, "--extra", "devmod:os=linux")

    result = runner.invoke(app, ["inspect", str(target)])

    assert result.exit_code == 0, result.output
    assert "Entries:\t6" in result.stdout
    assert "Realm:\ttest" in result.stdout
    assert "Secret:\t**********" in result.stdout
    assert "s3cr3t" not in result.stdout
    assert "Base URL:\thttp://api.astarte.localhost" in result.stdout
    assert "Device ID:\t2TBn-jNESuuHamE2Zo1anA" in result.stdout


def test_cli_inspect_show_secret(tmp_path: Path) -> None:
    runner = CliRunner()
    target = tmp_path / "srvinfo.cbor"
    _encode(runner, target)

    result = runner.invoke(app, ["inspect", str(target), "--show-secret"])

    assert result.exit_code == 0, result.output
    assert "Secret:\ts3cr3t" in result.stdout


def test_cli_encode_writes_foreign_entries_first(tmp_path: Path) -> None:
    runner = CliRunner()
    target = tmp_path / "srvinfo.cbor"
    _encode(runner, target, "--extra", "foo:bar=baz", "--extra", "astarte:future=x")

    service_info = ServiceInfo.from_cbor(target.read_bytes())

    assert [entry.key for entry in service_info][:3] == [
        "foo:bar",
        "astarte:future",
        "astarte:active",
    ]


def test_cli_encode_rejects_malformed_extra(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        app,
        [
            "encode",
            str(tmp_path / "srvinfo.cbor"),
            "--realm",
            "test",
            "--secret",
            "s3cr3t",
            "--base-url",
            "http://api.astarte.localhost",
            "--device-id",
            "d",
            "--extra",
            "novalue",
        ],
    )

    assert result.exit_code != 0
    assert not (tmp_path / "srvinfo.cbor").exists()


def test_cli_inspect_inactive_module(tmp_path: Path) -> None:
    runner = CliRunner()
    target = tmp_path / "srvinfo.cbor"
    _encode(runner, target, "--inactive")

    result = runner.invoke(app, ["inspect", str(target)])

    assert result.exit_code == 1
    assert "Invalid service info (invalid)" in result.stdout


def test_cli_inspect_duplicate_field(tmp_path: Path) -> None:
    runner = CliRunner()
    target = tmp_path / "srvinfo.cbor"
    _encode(runner, target, "--extra", "astarte:realm=again")

    result = runner.invoke(app, ["inspect", str(target)])

    assert result.exit_code == 1
    assert "realm replaced" in result.stdout


def test_cli_inspect_malformed_file(tmp_path: Path) -> None:
    runner = CliRunner()
    target = tmp_path / "srvinfo.cbor"
    target.write_bytes(cbor2.dumps({"not": "an array"}))

    result = runner.invoke(app, ["inspect", str(target)])

    assert result.exit_code == 1
    assert "Invalid service info (decode)" in result.stdout


def test_cli_inspect_missing_file(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["inspect", str(tmp_path / "missing.cbor")])

    assert result.exit_code == 1
    assert "Unable to read" in result.stdout


def test_cli_inspect_strict_base_url(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    runner = CliRunner()
    target = tmp_path / "srvinfo.cbor"
    result = runner.invoke(
        app,
        [
            "encode",
            str(target),
            "--realm",
            "test",
            "--secret",
            "s3cr3t",
            "--base-url",
            "not a url",
            "--device-id",
            "d",
        ],
    )
    assert result.exit_code == 0, result.output

    lenient = runner.invoke(app, ["inspect", str(target)])
    assert lenient.exit_code == 0, lenient.output
    assert "Base URL:\tnot a url" in lenient.stdout

    monkeypatch.setenv("ASTARTE_SRVINFO_STRICT_BASE_URL", "true")
    reset_settings()
    strict = runner.invoke(app, ["inspect", str(target)])
    assert strict.exit_code == 1
    assert "not a valid URL" in strict.stdout


def test_cli_show_settings() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["show-settings"])

    assert result.exit_code == 0, result.output
    assert "Environment:\ttest" in result.stdout
    assert "Strict base URL:\tFalse" in result.stdout
