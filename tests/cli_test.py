"""Tests for the dockerauth command-line interface."""

from __future__ import annotations

import base64
import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from dockerauth.cli import main
from dockerauth.constants import REDACTED


def test_help() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["help"], catch_exceptions=False)
    assert result.exit_code == 0
    assert "decode" in result.output

    result = runner.invoke(main, ["help", "decode"], catch_exceptions=False)
    assert result.exit_code == 0
    assert "--show-passwords" in result.output


def test_decode(credentials_path: Path, config_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        main,
        ["decode", "-c", str(config_path), str(credentials_path)],
        catch_exceptions=False,
    )
    assert result.exit_code == 0
    assert json.loads(result.stdout) == [
        {"address": "ghcr.io", "username": "", "password": ""},
        {
            "address": "index.docker.io",
            "username": "alice",
            "password": REDACTED,
        },
        {
            "address": "localhost:5000",
            "username": "bob",
            "password": REDACTED,
        },
        {
            "address": "registry.example.com",
            "username": "user",
            "password": REDACTED,
        },
    ]

    result = runner.invoke(
        main,
        [
            "decode",
            "-c",
            str(config_path),
            "--show-passwords",
            str(credentials_path),
        ],
        catch_exceptions=False,
    )
    assert result.exit_code == 0
    output = {e["address"]: e["password"] for e in json.loads(result.stdout)}
    assert output["index.docker.io"] == "s3cr3t"
    assert output["localhost:5000"] == "pass:word"


def test_decode_configured_path(
    credentials_path: Path,
    config_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("DOCKERAUTH_CONFIG_FILE", str(config_path))
    monkeypatch.setenv("DOCKERAUTH_CREDENTIALS_PATH", str(credentials_path))
    runner = CliRunner()
    result = runner.invoke(main, ["decode"], catch_exceptions=False)
    assert result.exit_code == 0
    assert len(json.loads(result.stdout)) == 4


def test_decode_errors(tmp_path: Path, config_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        main, ["decode", "-c", str(config_path), str(tmp_path / "missing")]
    )
    assert result.exit_code == 1
    assert "Cannot open credentials file" in result.stderr

    bad_path = tmp_path / "config.json"
    bad_path.write_text("not json")
    result = runner.invoke(
        main, ["decode", "-c", str(config_path), str(bad_path)]
    )
    assert result.exit_code == 1
    assert "Invalid Docker credential store" in result.stderr


def test_encode(config_path: Path) -> None:
    credentials = [
        {
            "address": "registry.example.com",
            "username": "user",
            "password": "pass",
        }
    ]
    runner = CliRunner()
    result = runner.invoke(
        main,
        ["encode", "-c", str(config_path)],
        input=json.dumps(credentials),
        catch_exceptions=False,
    )
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        "auths": {"registry.example.com": {"auth": "dXNlcjpwYXNz"}}
    }

    result = runner.invoke(
        main, ["encode", "-c", str(config_path)], input='[{"address": 1}]'
    )
    assert result.exit_code == 1
    assert "Invalid credentials" in result.stderr


def test_header(config_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    runner = CliRunner()
    result = runner.invoke(
        main,
        ["header", "-c", str(config_path), "-u", "user", "-p", "pass"],
        catch_exceptions=False,
    )
    assert result.exit_code == 0
    token = result.stdout.strip()
    assert json.loads(base64.urlsafe_b64decode(token)) == {
        "username": "user",
        "password": "pass",
    }

    monkeypatch.setenv("DOCKERAUTH_PASSWORD", "secret")
    result = runner.invoke(
        main, ["header", "-c", str(config_path)], catch_exceptions=False
    )
    assert result.exit_code == 0
    token = result.stdout.strip()
    assert json.loads(base64.urlsafe_b64decode(token)) == {
        "password": "secret"
    }


def test_normalize(config_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        main,
        ["normalize", "-c", str(config_path), "https://index.docker.io/v1/"],
        catch_exceptions=False,
    )
    assert result.exit_code == 0
    assert result.stdout == "index.docker.io\n"
