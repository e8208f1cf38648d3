"""Tests for gglas_linker.cli.main — CLI commands via Click test runner."""
from __future__ import annotations

import datetime
import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from gglas_linker.cli.main import cli
from gglas_linker.envelope.engine import issue
from gglas_linker.payload.agent_payload import AgentPayload


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def payload_file(tmp_path: Path) -> Path:
    path = tmp_path / "payload.json"
    path.write_text(
        json.dumps({"agent": {"name": "Carol", "role": "ops"}, "scopes": ["db"]}),
        encoding="utf-8",
    )
    return path


def generate(runner: CliRunner, *extra: str) -> str:
    result = runner.invoke(
        cli,
        [
            "gen",
            "--name",
            "Alice",
            "--role",
            "research",
            "--scopes",
            "web,files",
            "--exp",
            "2099-01-01T00:00:00Z",
            "--secret",
            "mysupersecret",
            *extra,
        ],
    )
    assert result.exit_code == 0, result.output
    return result.stdout.strip()


# ---------------------------------------------------------------------------
# Root CLI
# ---------------------------------------------------------------------------


class TestRootCLI:
    def test_help_exits_zero(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "gen" in result.output
        assert "verify" in result.output

    def test_version_command(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["version"])
        assert result.exit_code == 0
        assert "gglas-linker" in result.output.lower()

    def test_version_option(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_unknown_command_is_usage_error(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["frobnicate"])
        assert result.exit_code == 2

    def test_log_level_option_accepted(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--log-level", "debug", "version"])
        assert result.exit_code == 0


# ---------------------------------------------------------------------------
# gen
# ---------------------------------------------------------------------------


class TestGenCommand:
    def test_prints_single_line_uri(self, runner: CliRunner) -> None:
        uri = generate(runner)
        assert uri.startswith("gglas://agent/new?payload=")
        assert "&sig=" in uri
        assert "\n" not in uri

    def test_custom_scheme_and_path(self, runner: CliRunner) -> None:
        uri = generate(runner, "--scheme", "acme", "--path", "agents/join")
        assert uri.startswith("acme://agents/join?payload=")

    def test_scheme_from_environment(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            ["gen", "--name", "Alice", "--secret", "s"],
            env={"GGLAS_SCHEME": "envscheme", "GGLAS_PATH": "env/path"},
        )
        assert result.exit_code == 0
        assert result.stdout.startswith("envscheme://env/path?payload=")

    def test_secret_from_environment(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            ["gen", "--name", "Alice", "--secret-env", "GGLAS_SECRET"],
            env={"GGLAS_SECRET": "mysupersecret"},
        )
        assert result.exit_code == 0

    def test_secret_from_file(self, runner: CliRunner, tmp_path: Path) -> None:
        secret_path = tmp_path / "secret"
        secret_path.write_text("mysupersecret\n", encoding="utf-8")
        result = runner.invoke(
            cli, ["gen", "--name", "Alice", "--secret-file", str(secret_path)]
        )
        assert result.exit_code == 0

    def test_payload_file(self, runner: CliRunner, payload_file: Path) -> None:
        result = runner.invoke(
            cli, ["gen", "--payload-file", str(payload_file), "--secret", "s"]
        )
        assert result.exit_code == 0
        assert result.stdout.startswith("gglas://agent/new?payload=")

    def test_missing_secret_exits_one(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["gen", "--name", "Alice"])
        assert result.exit_code == 1

    def test_missing_payload_source_exits_one(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["gen", "--secret", "s"])
        assert result.exit_code == 1

    def test_invalid_exp_exits_two(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["gen", "--name", "A", "--exp", "soon", "--secret", "s"])
        assert result.exit_code == 2

    def test_missing_payload_file_exits_two(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            cli, ["gen", "--payload-file", str(tmp_path / "absent.json"), "--secret", "s"]
        )
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# verify
# ---------------------------------------------------------------------------


class TestVerifyCommand:
    def test_round_trip_prints_ok_and_json(self, runner: CliRunner) -> None:
        uri = generate(runner)
        result = runner.invoke(cli, ["verify", "--url", uri, "--secret", "mysupersecret"])
        assert result.exit_code == 0
        lines = result.stdout.strip().splitlines()
        assert lines[0] == "OK"
        decoded = json.loads(lines[1])
        assert decoded["agent"] == {"name": "Alice", "role": "research"}
        assert decoded["scopes"] == ["web", "files"]
        assert decoded["exp"] == "2099-01-01T00:00:00Z"

    def test_wrong_secret_exits_one(self, runner: CliRunner) -> None:
        uri = generate(runner)
        result = runner.invoke(cli, ["verify", "--url", uri, "--secret", "wrong"])
        assert result.exit_code == 1
        assert "OK" not in result.stdout

    def test_expired_token_exits_one(self, runner: CliRunner) -> None:
        payload = AgentPayload(
            agent={"name": "Alice"},
            exp=datetime.datetime(2000, 1, 1, tzinfo=datetime.timezone.utc),
        )
        uri = issue(payload, b"mysupersecret")
        result = runner.invoke(cli, ["verify", "--url", uri, "--secret", "mysupersecret"])
        assert result.exit_code == 1

    def test_malformed_url_exits_one(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["verify", "--url", "gglas://agent/new?payload=abc", "--secret", "s"]
        )
        assert result.exit_code == 1

    def test_malformed_message_is_not_repeated(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["verify", "--url", "gglas://agent/new?payload=abc", "--secret", "s"]
        )
        assert result.exit_code == 1
        assert result.output.count("Malformed token") == 1
        assert "query must carry both" in result.output

    def test_missing_url_exits_one(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["verify", "--secret", "s"])
        assert result.exit_code == 1

    def test_missing_secret_exits_one(self, runner: CliRunner) -> None:
        uri = generate(runner)
        result = runner.invoke(cli, ["verify", "--url", uri])
        assert result.exit_code == 1

    def test_unreadable_secret_file_exits_two(self, runner: CliRunner, tmp_path: Path) -> None:
        uri = generate(runner)
        result = runner.invoke(
            cli, ["verify", "--url", uri, "--secret-file", str(tmp_path / "absent")]
        )
        assert result.exit_code == 2
