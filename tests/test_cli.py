"""Tests for the root dnsname CLI."""

import pytest
from click.testing import CliRunner

from dnsname import __version__
from dnsname.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "dnsname" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.usefixtures("_isolated_config")
def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


# --- Global flags ---


@pytest.mark.parametrize(
    "flags",
    [["--json"], ["-q"], ["-v"], ["--log-json"], ["-c", "/tmp/does-not-exist.toml"]],
)
def test_global_flag_accepted(cli_runner: CliRunner, flags: list[str]) -> None:
    result = cli_runner.invoke(cli, [*flags, "--version"])
    assert result.exit_code == 0


@pytest.mark.usefixtures("_isolated_config")
def test_invalid_toml_is_reported(cli_runner: CliRunner) -> None:
    with open("dnsname.toml", "w", encoding="utf-8") as fh:
        fh.write("[idna\n")
    result = cli_runner.invoke(cli, ["parse", "google.com"])
    assert result.exit_code == 1
    assert "Invalid TOML" in result.output


# --- Commands registered ---

EXPECTED_COMMANDS = ["parse", "labels", "compare", "check"]


@pytest.mark.parametrize("name", EXPECTED_COMMANDS)
def test_command_registered(name: str) -> None:
    assert name in cli.commands


@pytest.mark.parametrize("name", EXPECTED_COMMANDS)
def test_command_help(cli_runner: CliRunner, name: str) -> None:
    result = cli_runner.invoke(cli, [name, "--help"])
    assert result.exit_code == 0
    assert "Usage" in result.output
