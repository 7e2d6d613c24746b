"""Shared pytest fixtures for dnsname tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from dnsname.domain.codec import IdnaCodec


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def codec() -> IdnaCodec:
    """Codec with the default options."""
    return IdnaCodec()


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory with no DNSNAME_* environment.

    Keeps a developer's own dnsname.toml or env vars from leaking into
    CLI and settings tests.  Use via
    ``@pytest.mark.usefixtures("_isolated_config")``.
    """
    for key in [k for k in os.environ if k.startswith("DNSNAME_")]:
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
