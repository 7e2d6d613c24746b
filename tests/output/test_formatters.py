"""Tests for the format_result dispatcher and OutputSettings."""

import json

from dnsname.output.formatters import OutputSettings, format_result
from dnsname.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="ERR", message=msg),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        result = _ok("parse", ascii="google.com")
        output = format_result(result, settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "parse"
        assert data["data"]["ascii"] == "google.com"

    def test_json_mode_error(self) -> None:
        output = format_result(_err("parse", "Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_json_wins_over_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        assert json.loads(format_result(_ok("parse", ascii="a"), settings=settings))["ok"]


class TestFormatResultQuiet:
    def test_parse_prints_ascii_only(self) -> None:
        output = format_result(_ok("parse", ascii="xn--bcher-kva.example"), settings=OutputSettings(quiet=True))
        assert output == "xn--bcher-kva.example"

    def test_error(self) -> None:
        output = format_result(_err("parse", "Bad"), settings=OutputSettings(quiet=True))
        assert output == "ERROR: parse — Bad"


class TestFormatResultHuman:
    def test_default_is_rich(self) -> None:
        output = format_result(_ok("something", key="value"))
        assert "OK" in output
        assert "key: value" in output
