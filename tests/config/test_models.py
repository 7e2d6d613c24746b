"""Tests for configuration models."""

from __future__ import annotations

import pytest

from dnsname.config.models import CheckConfig


class TestCheckConfig:
    def test_defaults(self) -> None:
        cfg = CheckConfig()
        assert cfg.comment_prefix == "#"
        assert cfg.skip_blank is True
        assert cfg.fail_fast is False

    def test_sparse_override(self) -> None:
        cfg = CheckConfig.model_validate({"fail_fast": True})
        assert cfg.fail_fast is True
        assert cfg.comment_prefix == "#"

    def test_frozen(self) -> None:
        cfg = CheckConfig()
        with pytest.raises(Exception):
            cfg.fail_fast = True  # type: ignore[misc]
