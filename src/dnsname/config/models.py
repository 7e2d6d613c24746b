"""Pydantic models for config sections that are not owned by the domain.

The ``[idna]`` section is :class:`~dnsname.domain.codec.CodecOptions`
itself; only ``[check]`` needs a model of its own.
"""

from __future__ import annotations

from pydantic import BaseModel


class CheckConfig(BaseModel):
    """[check] section — batch validation of name lists."""

    model_config = {"frozen": True}

    comment_prefix: str = "#"
    skip_blank: bool = True
    fail_fast: bool = False
