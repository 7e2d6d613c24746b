"""Locate ``dnsname.toml``.

``DNSNAME_CONFIG`` names the file outright.  Otherwise the search walks up
from the start directory, the way git looks for ``.git/``.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "dnsname.toml"
CONFIG_ENV_VAR = "DNSNAME_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect, or None.

    A ``DNSNAME_CONFIG`` pointing at a missing file disables discovery.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
