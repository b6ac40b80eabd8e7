"""
Process environment adapter for the EnvironmentLookup port.

Values are read on every call so that maintenance content can be
switched on and off without restarting the service.
"""

import os
from typing import Mapping, Optional

from errorpages.domain.pages.ports import EnvironmentLookup


class OsEnvironmentLookup(EnvironmentLookup):
    """Reads from ``os.environ`` (or another live mapping)."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self._environ = os.environ if environ is None else environ

    def lookup(self, name: str) -> Optional[str]:
        return self._environ.get(name)
