"""
Upstream API configuration.

ApiConfig is passed explicitly into ContractsClient so tests (and other
callers) can point the adapter anywhere without touching globals.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from urllib.parse import quote

from .constants import (
    ANALYSIS_ENDPOINT_TEMPLATE,
    CONTRACTS_ENDPOINT,
    DEFAULT_API_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
)


@dataclass(frozen=True)
class ApiConfig:
    """Where the contracts API lives and how to talk to it."""
    base_url: str = DEFAULT_API_BASE_URL
    contracts_endpoint: str = CONTRACTS_ENDPOINT
    analysis_endpoint_template: str = ANALYSIS_ENDPOINT_TEMPLATE
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    strict_risk_levels: bool = False

    def __post_init__(self):
        # frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        if self.timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {self.timeout_seconds}")

    @classmethod
    def from_env(cls) -> ApiConfig:
        """Build a config from RADARCOL_* environment variables."""
        return cls(
            base_url=os.environ.get("RADARCOL_API_BASE_URL", DEFAULT_API_BASE_URL),
            timeout_seconds=float(os.environ.get("RADARCOL_API_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS))),
            strict_risk_levels=os.environ.get("RADARCOL_STRICT_RISK_LEVELS", "false").lower() == "true",
        )

    def contracts_url(self) -> str:
        return f"{self.base_url}{self.contracts_endpoint}"

    def analysis_url(self, contract_id: str) -> str:
        path = self.analysis_endpoint_template.format(id=quote(contract_id, safe=""))
        return f"{self.base_url}{path}"
