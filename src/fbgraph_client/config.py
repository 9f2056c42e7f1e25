"""Configuration helpers for the Graph API client."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

USER_AGENT = "fbgraph-python"


@dataclass(slots=True)
class ClientConfig:
    """Typed configuration for `GraphClient`."""

    verify_ssl: bool | str = True
    timeout: float = 30.0
    default_headers: Mapping[str, str] | None = None
    app_namespace: str | None = None

    def resolved_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }
        if self.default_headers:
            headers.update(self.default_headers)
        return headers
