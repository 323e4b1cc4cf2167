# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""Client configuration.

Environment variables read by :meth:`ClientConfig.from_env`:

- ``ACAPY_ADMIN_URL``: admin API base URL (required)
- ``ACAPY_API_KEY``: value sent as ``X-API-Key`` (optional)
- ``ACAPY_TIMEOUT_MS``: request timeout in milliseconds (default 30000)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

DEFAULT_TIMEOUT_MS = 30000


@dataclass(frozen=True)
class ClientConfig:
    """Immutable settings for one :class:`~client.AgentClient`.

    Parameters
    ----------
    base_url:
        Root URL of the agent admin API, e.g. ``"http://localhost:8031"``.
        A trailing slash is stripped automatically.
    api_key:
        Sent as the ``X-API-Key`` header on every request when set.
    headers:
        Extra headers merged over the client defaults.
    timeout:
        Request timeout in milliseconds, applied uniformly to every call.
    """

    base_url: str
    api_key: str | None = None
    # Excluded from __hash__: the stored mappingproxy is unhashable.
    headers: Mapping[str, str] = field(default_factory=dict, hash=False)
    timeout: int = DEFAULT_TIMEOUT_MS

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ValueError("ClientConfig: base_url must not be empty")
        if self.timeout <= 0:
            raise ValueError(
                f"ClientConfig: timeout must be positive, got {self.timeout}"
            )
        # Frozen dataclass: bypass __setattr__ to normalize fields once.
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @property
    def timeout_seconds(self) -> float:
        return self.timeout / 1000

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ClientConfig":
        """Build a config from ``ACAPY_*`` environment variables.

        Raises
        ------
        ValueError
            If ``ACAPY_ADMIN_URL`` is missing or ``ACAPY_TIMEOUT_MS`` is not
            an integer.
        """
        env = os.environ if environ is None else environ

        base_url = (env.get("ACAPY_ADMIN_URL") or "").strip()
        if not base_url:
            raise ValueError("ClientConfig.from_env: ACAPY_ADMIN_URL is not set")

        api_key = (env.get("ACAPY_API_KEY") or "").strip() or None

        raw_timeout = (env.get("ACAPY_TIMEOUT_MS") or "").strip()
        if raw_timeout:
            try:
                timeout = int(raw_timeout)
            except ValueError as exc:
                raise ValueError(
                    f"ClientConfig.from_env: ACAPY_TIMEOUT_MS must be an integer, "
                    f"got {raw_timeout!r}"
                ) from exc
        else:
            timeout = DEFAULT_TIMEOUT_MS

        return cls(base_url=base_url, api_key=api_key, timeout=timeout)
