"""ElastiCache Config - Configuration Endpoint Settings.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional, Tuple

from elasticache_core.errors import ConfigError

logger = logging.getLogger(__name__)

ENDPOINT_ENV_VAR = "ELASTICACHE_ENDPOINT"


def elasticache_endpoint(env_var: str = ENDPOINT_ENV_VAR) -> str:
    """Read the configuration endpoint from the environment.

    Args:
        env_var: Environment variable holding ``host:port``

    Returns:
        Endpoint string exactly as set

    Raises:
        ConfigError: If the variable is missing or empty
    """
    endpoint = os.environ.get(env_var, "")
    if not endpoint:
        raise ConfigError("endpoint not set")
    return endpoint


def split_endpoint(endpoint: str) -> Tuple[str, int]:
    """Split ``host:port`` (or ``[ipv6]:port``) into a connectable address."""
    host, sep, port = endpoint.rpartition(":")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    if not sep or not host:
        raise ConfigError(f"endpoint must be host:port, got '{endpoint}'")
    try:
        return host, int(port)
    except ValueError:
        raise ConfigError(f"invalid endpoint port in '{endpoint}'") from None


@dataclass
class DiscoveryConfig:
    """Auto-discovery configuration.

    Attributes:
        endpoint: Configuration endpoint (``host:port``); read from
            ``env_var`` when not given
        env_var: Environment variable consulted for the endpoint
        socket_timeout: Transport deadline in seconds, None for the
            socket default (blocking)
        send_quit: Send ``quit`` before closing a successful session
    """

    endpoint: Optional[str] = None
    env_var: str = ENDPOINT_ENV_VAR
    socket_timeout: Optional[float] = None
    send_quit: bool = True

    def get_endpoint(self) -> str:
        """Get the endpoint string, falling back to the environment."""
        if self.endpoint:
            return self.endpoint
        return elasticache_endpoint(self.env_var)


__all__ = [
    "DiscoveryConfig",
    "ENDPOINT_ENV_VAR",
    "elasticache_endpoint",
    "split_endpoint",
]
