"""ElastiCache Errors - Discovery Error Hierarchy.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

Transport failures are not wrapped: socket errors surface as the built-in
ConnectionError / OSError family.
"""

from __future__ import annotations


class DiscoveryError(Exception):
    """Base class for auto-discovery errors."""


class ConfigError(DiscoveryError):
    """Configuration endpoint missing or unusable."""


class ProtocolError(DiscoveryError):
    """Configuration endpoint response could not be understood."""


class ParseError(DiscoveryError, ValueError):
    """A numeric field in a node entry did not parse."""


__all__ = ["DiscoveryError", "ConfigError", "ProtocolError", "ParseError"]
