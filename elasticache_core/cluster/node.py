"""ElastiCache Node - Cluster Member.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from elasticache_core.errors import ProtocolError


@dataclass(frozen=True)
class Node:
    """A single node of an ElastiCache cluster.

    Attributes:
        host: Node hostname (may be empty)
        ip: Node IP address (may be empty)
        port: Node port

    Example:
        node = Node(host="cache-1.local", ip="10.0.0.5", port=11211)
        node.url  # "cache-1.local:11211"
    """

    host: str
    ip: str
    port: int

    def __post_init__(self):
        """Validate node fields."""
        if self.port <= 0:
            raise ProtocolError(f"invalid node port: {self.port}")
        if not self.host and not self.ip:
            raise ProtocolError("node has neither host nor ip")

    @property
    def url(self) -> str:
        """Get ``host:port``, using the IP when no hostname is known."""
        return f"{self.host or self.ip}:{self.port}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "host": self.host,
            "ip": self.ip,
            "port": self.port,
            "url": self.url,
        }

    def __str__(self) -> str:
        return self.url


NodeList = List[Node]


__all__ = ["Node", "NodeList"]
