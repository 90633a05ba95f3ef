"""ElastiCache Core - Cluster Auto-Discovery Client.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

Finds the nodes of an ElastiCache (Memcached) cluster through its
configuration endpoint and builds a cache client over them:
- Version-aware discovery (``config get cluster`` / legacy key lookup)
- Node list parsing with declared-count validation
- Endpoint configuration from ``ELASTICACHE_ENDPOINT``
- Pass-through client built on pymemcache's HashClient

Architecture:
    ┌─────────────────────────────────────────────────────────────┐
    │  ┌──────────────────────┐                                   │
    │  │  Client  (set/Item)  │                        CLIENT     │
    │  └──────────┬───────────┘                                   │
    │  ┌──────────┴───────────┐  ┌──────────────────┐             │
    │  │   ClusterResolver    │──│  DiscoveryConfig │   CLUSTER   │
    │  └──────────┬───────────┘  └──────────────────┘             │
    │  ┌──────────┴───────────┐  ┌──────────────────┐             │
    │  │    ProtocolDriver    │  │  Node parser     │   PROTOCOL  │
    │  │  stats / config get  │  │  host|ip|port    │             │
    │  └──────────────────────┘  └──────────────────┘             │
    └─────────────────────────────────────────────────────────────┘

Example Usage:
    # ELASTICACHE_ENDPOINT=my-cluster.cfg.use1.cache.amazonaws.com:11211
    from elasticache_core import new, Item

    client = new()
    client.set(Item(key="user:1", value=b"alice", expiration=300))

    # Discovery only
    from elasticache_core import DiscoveryConfig, resolve_nodes

    nodes = resolve_nodes(DiscoveryConfig(endpoint="cfg.local:11211"))
    servers = [node.url for node in nodes]
"""

__version__ = "1.0.0"
__author__ = "BlackRoad OS"

from elasticache_core.errors import (
    DiscoveryError,
    ConfigError,
    ProtocolError,
    ParseError,
)
from elasticache_core.config import DiscoveryConfig, elasticache_endpoint
from elasticache_core.cluster.node import Node, NodeList
from elasticache_core.cluster.parser import parse_node_line, parse_node_result
from elasticache_core.cluster.resolver import ClusterResolver, resolve_nodes
from elasticache_core.protocol.stats import VersionInfo, parse_stats
from elasticache_core.protocol.driver import ProtocolDriver, select_command
from elasticache_core.client.client import (
    CacheClient,
    Client,
    Item,
    client_for_nodes,
    memcache_client_factory,
    new,
)

__all__ = [
    # Errors
    "DiscoveryError",
    "ConfigError",
    "ProtocolError",
    "ParseError",
    # Config
    "DiscoveryConfig",
    "elasticache_endpoint",
    # Cluster
    "Node",
    "NodeList",
    "parse_node_line",
    "parse_node_result",
    "ClusterResolver",
    "resolve_nodes",
    # Protocol
    "VersionInfo",
    "parse_stats",
    "ProtocolDriver",
    "select_command",
    # Client
    "CacheClient",
    "Client",
    "Item",
    "client_for_nodes",
    "memcache_client_factory",
    "new",
]
