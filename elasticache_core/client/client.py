"""ElastiCache Client - Cache Client for Discovered Nodes.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from elasticache_core.cluster.node import NodeList
from elasticache_core.cluster.resolver import ClusterResolver
from elasticache_core.config import DiscoveryConfig

logger = logging.getLogger(__name__)


class CacheClient(ABC):
    """Capability required from the underlying cache client.

    ``pymemcache.client.hash.HashClient`` satisfies it; it is registered
    as a virtual subclass when the default factory builds one.
    """

    @abstractmethod
    def set(self, key: str, value: bytes, expire: int = 0) -> Any:
        """Store value under key.

        Args:
            key: Cache key
            value: Value bytes
            expire: Expiration in seconds, 0 for none

        Returns:
            Client-specific result
        """
        pass


# host:port list -> client that shards keys across those servers
ClientFactory = Callable[[List[str]], CacheClient]


def memcache_client_factory(servers: List[str]) -> CacheClient:
    """Build a pymemcache HashClient over the given servers.

    Storage commands wait for the server reply, so ``SERVER_ERROR``
    and friends are raised to the caller.

    Args:
        servers: ``host:port`` strings

    Returns:
        HashClient instance
    """
    try:
        from pymemcache.client.hash import HashClient
    except ImportError:
        raise ImportError("pymemcache package not installed. Run: pip install pymemcache")

    CacheClient.register(HashClient)
    return HashClient(servers, default_noreply=False)


@dataclass
class Item:
    """A value to store.

    Attributes:
        key: Cache key
        value: Value bytes
        expiration: Expiration in seconds, 0 for none
    """

    key: str
    value: bytes
    expiration: int = 0


class Client:
    """Cache client bound to the nodes of an ElastiCache cluster.

    Example:
        client = new()
        client.set(Item(key="user:1", value=b"alice", expiration=300))
    """

    def __init__(self, cache_client: CacheClient, nodes: Optional[NodeList] = None):
        """Initialize client.

        Args:
            cache_client: Underlying cache client
            nodes: Nodes the client was built for
        """
        self.cache_client = cache_client
        self._nodes: NodeList = list(nodes or [])

    @property
    def nodes(self) -> NodeList:
        """Get a copy of the discovered nodes."""
        return list(self._nodes)

    @property
    def servers(self) -> List[str]:
        """Get node URLs."""
        return [node.url for node in self._nodes]

    def set(self, item: Item) -> Any:
        """Store an item.

        The item's fields are copied into the underlying client's call;
        its result and errors pass through untouched.
        """
        return self.cache_client.set(item.key, item.value, expire=item.expiration)

    def __repr__(self) -> str:
        return f"Client(servers={self.servers})"


def client_for_nodes(
    nodes: NodeList,
    factory: Optional[ClientFactory] = None,
) -> Client:
    """Build a client over already-resolved nodes."""
    build = factory or memcache_client_factory
    servers = [node.url for node in nodes]
    logger.debug(f"Creating cache client for {servers}")
    return Client(build(servers), nodes)


def new(
    config: Optional[DiscoveryConfig] = None,
    factory: Optional[ClientFactory] = None,
) -> Client:
    """Discover the cluster and return a client for it.

    Args:
        config: Discovery configuration, endpoint from the environment by default
        factory: Builds the underlying cache client

    Returns:
        Client

    Raises:
        ConfigError: If no endpoint is configured
        OSError: If the configuration endpoint cannot be reached
        ProtocolError: If the discovery response cannot be parsed
    """
    nodes = ClusterResolver(config).resolve_nodes()
    return client_for_nodes(nodes, factory)


__all__ = [
    "CacheClient",
    "ClientFactory",
    "Client",
    "Item",
    "client_for_nodes",
    "memcache_client_factory",
    "new",
]
