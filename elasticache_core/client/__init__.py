"""Client module - Cache client over discovered nodes."""

from elasticache_core.client.client import (
    CacheClient,
    Client,
    Item,
    client_for_nodes,
    memcache_client_factory,
    new,
)

__all__ = [
    "CacheClient",
    "Client",
    "Item",
    "client_for_nodes",
    "memcache_client_factory",
    "new",
]
