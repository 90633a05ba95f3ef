"""ElastiCache Resolver - Cluster Node Discovery.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import socket
from typing import Any, Callable, Optional, Tuple

from elasticache_core.cluster.node import NodeList
from elasticache_core.cluster.parser import parse_node_result
from elasticache_core.config import DiscoveryConfig, split_endpoint
from elasticache_core.protocol.driver import ProtocolDriver

logger = logging.getLogger(__name__)

# (address, timeout) -> connected socket
ConnectionFactory = Callable[[Tuple[str, int], Optional[float]], Any]


def _create_connection(address: Tuple[str, int], timeout: Optional[float]) -> socket.socket:
    if timeout is None:
        return socket.create_connection(address)
    return socket.create_connection(address, timeout=timeout)


class ClusterResolver:
    """Resolves the node list of an ElastiCache cluster.

    Each call to ``resolve_nodes`` opens one connection to the
    configuration endpoint, runs ``stats`` and one discovery command,
    and closes the connection again. Nothing is cached between calls.

    Example:
        resolver = ClusterResolver(DiscoveryConfig(endpoint="cfg.local:11211"))
        for node in resolver.resolve_nodes():
            print(node.url)
    """

    def __init__(
        self,
        config: Optional[DiscoveryConfig] = None,
        connection_factory: Optional[ConnectionFactory] = None,
    ):
        """Initialize resolver.

        Args:
            config: Discovery configuration
            connection_factory: Opens the endpoint connection
        """
        self.config = config or DiscoveryConfig()
        self._connect = connection_factory or _create_connection

    def resolve_nodes(self) -> NodeList:
        """Discover the cluster nodes.

        Returns:
            Nodes in the order the endpoint lists them

        Raises:
            ConfigError: If no endpoint is configured
            OSError: If connecting or talking to the endpoint fails
            ProtocolError: If the response cannot be parsed
        """
        endpoint = self.config.get_endpoint()
        address = split_endpoint(endpoint)

        try:
            connection = self._connect(address, self.config.socket_timeout)
        except OSError as e:
            logger.error(f"Failed to connect to {endpoint}: {e}")
            raise

        try:
            driver = ProtocolDriver(connection)
            try:
                response = driver.discover()
                nodes = parse_node_result(response)
                if self.config.send_quit:
                    self._quit(driver, endpoint)
            finally:
                driver.close()
        except OSError as e:
            logger.error(f"Discovery against {endpoint} failed: {e}")
            raise
        finally:
            connection.close()

        logger.info(f"Discovered {len(nodes)} nodes from {endpoint}")
        logger.debug(f"Nodes: {[node.to_dict() for node in nodes]}")
        return nodes

    def _quit(self, driver: ProtocolDriver, endpoint: str) -> None:
        # Best effort, the node list is already complete
        try:
            driver.quit()
        except OSError as e:
            logger.warning(f"Failed to send quit to {endpoint}: {e}")


def resolve_nodes(config: Optional[DiscoveryConfig] = None) -> NodeList:
    """Discover cluster nodes with a default resolver."""
    return ClusterResolver(config).resolve_nodes()


__all__ = ["ClusterResolver", "ConnectionFactory", "resolve_nodes"]
