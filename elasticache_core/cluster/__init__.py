"""Cluster module - Node model, response parsing and discovery."""

from elasticache_core.cluster.node import Node, NodeList
from elasticache_core.cluster.parser import parse_node_line, parse_node_result
from elasticache_core.cluster.resolver import ClusterResolver, resolve_nodes

__all__ = [
    "Node",
    "NodeList",
    "parse_node_line",
    "parse_node_result",
    "ClusterResolver",
    "resolve_nodes",
]
