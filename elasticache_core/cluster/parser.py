"""ElastiCache Node List Parser - Discovery Response Parsing.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

Both discovery commands answer with the same payload:

    CONFIG cluster 0 134           (VALUE AmazonElastiCache:cluster ... on old servers)
    <count>
    host|ip|port host|ip|port ...
    <blank>
    END

A bare entries line without any header is also accepted; in that case no
count validation is possible.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Union

from elasticache_core.cluster.node import Node, NodeList
from elasticache_core.errors import ParseError, ProtocolError

logger = logging.getLogger(__name__)

NODE_SEPARATOR = " "
FIELD_SEPARATOR = "|"

Response = Union[str, Sequence[str]]


def _as_lines(response: Response) -> List[str]:
    if isinstance(response, str):
        return response.splitlines()
    return [line.rstrip("\r\n") for line in response]


def parse_node_line(entry: str) -> Node:
    """Parse a single ``host|ip|port`` entry.

    Args:
        entry: Node entry

    Returns:
        Parsed Node

    Raises:
        ProtocolError: If the entry does not have exactly three fields
        ParseError: If the port is not numeric
    """
    fields = entry.split(FIELD_SEPARATOR)
    if len(fields) != 3:
        raise ProtocolError(f"invalid node entry: {entry}")

    host, ip, port = fields
    try:
        port_number = int(port)
    except ValueError as e:
        raise ParseError(f"invalid port in node entry '{entry}': {e}") from e

    return Node(host=host, ip=ip, port=port_number)


def _declared_count(header: str) -> int:
    tokens = header.split()
    try:
        return int(tokens[-1])
    except (IndexError, ValueError):
        raise ProtocolError("missing node count") from None


def parse_node_result(response: Response) -> NodeList:
    """Parse a discovery response into nodes.

    Lines holding ``|`` carry the node entries; everything else is skipped.
    When a non-blank line precedes the entries, its last token is the
    declared node count and must match the number of entries.

    Args:
        response: Response lines, or the response as one block

    Returns:
        Nodes in response order

    Raises:
        ProtocolError: On missing entries, count mismatch or bad entry
        ParseError: If a port is not numeric
    """
    lines = _as_lines(response)

    entry_lines = [i for i, line in enumerate(lines) if FIELD_SEPARATOR in line]
    if not entry_lines:
        raise ProtocolError("no node entries found")

    entries: List[str] = []
    for i in entry_lines:
        entries.extend(lines[i].strip().split(NODE_SEPARATOR))

    header: Optional[str] = None
    for line in reversed(lines[:entry_lines[0]]):
        if line.strip():
            header = line
            break

    if header is not None:
        expected = _declared_count(header)
        if expected != len(entries):
            raise ProtocolError(
                f"node count mismatch: expected {expected}, got {len(entries)}"
            )
    else:
        logger.debug("No header before node entries, skipping count check")

    return [parse_node_line(entry) for entry in entries]


__all__ = ["parse_node_line", "parse_node_result", "NODE_SEPARATOR"]
