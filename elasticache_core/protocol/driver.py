"""ElastiCache Protocol Driver - Auto-Discovery Command Exchange.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Any, BinaryIO, List, Optional

from elasticache_core.errors import ProtocolError
from elasticache_core.protocol.stats import VersionInfo, parse_stats

logger = logging.getLogger(__name__)

STATS_COMMAND = "stats"
CONFIG_COMMAND = "config get cluster"
LEGACY_COMMAND = "get AmazonElastiCache:cluster"
QUIT_COMMAND = "quit"

OUTPUT_END_MARKER = "END"
LINE_TERMINATOR = b"\r\n"
ENCODING = "ascii"


def select_command(version_info: VersionInfo) -> str:
    """Pick the discovery command for a server version.

    Args:
        version_info: Parsed ``stats`` version

    Returns:
        ``config get cluster`` from 1.4.14 on, the legacy key lookup before
    """
    if version_info.supports_config_command:
        return CONFIG_COMMAND
    return LEGACY_COMMAND


class ProtocolDriver:
    """Runs the auto-discovery exchange over an open connection.

    The connection must offer ``sendall`` and ``makefile`` (a socket).
    Responses are read line by line until the ``END`` marker; the driver
    sets no timeout of its own, so reads block under whatever deadline
    the socket carries.

    Example:
        with socket.create_connection(("cfg.example.com", 11211)) as sock:
            lines = ProtocolDriver(sock).discover()
    """

    def __init__(self, connection: Any):
        """Initialize driver.

        Args:
            connection: Connected socket-like object
        """
        self._connection = connection
        self._reader: Optional[BinaryIO] = None

    def _get_reader(self) -> BinaryIO:
        if self._reader is None:
            self._reader = self._connection.makefile("rb")
        return self._reader

    def send(self, command: str) -> None:
        """Send a command line."""
        logger.debug(f"Sending '{command}'")
        self._connection.sendall(command.encode(ENCODING) + LINE_TERMINATOR)

    def read_response(self) -> List[str]:
        """Read response lines up to, not including, ``END``.

        Raises:
            ConnectionError: If the connection closes before ``END``
            ProtocolError: If a line is not ASCII
        """
        reader = self._get_reader()
        lines: List[str] = []

        while True:
            raw = reader.readline()
            if not raw:
                raise ConnectionError(
                    f"connection closed after {len(lines)} lines, before {OUTPUT_END_MARKER}"
                )

            try:
                line = raw.decode(ENCODING).rstrip("\r\n")
            except UnicodeDecodeError:
                raise ProtocolError(f"non-ASCII response line: {raw!r}") from None
            if line == OUTPUT_END_MARKER:
                break
            lines.append(line)

        logger.debug(f"Received {len(lines)} response lines")
        return lines

    def command(self, command: str) -> List[str]:
        """Send a command and read its response."""
        self.send(command)
        return self.read_response()

    def stats(self) -> List[str]:
        """Run ``stats``."""
        return self.command(STATS_COMMAND)

    def server_version(self) -> VersionInfo:
        """Run ``stats`` and parse the server version."""
        return parse_stats(self.stats())

    def discover(self) -> List[str]:
        """Run the version-appropriate discovery command.

        Returns:
            Raw discovery response lines
        """
        version_info = self.server_version()
        command = select_command(version_info)
        logger.debug(f"Server version {version_info}, using '{command}'")
        return self.command(command)

    def quit(self) -> None:
        """Ask the server to close the session."""
        self.send(QUIT_COMMAND)

    def close(self) -> None:
        """Close the buffered reader; the connection is left to its owner."""
        if self._reader is not None:
            self._reader.close()
            self._reader = None


__all__ = [
    "ProtocolDriver",
    "select_command",
    "STATS_COMMAND",
    "CONFIG_COMMAND",
    "LEGACY_COMMAND",
    "OUTPUT_END_MARKER",
]
