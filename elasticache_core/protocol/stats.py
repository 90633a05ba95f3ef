"""ElastiCache Stats - Server Version Detection.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence, Union

from packaging.version import InvalidVersion, Version

from elasticache_core.errors import ProtocolError

VERSION_REGEX = re.compile(r"^STAT version ([0-9.]+)\s*$", re.MULTILINE)

# Servers before this version only know the legacy discovery key
CONFIG_COMMAND_VERSION = Version("1.4.14")


@dataclass(frozen=True)
class VersionInfo:
    """Server version reported by ``stats``.

    Attributes:
        version: Parsed server version
    """

    version: Version

    @property
    def supports_config_command(self) -> bool:
        """Check if the server understands ``config get cluster``."""
        return self.version >= CONFIG_COMMAND_VERSION

    def __str__(self) -> str:
        return str(self.version)


def parse_stats(stats: Union[str, Sequence[str]]) -> VersionInfo:
    """Extract the server version from a ``stats`` response.

    Args:
        stats: Response lines, or the response as one block

    Returns:
        VersionInfo

    Raises:
        ProtocolError: If no version line is present or it is malformed
    """
    text = stats if isinstance(stats, str) else "\n".join(stats)

    match = VERSION_REGEX.search(text)
    if match is None:
        raise ProtocolError("no version line found")

    try:
        version = Version(match.group(1))
    except InvalidVersion:
        raise ProtocolError("malformed version") from None

    return VersionInfo(version=version)


__all__ = ["VersionInfo", "parse_stats", "CONFIG_COMMAND_VERSION"]
