"""Protocol module - Auto-discovery commands and stats parsing."""

from elasticache_core.protocol.stats import VersionInfo, parse_stats
from elasticache_core.protocol.driver import ProtocolDriver, select_command

__all__ = [
    "VersionInfo",
    "parse_stats",
    "ProtocolDriver",
    "select_command",
]
