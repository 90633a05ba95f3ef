"""Tests for discovery configuration.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

import pytest

from elasticache_core.config import DiscoveryConfig, elasticache_endpoint, split_endpoint
from elasticache_core.errors import ConfigError


class TestEndpoint:
    """Tests for endpoint lookup."""

    def test_endpoint_from_env(self, monkeypatch):
        """Test the raw value is returned."""
        monkeypatch.setenv("ELASTICACHE_ENDPOINT", "foo")
        assert elasticache_endpoint() == "foo"

    def test_missing_endpoint(self, monkeypatch):
        """Test unset variable."""
        monkeypatch.delenv("ELASTICACHE_ENDPOINT", raising=False)
        with pytest.raises(ConfigError, match="endpoint not set"):
            elasticache_endpoint()

    def test_empty_endpoint(self, monkeypatch):
        """Test empty variable."""
        monkeypatch.setenv("ELASTICACHE_ENDPOINT", "")
        with pytest.raises(ConfigError, match="endpoint not set"):
            elasticache_endpoint()

    def test_split(self):
        """Test host:port splitting."""
        assert split_endpoint("cfg.cache.local:11211") == ("cfg.cache.local", 11211)

    def test_split_ipv6(self):
        """Test brackets are removed from IPv6 hosts."""
        assert split_endpoint("[::1]:11211") == ("::1", 11211)
        assert split_endpoint("[fd00::5]:11212") == ("fd00::5", 11212)

    @pytest.mark.parametrize("endpoint", ["foo", ":11211", "foo:bar", "[]:11211"])
    def test_split_invalid(self, endpoint):
        """Test unusable endpoints."""
        with pytest.raises(ConfigError):
            split_endpoint(endpoint)


class TestDiscoveryConfig:
    """Tests for DiscoveryConfig."""

    def test_defaults(self):
        """Test default values."""
        config = DiscoveryConfig()
        assert config.endpoint is None
        assert config.env_var == "ELASTICACHE_ENDPOINT"
        assert config.socket_timeout is None
        assert config.send_quit

    def test_explicit_endpoint_wins(self, monkeypatch):
        """Test explicit endpoint ignores environment."""
        monkeypatch.setenv("ELASTICACHE_ENDPOINT", "env.local:1")
        config = DiscoveryConfig(endpoint="cfg.local:11211")
        assert config.get_endpoint() == "cfg.local:11211"

    def test_custom_env_var(self, monkeypatch):
        """Test alternate variable name."""
        monkeypatch.setenv("MY_CACHE", "other.local:11212")
        config = DiscoveryConfig(env_var="MY_CACHE")
        assert config.get_endpoint() == "other.local:11212"

    def test_endpoint_from_env_fallback(self, endpoint_env):
        """Test environment used when no endpoint is given."""
        assert DiscoveryConfig().get_endpoint() == endpoint_env
