"""Tests for the bidder registry."""

import pytest

from src.adpopcorn.adapter import AdpopcornBidAdapter, BidderRegistry, get_bidder_registry
from src.adpopcorn.adapter import registry as registry_module
from src.adpopcorn.adapter import register_bidder
from src.adpopcorn.config import YamlHostConfig
from src.adpopcorn.errors import (
    BidderAlreadyRegisteredError,
    BidderNotFoundError,
    BidderRegistryError,
)


@pytest.fixture
def adapter():
    return AdpopcornBidAdapter(config=YamlHostConfig())


class TestBidderRegistry:
    """Test suite for BidderRegistry."""

    @pytest.fixture
    def registry(self):
        return BidderRegistry()

    def test_register_and_get(self, registry, adapter):
        """Test registering and looking up an adapter."""
        registry.register(adapter)

        assert registry.get("adpopcorn") is adapter

    def test_alias_lookup(self, registry, adapter):
        """Test that aliases resolve to the same adapter."""
        registry.register(adapter)

        assert registry.get("ap") is adapter
        assert "ap" in registry
        assert registry.codes() == ["adpopcorn", "ap"]

    def test_not_found(self, registry):
        """Test that an unknown code raises BidderNotFoundError."""
        with pytest.raises(BidderNotFoundError):
            registry.get("unknown")

    def test_duplicate_registration(self, registry, adapter):
        """Test that a taken code raises BidderAlreadyRegisteredError."""
        registry.register(adapter)

        with pytest.raises(BidderAlreadyRegisteredError):
            registry.register(AdpopcornBidAdapter(config=YamlHostConfig()))

    def test_alias_conflict_registers_nothing(self, registry, adapter):
        """Test that a conflicting alias leaves the registry unchanged."""

        class OtherAdapter:
            code = "other"
            aliases = ["ap"]
            supported_media_types = ["banner"]

        registry.register(adapter)

        with pytest.raises(BidderAlreadyRegisteredError):
            registry.register(OtherAdapter())

        assert "other" not in registry

    def test_errors_share_base(self):
        """Test the registry error hierarchy."""
        assert issubclass(BidderNotFoundError, BidderRegistryError)
        assert issubclass(BidderAlreadyRegisteredError, BidderRegistryError)


class TestGlobalRegistry:
    """Test suite for the global registry."""

    @pytest.fixture(autouse=True)
    def fresh_registry(self, monkeypatch):
        monkeypatch.setattr(registry_module, "_registry", None)

    def test_empty_by_default(self):
        """Test that nothing is registered on import."""
        assert get_bidder_registry().codes() == []

    def test_register_bidder(self, adapter):
        """Test registration in the global registry."""
        result = register_bidder(adapter)

        assert result is adapter
        assert get_bidder_registry().get("adpopcorn") is adapter
