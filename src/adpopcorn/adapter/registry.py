"""
Bidder adapter registry.

Maps bidder codes and aliases to adapter instances so a host can look
adapters up by the code used in its ad unit configuration.
"""

from typing import Any, Protocol

from ..errors import BidderAlreadyRegisteredError, BidderNotFoundError
from ..logging import get_logger

logger = get_logger(__name__)


class BidderAdapter(Protocol):
    """Interface every registered bidder adapter provides."""

    code: str
    aliases: list[str]
    supported_media_types: list[str]

    def is_bid_request_valid(self, bid: dict[str, Any]) -> bool:
        ...

    def build_requests(self, bids: list[dict[str, Any]], bidder_request: dict[str, Any]) -> list:
        ...

    def interpret_response(self, server_response: dict[str, Any], request: Any) -> list:
        ...

    def get_user_syncs(self, sync_options: dict[str, Any]) -> list:
        ...


class BidderRegistry:
    """Registry of bidder adapters keyed by code and alias."""

    def __init__(self):
        self._adapters: dict[str, BidderAdapter] = {}

    def register(self, adapter: BidderAdapter) -> None:
        """
        Register an adapter under its code and aliases.

        Raises:
            BidderAlreadyRegisteredError: If any of the codes is taken
        """
        codes = [adapter.code, *adapter.aliases]
        for code in codes:
            if code in self._adapters:
                raise BidderAlreadyRegisteredError(f"Bidder already registered: {code}")

        for code in codes:
            self._adapters[code] = adapter

        logger.info("Bidder registered", bidder=adapter.code, aliases=adapter.aliases)

    def get(self, code: str) -> BidderAdapter:
        """
        Get the adapter for a code or alias.

        Raises:
            BidderNotFoundError: If nothing is registered under the code
        """
        adapter = self._adapters.get(code)
        if adapter is None:
            raise BidderNotFoundError(f"Bidder not found: {code}")
        return adapter

    def __contains__(self, code: str) -> bool:
        return code in self._adapters

    def codes(self) -> list[str]:
        """All registered codes and aliases."""
        return sorted(self._adapters)


# Global registry instance
_registry: BidderRegistry | None = None


def get_bidder_registry() -> BidderRegistry:
    """Get the global bidder registry."""
    global _registry
    if _registry is None:
        _registry = BidderRegistry()
    return _registry


def register_bidder(adapter: BidderAdapter) -> BidderAdapter:
    """Register an adapter in the global registry."""
    get_bidder_registry().register(adapter)
    return adapter
