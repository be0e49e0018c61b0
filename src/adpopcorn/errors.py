"""Exceptions raised by the adpopcorn adapter."""


class AdapterError(Exception):
    """Base exception for adapter errors."""

    pass


class InvalidCharacterError(AdapterError, ValueError):
    """Raised when a base64 payload is not correctly encoded."""

    pass


class CrossOriginAccessError(AdapterError):
    """Raised by an environment when the top document cannot be read."""

    pass


class ConfigError(AdapterError):
    """Raised when adapter configuration cannot be loaded."""

    pass


class BidderRegistryError(AdapterError):
    """Base exception for bidder registry errors."""

    pass


class BidderNotFoundError(BidderRegistryError):
    """Raised when a bidder code is not registered."""

    pass


class BidderAlreadyRegisteredError(BidderRegistryError):
    """Raised when a bidder code or alias is already taken."""

    pass
