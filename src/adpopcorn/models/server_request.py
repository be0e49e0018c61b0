"""Outbound request models handed to the host transport."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ServerRequest:
    """
    An HTTP request for the host transport to dispatch.

    Attributes:
        url: Bid endpoint URL
        data: JSON body
        bid_id: Bid the request was built for
        method: HTTP method
        options: Transport options (content type, credentials)
    """

    url: str
    data: dict[str, Any]
    bid_id: str
    method: str = "POST"
    options: dict[str, Any] = field(
        default_factory=lambda: {
            "contentType": "application/json",
            "withCredentials": False,
        }
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the host's request shape."""
        return {
            "method": self.method,
            "url": self.url,
            "options": self.options,
            "data": self.data,
            "bidId": self.bid_id,
        }


@dataclass
class SyncPixel:
    """A user sync pixel to drop after the auction."""

    type: str
    url: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "url": self.url}
