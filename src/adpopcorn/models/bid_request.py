"""
Bid request descriptor model.

Normalizes a host bid object (camelCase keys, nested params and media
types) into the fields the adpopcorn endpoint needs.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class BidRequestDescriptor:
    """
    A single bid to be sent to the endpoint.

    Attributes:
        bid_id: Host-assigned bid identifier
        publisher_id: Adpopcorn publisher ID
        placement_id: Adpopcorn placement ID
        external: Opaque publisher data forwarded as-is
        bcat: Blocked IAB categories
        width: Width of the first declared banner size
        height: Height of the first declared banner size
        is_banner: Whether the bid declares a banner slot
    """

    bid_id: str
    publisher_id: str | None = None
    placement_id: str | None = None
    external: dict[str, Any] = field(default_factory=dict)
    bcat: list[str] = field(default_factory=list)
    width: int = 0
    height: int = 0
    is_banner: bool = False

    @property
    def banner_size(self) -> str:
        """Banner size as WxH."""
        return f"{self.width}x{self.height}"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BidRequestDescriptor":
        """Create from a host bid object."""
        params = data.get("params") or {}
        banner = (data.get("mediaTypes") or {}).get("banner")
        sizes = (banner or {}).get("sizes") or [[0, 0]]
        width, height = sizes[0][0], sizes[0][1]

        external = params.get("external")
        bcat = params.get("bcat")

        return cls(
            bid_id=data.get("bidId", ""),
            publisher_id=params.get("publisherId"),
            placement_id=params.get("placementId"),
            external=external if external is not None else {},
            bcat=bcat if bcat is not None else [],
            width=width,
            height=height,
            is_banner=banner is not None,
        )
