"""
Bid response models.

VendorAd mirrors one entry of the endpoint's AdList; BidResponse is the
generic bid handed back to the host.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class VendorAd:
    """
    An ad returned by the adpopcorn endpoint.

    Attributes:
        bid_price: Bid CPM
        width: Creative width
        height: Creative height
        adm: Creative markup fragment
        bid_currency: ISO 4217 currency, when given
        creative_id: Creative ID, when given
        click_trackers: Click tracking URLs
        imp_trackers: Impression tracking URLs
        win_notices: Win notice URLs
        check_viewability: Whether the endpoint measures viewability itself
    """

    bid_price: float
    width: int
    height: int
    adm: str = ""
    bid_currency: str | None = None
    creative_id: str | None = None
    click_trackers: list[str] = field(default_factory=list)
    imp_trackers: list[str] = field(default_factory=list)
    win_notices: list[str] = field(default_factory=list)
    check_viewability: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "VendorAd":
        """Create from an AdList entry."""
        return cls(
            bid_price=data.get("bid_price"),
            width=data.get("width"),
            height=data.get("height"),
            adm=data.get("adm", ""),
            bid_currency=data.get("bid_currency"),
            creative_id=data.get("creative_id"),
            click_trackers=data.get("ClickTrackersList") or [],
            imp_trackers=data.get("ImpTrackersList") or [],
            win_notices=data.get("WinNoticeList") or [],
            check_viewability=data.get("CheckViewability", False),
        )


@dataclass
class BidResponse:
    """
    A generic bid for the host auction.

    Attributes:
        request_id: ID of the bid this responds to
        cpm: Bid price
        currency: ISO 4217 currency
        creative_id: Creative ID
        width: Creative width
        height: Creative height
        ad: Full creative HTML document
        net_revenue: Whether the price is net of fees
        ttl: Seconds the bid stays valid
        is_test: Test flag reported by the endpoint
    """

    request_id: str
    cpm: float
    currency: str
    creative_id: str
    width: int
    height: int
    ad: str
    net_revenue: bool = True
    ttl: int = 60
    is_test: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the host's bid shape."""
        return {
            "requestId": self.request_id,
            "cpm": self.cpm,
            "currency": self.currency,
            "creativeId": self.creative_id,
            "width": self.width,
            "height": self.height,
            "netRevenue": self.net_revenue,
            "ttl": self.ttl,
            "ad": self.ad,
            "adpopcorn": {
                "isTest": self.is_test,
            },
        }
