"""Adpopcorn bidder adapter."""

from .bid_adapter import BANNER, AdpopcornBidAdapter
from .markup import create_track_pixel_iframe_html, get_ad_markup
from .registry import (
    BidderRegistry,
    get_bidder_registry,
    register_bidder,
)

__all__ = [
    'BANNER',
    'AdpopcornBidAdapter',
    'create_track_pixel_iframe_html',
    'get_ad_markup',
    'BidderRegistry',
    'get_bidder_registry',
    'register_bidder',
]
