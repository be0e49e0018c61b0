"""
Adpopcorn bid adapter.

Translates host auction bid requests into requests for the adpopcorn SSP
banner endpoint, and the endpoint's responses back into generic bids.
Device, OS and browser facets are detected from the client's user agent.
"""

from .adapter import AdpopcornBidAdapter, BidderRegistry, register_bidder
from .models import (
    BidRequestDescriptor,
    BidResponse,
    ClientEnvironment,
    ServerRequest,
    SyncPixel,
    VendorAd,
)
from .useragent import UserAgent, extract_facets
from .utils import get_adids

__version__ = '1.0.2'

__all__ = [
    'AdpopcornBidAdapter',
    'BidderRegistry',
    'register_bidder',
    'BidRequestDescriptor',
    'BidResponse',
    'ClientEnvironment',
    'ServerRequest',
    'SyncPixel',
    'VendorAd',
    'UserAgent',
    'extract_facets',
    'get_adids',
]
