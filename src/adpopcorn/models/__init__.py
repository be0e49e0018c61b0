"""Adapter data models."""

from .bid_request import BidRequestDescriptor
from .bid_response import BidResponse, VendorAd
from .environment import (
    ClientEnvironment,
    CookieStorage,
    HostConfig,
    StaticCookieStorage,
)
from .server_request import ServerRequest, SyncPixel

__all__ = [
    'BidRequestDescriptor',
    'BidResponse',
    'VendorAd',
    'ClientEnvironment',
    'CookieStorage',
    'HostConfig',
    'StaticCookieStorage',
    'ServerRequest',
    'SyncPixel',
]
