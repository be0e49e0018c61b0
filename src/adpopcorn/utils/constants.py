"""Adpopcorn adapter constants."""

BIDDER_CODE: str = "adpopcorn"
BIDDER_ALIASES: list[str] = ["ap"]

# Bid endpoint
DEFAULT_SERVER: str = "ssp-web-request.igaw.io"
BANNER_API_ENDPOINT: str = "/v1/rev1/banner"
SERVER_CONFIG_KEY: str = "adpopcorn.server"
HOST_VERSION_CONFIG_KEY: str = "adpopcorn.host_version"

# Identifier cookie
COOKIE_NAME: str = "__igaw__adid"
PRIMARY_ADID_KEY: str = "000"

ADAPTER_VERSION: str = "1.0.2"

# User sync
USER_SYNC_URL: str = "https://ssp.igaw.io/usersync.html"

# Creative markup
TRACKER_SCRIPT_URL: str = "//ssp.igaw.io/sdk/js/trk.js"

# Bid response defaults
DEFAULT_CURRENCY: str = "USD"
BID_TTL_SECONDS: int = 60
NET_REVENUE: bool = True

# Screen position is reserved by the endpoint and always sent as the origin
RESERVED_POSITION: dict[str, int] = {"x": 0, "y": 0}
