"""
Adpopcorn bid adapter.

Translates host bid objects into requests for the adpopcorn banner endpoint
and the endpoint's responses back into generic bids.
"""

from typing import Any

from ..config import get_host_config
from ..errors import CrossOriginAccessError
from ..logging import adapter_logger, auction_context, log_operation
from ..models.bid_request import BidRequestDescriptor
from ..models.bid_response import BidResponse, VendorAd
from ..models.environment import (
    ClientEnvironment,
    CookieStorage,
    HostConfig,
    StaticCookieStorage,
)
from ..models.server_request import ServerRequest, SyncPixel
from ..useragent import UserAgent
from ..utils.adids import get_adids, split_adids
from ..utils.constants import (
    ADAPTER_VERSION,
    BANNER_API_ENDPOINT,
    BID_TTL_SECONDS,
    BIDDER_ALIASES,
    BIDDER_CODE,
    COOKIE_NAME,
    DEFAULT_CURRENCY,
    DEFAULT_SERVER,
    HOST_VERSION_CONFIG_KEY,
    NET_REVENUE,
    RESERVED_POSITION,
    SERVER_CONFIG_KEY,
    USER_SYNC_URL,
)
from ..utils.urls import parse_url
from .markup import get_ad_markup

BANNER = "banner"

logger = adapter_logger(BIDDER_CODE)


class AdpopcornBidAdapter:
    """
    Bid adapter for the adpopcorn SSP.

    The host supplies the client environment, cookie storage and config;
    the adapter itself performs no I/O.
    """

    code = BIDDER_CODE
    aliases = BIDDER_ALIASES
    supported_media_types = [BANNER]

    def __init__(
        self,
        environment: ClientEnvironment | None = None,
        storage: CookieStorage | None = None,
        config: HostConfig | None = None,
    ):
        """
        Initialize the adapter.

        Args:
            environment: Client browser state (empty environment if omitted)
            storage: Cookie access (no cookies if omitted)
            config: Host config lookup (global config if omitted)
        """
        self.environment = environment or ClientEnvironment()
        self.storage = storage or StaticCookieStorage()
        self._config = config

    @property
    def config(self) -> HostConfig:
        if self._config is None:
            return get_host_config()
        return self._config

    def is_bid_request_valid(self, bid: dict[str, Any] | None) -> bool:
        """
        Check whether a bid carries the required params.

        Args:
            bid: Host bid object

        Returns:
            True when both publisherId and placementId are set
        """
        params = (bid or {}).get("params") or {}
        return bool(params.get("publisherId") and params.get("placementId"))

    def build_requests(
        self,
        bids: list[dict[str, Any]],
        bidder_request: dict[str, Any] | None = None,
    ) -> list[ServerRequest]:
        """
        Build one endpoint request per banner bid.

        Log lines emitted meanwhile carry the auction's identifiers.

        Args:
            bids: Host bid objects, already validated
            bidder_request: Host auction context (refererInfo, auctionId,
                bidderRequestId)

        Returns:
            Server requests in bid order; non-banner bids are skipped
        """
        bidder_request = bidder_request or {}
        with auction_context(bidder_request):
            return self._build_requests(bids, bidder_request)

    @log_operation(logger, "build_requests")
    def _build_requests(
        self,
        bids: list[dict[str, Any]],
        bidder_request: dict[str, Any],
    ) -> list[ServerRequest]:
        banner_bids = [
            descriptor
            for descriptor in (BidRequestDescriptor.from_dict(bid) for bid in bids)
            if descriptor.is_banner
        ]
        if not banner_bids:
            return []

        env = self.environment
        ua = UserAgent(env.user_agent)
        device = ua.device()
        os = ua.os()
        browser = ua.browser()
        browser["dnt"] = env.do_not_track
        browser["language"] = (env.language or "")[:2]

        adid, dspid = split_adids(get_adids(self.storage.get_cookie(COOKIE_NAME) or ""))
        site = self._get_site_info(bidder_request.get("refererInfo") or {})
        url = f"https://{self._get_api_server()}{BANNER_API_ENDPOINT}"
        version = {
            "pbjs": self.config.get_config(HOST_VERSION_CONFIG_KEY) or "unknown",
            "adapter": ADAPTER_VERSION,
        }

        requests = []
        for bid in banner_bids:
            requests.append(
                ServerRequest(
                    url=url,
                    bid_id=bid.bid_id,
                    data={
                        "publisherId": bid.publisher_id,
                        "placementId": bid.placement_id,
                        "external": bid.external,
                        "dspid": dspid,
                        "width": env.screen_width,
                        "height": env.screen_height,
                        "device": device,
                        "os": os,
                        "browser": browser,
                        "tzOffset": -env.timezone_offset,
                        "position": dict(RESERVED_POSITION),
                        "site": site,
                        "bcat": bid.bcat,
                        "adid": adid,
                        "bannerSize": bid.banner_size,
                        "ua": str(ua),
                        "version": version,
                    },
                )
            )

        logger.debug(
            "Bid requests built",
            requests=len(requests),
            skipped=len(bids) - len(requests),
            device_type=device.get("type"),
        )
        return requests

    @log_operation(logger)
    def interpret_response(
        self,
        server_response: dict[str, Any],
        request: ServerRequest | dict[str, Any],
    ) -> list[BidResponse]:
        """
        Unpack an endpoint response into bids.

        Args:
            server_response: Transport response with the JSON body under "body"
            request: The request the response answers

        Returns:
            One bid per returned ad; empty on no fill
        """
        body = (server_response or {}).get("body") or {}
        if not body.get("Result"):
            logger.debug("No fill", result_code=body.get("ResultCode"))
            return []

        bid_id = request.bid_id if isinstance(request, ServerRequest) else request.get("bidId")
        is_test = body.get("IsTest")

        bids = []
        for entry in body.get("AdList") or []:
            ad = VendorAd.from_dict(entry)
            bids.append(
                BidResponse(
                    request_id=bid_id,
                    cpm=ad.bid_price,
                    currency=ad.bid_currency or DEFAULT_CURRENCY,
                    creative_id=ad.creative_id or bid_id,
                    width=ad.width,
                    height=ad.height,
                    ad=get_ad_markup(ad),
                    net_revenue=NET_REVENUE,
                    ttl=BID_TTL_SECONDS,
                    is_test=is_test,
                )
            )

        return bids

    def get_user_syncs(self, sync_options: dict[str, Any]) -> list[SyncPixel]:
        """
        User sync pixels to drop after the auction.

        Args:
            sync_options: Host sync options (iframeEnabled)

        Returns:
            The iframe sync when iframe syncing is enabled, else nothing
        """
        if (sync_options or {}).get("iframeEnabled"):
            return [SyncPixel(type="iframe", url=USER_SYNC_URL)]
        return []

    def _get_api_server(self) -> str:
        return self.config.get_config(SERVER_CONFIG_KEY) or DEFAULT_SERVER

    def _get_site_info(self, referer_info: dict[str, Any]) -> dict[str, str]:
        """Site domain, normalized page URL and top-level referrer."""
        parsed = parse_url(referer_info.get("referer") or "")
        referrer = ""

        try:
            referrer = self.environment.top_referrer()
        except CrossOriginAccessError:
            logger.debug("Top document referrer not accessible")

        return {
            "domain": f"{parsed.protocol}://{parsed.hostname}",
            "url": parsed.href,
            "referrer": referrer,
        }
