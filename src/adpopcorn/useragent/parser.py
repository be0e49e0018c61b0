"""User agent facet extraction for device, OS and browser detection."""

from typing import Any

from .matcher import match
from .patterns import DEFAULT_PATTERNS, UserAgentPatterns

DEFAULT_DEVICE_TYPE = "desktop"


class UserAgent:
    """
    A user agent string with device, OS and browser facets.

    Each facet is matched independently against its pattern table; a user
    agent that matches no device rule is reported as a desktop.
    """

    def __init__(self, ua: str, patterns: UserAgentPatterns = DEFAULT_PATTERNS):
        self.ua = ua
        self.patterns = patterns

    def device(self) -> dict[str, Any]:
        """Detect device model, vendor and type."""
        result = match(self.ua, self.patterns.device)
        if not result:
            result["type"] = DEFAULT_DEVICE_TYPE
        return result

    def os(self) -> dict[str, Any]:
        """Detect operating system name and version."""
        return match(self.ua, self.patterns.os)

    def browser(self) -> dict[str, Any]:
        """Detect browser name and version."""
        return match(self.ua, self.patterns.browser)

    def __str__(self) -> str:
        return self.ua

    def __repr__(self) -> str:
        return f"UserAgent({self.ua!r})"


def extract_facets(ua_string: str) -> dict[str, dict[str, Any]]:
    """
    Extract all facets from a user agent string.

    Args:
        ua_string: The user agent string to parse

    Returns:
        Dict with "device", "os" and "browser" field maps
    """
    ua = UserAgent(ua_string)
    return {
        "device": ua.device(),
        "os": ua.os(),
        "browser": ua.browser(),
    }
