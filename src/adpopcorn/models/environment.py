"""
Client environment and host collaborator interfaces.

The adapter never reads cookies, config or the client's browser state on its
own; the host injects objects satisfying these interfaces.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Optional, Protocol


class CookieStorage(Protocol):
    """Read access to first-party cookies."""

    def get_cookie(self, name: str) -> Optional[str]:
        ...


class HostConfig(Protocol):
    """Generic host configuration lookup by dotted key."""

    def get_config(self, key: str) -> Any:
        ...


class StaticCookieStorage:
    """Cookie storage backed by a plain mapping."""

    def __init__(self, cookies: dict[str, str] | None = None):
        self.cookies = dict(cookies or {})

    def get_cookie(self, name: str) -> Optional[str]:
        return self.cookies.get(name)


def _local_timezone_offset() -> int:
    """Minutes to add to local time to reach UTC."""
    utc_offset = datetime.now().astimezone().utcoffset()
    return -int(utc_offset.total_seconds() // 60) if utc_offset else 0


@dataclass
class ClientEnvironment:
    """
    Browser state of the client the auction runs for.

    Attributes:
        user_agent: Raw user agent string
        language: Preferred language tag (e.g. "en-US")
        screen_width: Screen width in pixels
        screen_height: Screen height in pixels
        timezone_offset: Minutes to add to local time to reach UTC
        do_not_track: Whether the client sent a Do Not Track signal
        top_referrer_reader: Reads the top document referrer; may raise
            CrossOriginAccessError
    """

    user_agent: str = ""
    language: str = ""
    screen_width: int = 0
    screen_height: int = 0
    timezone_offset: int = field(default_factory=_local_timezone_offset)
    do_not_track: bool = False
    top_referrer_reader: Optional[Callable[[], str]] = None

    def top_referrer(self) -> str:
        """Referrer of the top-level document."""
        if self.top_referrer_reader is None:
            return ""
        return self.top_referrer_reader()

    @classmethod
    def from_headers(cls, headers: dict[str, str], **kwargs: Any) -> "ClientEnvironment":
        """
        Create from HTTP request headers.

        Args:
            headers: Request headers (User-Agent, Accept-Language, DNT)
            **kwargs: Values for fields headers do not carry

        Returns:
            ClientEnvironment populated from the headers
        """
        normalized = {key.lower(): value for key, value in headers.items()}
        accept_language = normalized.get("accept-language", "")
        language = accept_language.split(",")[0].split(";")[0].strip()

        return cls(
            user_agent=normalized.get("user-agent", ""),
            language=language,
            do_not_track=normalized.get("dnt", "") == "1",
            **kwargs,
        )
