"""Ad identifier map decoding from the identifier cookie."""

from urllib.parse import unquote

from ..errors import InvalidCharacterError
from ..logging import get_logger
from .constants import PRIMARY_ADID_KEY
from .encoding import b64decode

logger = get_logger(__name__)


def get_adids(
    cookie: str,
    adids: dict[str, str | None] | None = None,
) -> dict[str, str | None]:
    """
    Decode an identifier cookie into an ad id map.

    The cookie is either base64 of ``key=value`` pairs separated by ``;`` or
    a raw hyphenated token, which becomes the primary id.

    Args:
        cookie: Raw cookie value ("" when unset)
        adids: Optional map to merge the decoded pairs into

    Returns:
        Map of numeric-string keys to identifiers
    """
    if adids is None:
        adids = {}

    decoded = ""
    try:
        decoded = b64decode(cookie)
    except InvalidCharacterError:
        if "-" in cookie:
            decoded = f"{PRIMARY_ADID_KEY}={cookie}"
        else:
            logger.debug("Undecodable identifier cookie ignored")

    for segment in decoded.split(";"):
        if segment == "":
            continue
        parts = unquote(segment).split("=")
        adids[parts[0]] = parts[1] if len(parts) > 1 else None

    return adids


def split_adids(
    adids: dict[str, str | None],
) -> tuple[str | None, dict[str, str | None]]:
    """
    Split an ad id map into the primary id and the DSP id map.

    Returns:
        Tuple of (primary ad id, every other key)
    """
    dspid = {key: value for key, value in adids.items() if key != PRIMARY_ADID_KEY}
    return adids.get(PRIMARY_ADID_KEY), dspid
