"""Creative markup synthesis for adpopcorn bids."""

from urllib.parse import quote

from ..models.bid_response import VendorAd
from ..utils.constants import TRACKER_SCRIPT_URL
from ..utils.id_generator import generate_element_id

# Characters encodeURI leaves untouched besides letters, digits and -_.~
_URI_SAFE = ";,/?:@&=+$!*'()#"

_RESET_CSS = (
    "html,body,div,iframe,canvas,video,img,a{margin:0;padding:0;border:0}"
    "html{font-size:100%;-webkit-text-size-adjust:100%;-ms-text-size-adjust:100%}"
    "body{line-height:1}"
    "a{background-color:transparent}"
    "a:focus{outline:thin dotted}"
    "a:active,a:hover{outline:0}"
    "img{border:0;border-style:none;-ms-interpolation-mode:bicubic;vertical-align:middle}"
    "canvas,video{display:inline-block;*display:inline;*zoom:1;max-width:100%}"
)

_DOCUMENT = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>advertisement</title>
<script src="{tracker_script}"></script>
<style type="text/css">{css}</style>
</head>
<body>
{adm}
{win_notices}
<script>
IGAWorks.Tracker.Viewability([{imp_trackers}], {viewability});
</script>
</body>
</html>"""


def create_track_pixel_iframe_html(url: str, encode_uri: bool = True, sandbox: str = "") -> str:
    """
    Render a hidden iframe that loads a tracking URL.

    Args:
        url: Tracking URL
        encode_uri: Whether to URI-encode the URL
        sandbox: Optional iframe sandbox flags

    Returns:
        Iframe HTML, or an empty string when no URL is given
    """
    if not url:
        return ""
    if encode_uri:
        url = quote(url, safe=_URI_SAFE)
    sandbox_attr = f'sandbox="{sandbox}"' if sandbox else ""

    return (
        f'<iframe {sandbox_attr} id="{generate_element_id()}"\n'
        '      frameborder="0"\n'
        '      allowtransparency="true"\n'
        '      marginheight="0" marginwidth="0"\n'
        '      width="0" hspace="0" vspace="0" height="0"\n'
        '      style="height:0px;width:0px;display:none;"\n'
        '      scrolling="no"\n'
        f'      src="{url}">\n'
        "    </iframe>"
    )


def get_ad_markup(ad: VendorAd) -> str:
    """
    Wrap an ad's markup in a full HTML document.

    The document fires one iframe per win notice and hands the impression
    trackers to the viewability tracker script.
    """
    win_notices = ",".join(create_track_pixel_iframe_html(url) for url in ad.win_notices)
    imp_trackers = ",".join(f"'{url}'" for url in ad.imp_trackers)
    viewability = "false" if ad.check_viewability else "true"

    return _DOCUMENT.format(
        tracker_script=TRACKER_SCRIPT_URL,
        css=_RESET_CSS,
        adm=ad.adm,
        win_notices=win_notices,
        imp_trackers=imp_trackers,
        viewability=viewability,
    )
