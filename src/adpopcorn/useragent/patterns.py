"""
User agent detection tables.

Rules are adapted from ua-parser-js (https://github.com/faisalman/ua-parser-js).
Order matters: the first matching entry wins, so specific devices and
browsers are listed ahead of generic catch-alls.
"""

import re
from dataclasses import dataclass

from .fields import (
    CONSOLE,
    MOBILE,
    MODEL,
    NAME,
    SMARTTV,
    TABLET,
    TYPE,
    VENDOR,
    VERSION,
    ConstantField,
    PatternEntry,
    PlainField,
    TransformField,
)
from .matcher import compile_pattern, lowerize, resolve_by_string

# Windows NT kernel versions to marketing versions
WINDOWS_VERSIONS: dict[str, str | list[str]] = {
    "ME": "4.90",
    "NT 3.11": "NT3.51",
    "NT 4.0": "NT4.0",
    "2000": "NT 5.0",
    "XP": ["NT 5.1", "NT 5.2"],
    "Vista": "NT 6.0",
    "7": "NT 6.1",
    "8": "NT 6.2",
    "8.1": "NT 6.3",
    "10": ["NT 6.4", "NT 10.0"],
    "RT": "ARM",
}

_UNDERSCORES = compile_pattern(r"_")
_DOTS = compile_pattern(r"\.")

_model = PlainField(MODEL)
_name = PlainField(NAME)
_vendor = PlainField(VENDOR)
_version = PlainField(VERSION)
_model_spaced = TransformField(MODEL, _UNDERSCORES, " ")
_version_dotted = TransformField(VERSION, _UNDERSCORES, ".")
_windows_version = TransformField(VERSION, resolve_by_string, WINDOWS_VERSIONS)


def _entry(regexes, fields) -> PatternEntry:
    return PatternEntry(tuple(regexes), tuple(fields))


def _vendor_is(vendor: str) -> ConstantField:
    return ConstantField(VENDOR, vendor)


def _name_is(name: str) -> ConstantField:
    return ConstantField(NAME, name)


DEVICE_PATTERNS: tuple[PatternEntry, ...] = (
    _entry([compile_pattern(r"\((ipad|playbook);[\w\s\),;-]+(rim|apple)", re.I)],
           [_model, _vendor, TABLET]),
    _entry([compile_pattern(r"applecoremedia\/[\w\.]+ \((ipad)")],
           [_model, _vendor_is("Apple"), TABLET]),
    _entry([compile_pattern(r"(apple\s{0,1}tv)", re.I)],
           [ConstantField(MODEL, "Apple TV"), _vendor_is("Apple")]),
    _entry([
        compile_pattern(r"(archos)\s(gamepad2?)", re.I),
        compile_pattern(r"(hp).+(touchpad)", re.I),
        compile_pattern(r"(hp).+(tablet)", re.I),
        compile_pattern(r"(kindle)\/([\w\.]+)", re.I),
        compile_pattern(r"\s(nook)[\w\s]+build\/(\w+)", re.I),
        compile_pattern(r"(dell)\s(strea[kpr\s\d]*[\dko])", re.I),
    ], [_vendor, _model, TABLET]),
    _entry([compile_pattern(r"(kf[A-z]+)\sbuild\/.+silk\/", re.I)],
           [_model, _vendor_is("Amazon"), TABLET]),
    _entry([compile_pattern(r"android.+aft([bms])\sbuild", re.I)],
           [_model, _vendor_is("Amazon"), SMARTTV]),
    _entry([compile_pattern(r"\((ip[honed|\s\w*]+);.+(apple)", re.I)],
           [_model, _vendor, MOBILE]),
    _entry([compile_pattern(r"\((ip[honed|\s\w*]+);", re.I)],
           [_model, _vendor_is("Apple"), MOBILE]),
    _entry([
        compile_pattern(r"(blackberry)[\s-]?(\w+)", re.I),
        compile_pattern(
            r"(blackberry|benq|palm(?=\-)|sonyericsson|acer|asus|dell|meizu|motorola|polytron)"
            r"[\s_-]?([\w-]*)",
            re.I,
        ),
        compile_pattern(r"(hp)\s([\w\s]+\w)", re.I),
        compile_pattern(r"(asus)-?(\w+)", re.I),
    ], [_vendor, _model, MOBILE]),
    _entry([compile_pattern(r"\(bb10;\s(\w+)", re.I)],
           [_model, _vendor_is("BlackBerry"), MOBILE]),
    _entry([compile_pattern(
        r"android.+(transfo[prime\s]{4,10}\s\w+|eeepc|slider\s\w+|nexus 7|padfone|p00c)", re.I)],
           [_model, _vendor_is("Asus"), TABLET]),
    _entry([
        compile_pattern(r"(sony)\s(tablet\s[ps])\sbuild\/", re.I),
        compile_pattern(r"(sony)?(?:sgp.+)\sbuild\/", re.I),
    ], [_vendor_is("Sony"), ConstantField(MODEL, "Xperia"), TABLET]),
    _entry([compile_pattern(
        r"android.+\s([c-g]\d{4}|so[-l]\w+)(?=\sbuild\/|\).+chrome\/(?![1-6]{0,1}\d\.))", re.I)],
           [_model, _vendor_is("Sony"), MOBILE]),
    _entry([compile_pattern(r"(nintendo)\s([wids3u]+)", re.I)],
           [_vendor, _model, CONSOLE]),
    _entry([compile_pattern(r"(playstation\s[34portablevi]+)", re.I)],
           [_model, _vendor_is("Sony"), CONSOLE]),
    _entry([
        compile_pattern(r"(htc)[;_\s-]+([\w\s]+(?=\)|\sbuild)|\w+)", re.I),
        compile_pattern(r"(zte)-(\w*)", re.I),
        compile_pattern(r"(alcatel|geeksphone|nexian|panasonic|(?=;\s)sony)[_\s-]?([\w-]*)", re.I),
    ], [_vendor, _model_spaced, MOBILE]),
    _entry([compile_pattern(r"(nexus\s9)", re.I)],
           [_model, _vendor_is("HTC"), TABLET]),
    _entry([
        compile_pattern(r"d\/huawei([\w\s-]+)[;\)]", re.I),
        compile_pattern(r"(nexus\s6p)", re.I),
    ], [_model, _vendor_is("Huawei"), MOBILE]),
    _entry([compile_pattern(r"(microsoft);\s(lumia[\s\w]+)", re.I)],
           [_vendor, _model, MOBILE]),
    _entry([compile_pattern(r"[\s\(;](xbox(?:\sone)?)[\s\);]", re.I)],
           [_model, _vendor_is("Microsoft"), CONSOLE]),
    _entry([compile_pattern(r"(kin\.[onetw]{3})", re.I)],
           [TransformField(MODEL, _DOTS, " "), _vendor_is("Microsoft"), MOBILE]),
    _entry([
        compile_pattern(r"\s(milestone|droid(?:[2-4x]|\s(?:bionic|x2|pro|razr))?:?(\s4g)?)[\w\s]+build\/", re.I),
        compile_pattern(r"mot[\s-]?(\w*)", re.I),
        compile_pattern(r"(XT\d{3,4}) build\/", re.I),
        compile_pattern(r"(nexus\s6)", re.I),
    ], [_model, _vendor_is("Motorola"), MOBILE]),
    _entry([compile_pattern(r"android.+\s(mz60\d|xoom[\s2]{0,2})\sbuild\/", re.I)],
           [_model, _vendor_is("Motorola"), TABLET]),
    _entry([
        compile_pattern(r"android.+((sch-i[89]0\d|shw-m380s|gt-p\d{4}|gt-n\d+|sgh-t8[56]9|nexus 10))", re.I),
        compile_pattern(r"((SM-T\w+))", re.I),
    ], [_vendor_is("Samsung"), _model, TABLET]),
    _entry([compile_pattern(r"smart-tv.+(samsung)", re.I)],
           [_vendor, SMARTTV, _model]),
    _entry([
        compile_pattern(r"((s[cgp]h-\w+|gt-\w+|galaxy\snexus|sm-\w[\w\d]+))", re.I),
        compile_pattern(r"(sam[sung]*)[\s-]*(\w+-?[\w-]*)", re.I),
        compile_pattern(r"sec-((sgh\w+))", re.I),
    ], [_vendor_is("Samsung"), _model, MOBILE]),
    _entry([
        compile_pattern(r"(maemo|nokia).*(n900|lumia\s\d+)", re.I),
        compile_pattern(r"(nokia)[\s_-]?([\w-]*)", re.I),
    ], [_vendor_is("Nokia"), _model, MOBILE]),
    _entry([compile_pattern(r"android.+([vl]k\-?\d{3})\s+build", re.I)],
           [_model, _vendor_is("LG"), TABLET]),
    _entry([compile_pattern(r"android\s3\.[\s\w;-]{10}(lg?)-([06cv9]{3,4})", re.I)],
           [_vendor_is("LG"), _model, TABLET]),
    _entry([compile_pattern(r"(lg) netcast\.tv", re.I)],
           [_vendor, _model, SMARTTV]),
    _entry([
        compile_pattern(r"(nexus\s[45])", re.I),
        compile_pattern(r"lg[e;\s\/-]+(\w*)", re.I),
        compile_pattern(r"android.+lg(\-?[\d\w]+)\s+build", re.I),
    ], [_model, _vendor_is("LG"), MOBILE]),
    _entry([compile_pattern(r"(lenovo)\s?(s(?:5000|6000)(?:[\w-]+)|tab(?:[\s\w]+))", re.I)],
           [_vendor, _model, TABLET]),
    _entry([compile_pattern(r"android.+(ideatab[a-z0-9\-\s]+)", re.I)],
           [_model, _vendor_is("Lenovo"), TABLET]),
    _entry([compile_pattern(r"(lenovo)[_\s-]?([\w-]+)", re.I)],
           [_vendor, _model, MOBILE]),
    _entry([compile_pattern(r"android.+;\s(oppo)\s?([\w\s]+)\sbuild", re.I)],
           [_vendor, _model, MOBILE]),
    _entry([compile_pattern(r"crkey", re.I)],
           [ConstantField(MODEL, "Chromecast"), _vendor_is("Google")]),
    _entry([compile_pattern(r"android.+;\s(pixel c)[\s)]", re.I)],
           [_model, _vendor_is("Google"), TABLET]),
    _entry([compile_pattern(r"android.+;\s(pixel( [23])?( xl)?)[\s)]", re.I)],
           [_model, _vendor_is("Google"), MOBILE]),
    _entry([
        compile_pattern(r"android.+;\s(\w+)\s+build\/hm\1", re.I),
        compile_pattern(r"android.+(hm[\s\-_]*note?[\s_]*(?:\d\w)?)\s+build", re.I),
        compile_pattern(
            r"android.+(mi[\s\-_]*(?:a\d|one|one[\s_]plus|note lte)?[\s_]*(?:\d?\w?)[\s_]*(?:plus)?)\s+build",
            re.I,
        ),
        compile_pattern(r"android.+(redmi[\s\-_]*(?:note)?(?:[\s_]*[\w\s]+))\s+build", re.I),
    ], [_model_spaced, _vendor_is("Xiaomi"), MOBILE]),
    _entry([compile_pattern(r"android.+(mi[\s\-_]*(?:pad)(?:[\s_]*[\w\s]+))\s+build", re.I)],
           [_model_spaced, _vendor_is("Xiaomi"), TABLET]),
    _entry([compile_pattern(r"android.+;\s(m[1-5]\snote)\sbuild", re.I)],
           [_model, _vendor_is("Meizu"), MOBILE]),
    _entry([compile_pattern(r"(mz)-([\w-]{2,})", re.I)],
           [_vendor_is("Meizu"), _model, MOBILE]),
    _entry([compile_pattern(r"android.+;\s(k88)\sbuild", re.I)],
           [_model, _vendor_is("ZTE"), TABLET]),
    _entry([compile_pattern(r"android.+(KS(.+))\s+build", re.I)],
           [_model, _vendor_is("Amazon"), TABLET]),
    _entry([
        compile_pattern(r"\s(tablet|tab)[;\/]", re.I),
        compile_pattern(r"\s(mobile)(?:[;\/]|\ssafari)", re.I),
    ], [ConstantField(TYPE, lowerize), _vendor, _model]),
    _entry([compile_pattern(r"[\s\/\(](smart-?tv)[;\)]", re.I)],
           [SMARTTV]),
    _entry([compile_pattern(r"(android[\w\.\s\-]{0,9});.+build", re.I)],
           [_model, _vendor_is("Generic")]),
)


OS_PATTERNS: tuple[PatternEntry, ...] = (
    _entry([compile_pattern(r"microsoft\s(windows)\s(vista|xp)", re.I)],
           [_name, _version]),
    _entry([
        compile_pattern(r"(windows)\snt\s6\.2;\s(arm)", re.I),
        compile_pattern(r"(windows\sphone(?:\sos)*)[\s\/]?([\d\.\s\w]*)", re.I),
        compile_pattern(r"(windows\smobile|windows)[\s\/]?([ntce\d\.\s]+\w)", re.I),
    ], [_name, _windows_version]),
    _entry([compile_pattern(r"(win(?=3|9|n)|win\s9x\s)([nt\d\.]+)", re.I)],
           [_name_is("Windows"), _windows_version]),
    _entry([compile_pattern(r"\((bb)(10);", re.I)],
           [_name_is("BlackBerry"), _version]),
    _entry([
        compile_pattern(r"(blackberry)\w*\/?([\w\.]*)", re.I),
        compile_pattern(r"(tizen)[\/\s]([\w\.]+)", re.I),
        compile_pattern(r"(android|webos|bada)[\/\s-]?([\w\.]*)", re.I),
    ], [_name, _version]),
    _entry([compile_pattern(r"(symbian\s?os|symbos|s60(?=;))[\/\s-]?([\w\.]*)", re.I)],
           [_name_is("Symbian"), _version]),
    _entry([compile_pattern(r"mozilla.+\(mobile;.+gecko.+firefox", re.I)],
           [_name_is("Firefox OS"), _version]),
    _entry([
        compile_pattern(r"(nintendo|playstation)\s([wids34portablevu]+)", re.I),
        compile_pattern(
            r"([kxln]?ubuntu|debian|suse|opensuse|(?=\s)arch|fedora|centos|redhat|zenwalk)"
            r"[\/\s-]?(?!chrom)([\w\.-]*)",
            re.I,
        ),
        compile_pattern(r"(linux)\s?([\w\.]*)", re.I),
        compile_pattern(r"(gnu)\s?([\w\.]*)", re.I),
    ], [_name, _version]),
    _entry([compile_pattern(r"(cros)\s[\w]+\s([\w\.]+\w)", re.I)],
           [_name_is("Chromium OS"), _version]),
    _entry([compile_pattern(r"(sunos)\s?([\w\.\d]*)", re.I)],
           [_name_is("Solaris"), _version]),
    _entry([
        compile_pattern(r"\s([frentopc-]{0,4}bsd|dragonfly)\s?([\w\.]*)", re.I),
        compile_pattern(r"(haiku)\s(\w+)", re.I),
    ], [_name, _version]),
    _entry([
        compile_pattern(r"cfnetwork\/.+darwin", re.I),
        compile_pattern(r"ip[honead]{2,4}(?:.*os\s([\w]+)\slike\smac|;\sopera)", re.I),
    ], [_version_dotted, _name_is("iOS")]),
    _entry([
        compile_pattern(r"(mac\sos\sx)\s?([\w\s\.]*)", re.I),
        compile_pattern(r"(macintosh|mac(?=_powerpc)\s)", re.I),
    ], [_name_is("MaC OS"), _version_dotted]),
    _entry([
        compile_pattern(r"((?:open)?solaris)[\/\s-]?([\w\.]*)", re.I),
        compile_pattern(r"(plan\s9|minix|beos|os\/2|amigaos|morphos|risc\sos|openvms|fuchsia)", re.I),
        compile_pattern(r"(unix)\s?([\w\.]*)", re.I),
    ], [_name, _version]),
)


BROWSER_PATTERNS: tuple[PatternEntry, ...] = (
    _entry([
        compile_pattern(r"(opera\smini)\/([\w\.-]+)", re.I),
        compile_pattern(r"(opera\s[mobiletab]+).+version\/([\w\.-]+)", re.I),
        compile_pattern(r"(opera).+version\/([\w\.]+)", re.I),
        compile_pattern(r"(opera)[\/\s]+([\w\.]+)", re.I),
    ], [_name, _version]),
    _entry([compile_pattern(r"(opios)[\/\s]+([\w\.]+)", re.I)],
           [_name_is("Opera Mini"), _version]),
    _entry([compile_pattern(r"\s(opr)\/([\w\.]+)", re.I)],
           [_name_is("Opera"), _version]),
    _entry([
        compile_pattern(r"(kindle)\/([\w\.]+)", re.I),
        compile_pattern(r"(iemobile|baidu)(?:browser)?[\/\s]?([\w\.]*)", re.I),
        compile_pattern(r"(?:ms|\()(ie)\s([\w\.]+)", re.I),
        compile_pattern(r"(chromium|silk|phantomjs)\/([\w\.-]+)", re.I),
    ], [_name, _version]),
    _entry([compile_pattern(r"(trident).+rv[:\s]([\w\.]+).+like\sgecko", re.I)],
           [_name_is("IE"), _version]),
    _entry([compile_pattern(r"(edge|edgios|edga|edg)\/((\d+)?[\w\.]+)", re.I)],
           [_name_is("Edge"), _version]),
    _entry([compile_pattern(r"(yabrowser)\/([\w\.]+)", re.I)],
           [_name_is("Yandex"), _version]),
    _entry([compile_pattern(r"(puffin)\/([\w\.]+)", re.I)],
           [_name_is("Puffin"), _version]),
    _entry([compile_pattern(r"(focus)\/([\w\.]+)", re.I)],
           [_name_is("Firefox Focus"), _version]),
    _entry([compile_pattern(r"(opt)\/([\w\.]+)", re.I)],
           [_name_is("Opera Touch"), _version]),
    _entry([compile_pattern(r"((?:[\s\/])uc?\s?browser|(?:juc.+)ucweb)[\/\s]?([\w\.]+)", re.I)],
           [_name_is("UCBrowser"), _version]),
    _entry([
        compile_pattern(r"(windowswechat qbcore)\/([\w\.]+)", re.I),
        compile_pattern(r"(micromessenger)\/([\w\.]+)", re.I),
    ], [_name_is("WeChat"), _version]),
    _entry([
        compile_pattern(r"(qqbrowserlite)\/([\w\.]+)", re.I),
        compile_pattern(r"(QQ)\/([\d\.]+)", re.I),
        compile_pattern(r"m?(qqbrowser)[\/\s]?([\w\.]+)", re.I),
        compile_pattern(r"(BIDUBrowser)[\/\s]?([\w\.]+)", re.I),
    ], [_name, _version]),
    _entry([
        compile_pattern(r"(MetaSr)[\/\s]?([\w\.]+)", re.I),
        compile_pattern(r"(LBBROWSER)", re.I),
    ], [_name]),
    _entry([compile_pattern(r"xiaomi\/miuibrowser\/([\w\.]+)", re.I)],
           [_version, _name_is("MIUI Browser")]),
    _entry([compile_pattern(r";fbav\/([\w\.]+);", re.I)],
           [_version, _name_is("Facebook")]),
    _entry([
        compile_pattern(r"safari\s(line)\/([\w\.]+)", re.I),
        compile_pattern(r"android.+(line)\/([\w\.]+)\/iab", re.I),
    ], [_name, _version]),
    _entry([compile_pattern(r"headlesschrome(?:\/([\w\.]+)|\s)", re.I)],
           [_version, _name_is("Chrome Headless")]),
    _entry([compile_pattern(r"\swv\).+(chrome)\/([\w\.]+)", re.I)],
           [TransformField(NAME, compile_pattern(r"(.+)"), r"\1 WebView", count=1), _version]),
    _entry([compile_pattern(r"((?:oculus|samsung)browser)\/([\w\.]+)", re.I)],
           [TransformField(NAME, compile_pattern(r"(.+(?:g|us))(.+)"), r"\1 \2", count=1), _version]),
    _entry([compile_pattern(r"android.+version\/([\w\.]+)\s+(?:mobile\s?safari|safari)*", re.I)],
           [_version, _name_is("Android Browser")]),
    _entry([compile_pattern(r"(whale|chrome|[tizenoka]{5}\s?browser)\/v?([\w\.]+)", re.I)],
           [_name, _version]),
    _entry([compile_pattern(r"(dolfin)\/([\w\.]+)", re.I)],
           [_name_is("Dolphin"), _version]),
    _entry([compile_pattern(r"((?:android.+)crmo|crios)\/([\w\.]+)", re.I)],
           [_name_is("Chrome"), _version]),
    _entry([compile_pattern(r"(coast)\/([\w\.]+)", re.I)],
           [_name_is("Opera Coast"), _version]),
    _entry([compile_pattern(r"fxios\/([\w\.-]+)", re.I)],
           [_version, _name_is("Firefox")]),
    _entry([compile_pattern(r"version\/([\w\.]+).+?mobile\/\w+\s(safari)", re.I)],
           [_version, _name_is("Mobile Safari")]),
    _entry([compile_pattern(r"version\/([\w\.]+).+?(mobile\s?safari|safari)", re.I)],
           [_version, _name]),
    _entry([compile_pattern(r"webkit.+?(gsa)\/([\w\.]+).+?(mobile\s?safari|safari)(\/[\w\.]+)", re.I)],
           [_name_is("GSA"), _version]),
    _entry([compile_pattern(r"(webkit|khtml)\/([\w\.]+)", re.I)],
           [_name, _version]),
    _entry([
        compile_pattern(r"(firefox)\/([\w\.-]+)\Z", re.I),
        compile_pattern(r"(mozilla)\/([\w\.]+).+rv\:.+gecko\/\d+", re.I),
    ], [_name, _version]),
)


@dataclass(frozen=True)
class UserAgentPatterns:
    """Pattern tables for the three user agent facets."""

    device: tuple[PatternEntry, ...]
    os: tuple[PatternEntry, ...]
    browser: tuple[PatternEntry, ...]


DEFAULT_PATTERNS = UserAgentPatterns(
    device=DEVICE_PATTERNS,
    os=OS_PATTERNS,
    browser=BROWSER_PATTERNS,
)
