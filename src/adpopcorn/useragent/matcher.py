"""
Regex table matcher.

Scans a pattern table in order and maps the capture groups of the first
matching regex onto output fields. Earlier entries always win over later
ones, so specific rules must be listed before generic catch-alls.
"""

import re
from collections.abc import Mapping, Sequence
from typing import Any

from .fields import PatternEntry

# ECMAScript WhiteSpace and LineTerminator code points
_JS_SPACE = (
    "\\t\\n\\v\\f\\r \\xa0\\u1680\\u2000-\\u200a"
    "\\u2028\\u2029\\u202f\\u205f\\u3000\\ufeff"
)
_JS_ANY = "[^\\n\\r\\u2028\\u2029]"


def compile_pattern(source: str, flags: int = 0) -> re.Pattern:
    """
    Compile a regex written for browser user agent tables.

    ``\\w``, ``\\d`` and case folding stay ASCII-only, ``\\s`` covers the
    ECMAScript whitespace set and ``.`` stops at any line terminator.

    Args:
        source: Regex source
        flags: Extra ``re`` flags, usually ``re.I``

    Returns:
        Compiled pattern
    """
    out = []
    in_class = False
    i = 0
    while i < len(source):
        char = source[i]
        if char == "\\" and i + 1 < len(source):
            escape = source[i:i + 2]
            if escape == "\\s":
                escape = _JS_SPACE if in_class else f"[{_JS_SPACE}]"
            out.append(escape)
            i += 2
            continue
        if char == "[" and not in_class:
            in_class = True
        elif char == "]" and in_class:
            in_class = False
        elif char == "." and not in_class:
            char = _JS_ANY
        out.append(char)
        i += 1

    return re.compile("".join(out), flags | re.ASCII)


def has(needle: Any, haystack: str) -> bool:
    """Check whether ``needle`` occurs in ``haystack``, ignoring case."""
    if not isinstance(needle, str):
        return False
    return needle.lower() in haystack.lower()


def lowerize(value: str) -> str:
    return value.lower()


def _group(match: re.Match, index: int) -> str | None:
    """Read a capture group, treating groups the regex lacks as unset."""
    if index > match.re.groups:
        return None
    return match.group(index)


def match(ua: str, table: Sequence[PatternEntry]) -> dict[str, Any]:
    """
    Classify a string against a pattern table.

    Args:
        ua: The string to classify
        table: Ordered pattern entries

    Returns:
        Field values of the first matching entry, or an empty dict
    """
    result: dict[str, Any] = {}

    for entry in table:
        for regex in entry.regexes:
            found = regex.search(ua)
            if found is None:
                continue
            for position, spec in enumerate(entry.fields):
                result[spec.name] = spec.resolve(_group(found, position + 1))
            return result

    return result


def resolve_by_string(value: str, mapping: Mapping[str, Any]) -> str | None:
    """
    Normalize a value through a string lookup map.

    Each key of ``mapping`` lists one or more candidates; the first key with
    a candidate contained in ``value`` wins. The key ``"?"`` maps to unknown.

    Returns:
        The matching key, None for the unknown key, or ``value`` unchanged
    """
    for key, candidates in mapping.items():
        if isinstance(candidates, Sequence) and not isinstance(candidates, str):
            matched = any(has(candidate, value) for candidate in candidates)
        else:
            matched = has(candidates, value)
        if matched:
            return None if key == "?" else key

    return value
