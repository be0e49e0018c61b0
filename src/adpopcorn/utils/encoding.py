"""
Base64 decoding for identifier cookies.

Decoding follows browser ``atob`` rules: ASCII whitespace is ignored, trailing
padding is optional, and the result is a binary string (one character per
decoded byte). When the native decoder is unavailable, a table-driven decoder
is used instead.
"""

import binascii
import re

from ..errors import InvalidCharacterError

B64_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/="

_WHITESPACE = re.compile(r"[\t\n\f\r ]")
_B64_BODY = re.compile(r"[A-Za-z0-9+/]*")
_TRAILING_PADDING = re.compile(r"=+\Z")

_INVALID_MESSAGE = "'atob' failed: The string to be decoded is not correctly encoded."

_native_decode = getattr(binascii, "a2b_base64", None)


def b64decode(value: str) -> str:
    """
    Decode a base64 string into a binary string.

    Args:
        value: Base64 text, padded or unpadded

    Returns:
        Decoded text, one character per byte

    Raises:
        InvalidCharacterError: If the input is not valid base64
    """
    if _native_decode is None:
        return legacy_b64decode(value)

    text = _WHITESPACE.sub("", str(value))
    if len(text) % 4 == 0:
        if text.endswith("=="):
            text = text[:-2]
        elif text.endswith("="):
            text = text[:-1]

    if len(text) % 4 == 1 or not _B64_BODY.fullmatch(text):
        raise InvalidCharacterError(_INVALID_MESSAGE)

    padded = text + "=" * (-len(text) % 4)
    try:
        return _native_decode(padded).decode("latin-1")
    except binascii.Error as e:
        raise InvalidCharacterError(_INVALID_MESSAGE) from e


def legacy_b64decode(value: str) -> str:
    """
    Decode base64 without the native decoder.

    Characters outside the base64 alphabet are skipped rather than rejected;
    only an impossible length raises.

    Raises:
        InvalidCharacterError: If the unpadded length is 1 modulo 4
    """
    text = _TRAILING_PADDING.sub("", str(value))
    if len(text) % 4 == 1:
        raise InvalidCharacterError(_INVALID_MESSAGE)

    output = []
    bits = 0
    count = 0
    for char in text:
        index = B64_CHARS.find(char)
        if index < 0:
            continue
        bits = bits * 64 + index if count % 4 else index
        count += 1
        # Every character after the first of a quartet completes one byte
        if (count - 1) % 4:
            output.append(chr(255 & (bits >> (-2 * count & 6))))

    return "".join(output)
