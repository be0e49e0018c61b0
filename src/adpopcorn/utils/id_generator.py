"""
ID generation utilities for the adpopcorn adapter.

Provides unique element identifiers for generated creative markup.
"""

import secrets
import string

# Character set for alphanumeric IDs (letters and numbers)
ALPHANUMERIC_CHARS = string.ascii_lowercase + string.digits


def generate_alphanumeric_id(length: int = 16) -> str:
    """
    Generate a random alphanumeric ID without prefix.

    Args:
        length: Length of the ID (default 16)

    Returns:
        A random alphanumeric string
    """
    return "".join(secrets.choice(ALPHANUMERIC_CHARS) for _ in range(length))


def generate_element_id(length: int = 12, prefix: str = "ap_") -> str:
    """
    Generate a unique HTML element ID.

    Args:
        length: Length of the random portion (default 12)
        prefix: Prefix for the ID (default "ap_")

    Returns:
        An element ID in format: {prefix}{random_alphanumeric}
        Example: "ap_a7b3x9k2m4n1"
    """
    return f"{prefix}{generate_alphanumeric_id(length)}"
