"""Adapter utilities."""

from .adids import get_adids, split_adids
from .encoding import b64decode, legacy_b64decode
from .id_generator import generate_alphanumeric_id, generate_element_id
from .urls import ParsedUrl, parse_url

__all__ = [
    'get_adids',
    'split_adids',
    'b64decode',
    'legacy_b64decode',
    'generate_alphanumeric_id',
    'generate_element_id',
    'ParsedUrl',
    'parse_url',
]
