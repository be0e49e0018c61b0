"""User agent parsing."""

from .fields import (
    ConstantField,
    FieldSpec,
    FunctionField,
    PatternEntry,
    PlainField,
    TransformField,
)
from .matcher import compile_pattern, has, lowerize, match, resolve_by_string
from .parser import UserAgent, extract_facets
from .patterns import (
    BROWSER_PATTERNS,
    DEFAULT_PATTERNS,
    DEVICE_PATTERNS,
    OS_PATTERNS,
    WINDOWS_VERSIONS,
    UserAgentPatterns,
)

__all__ = [
    'ConstantField',
    'FieldSpec',
    'FunctionField',
    'PatternEntry',
    'PlainField',
    'TransformField',
    'compile_pattern',
    'has',
    'lowerize',
    'match',
    'resolve_by_string',
    'UserAgent',
    'extract_facets',
    'BROWSER_PATTERNS',
    'DEFAULT_PATTERNS',
    'DEVICE_PATTERNS',
    'OS_PATTERNS',
    'WINDOWS_VERSIONS',
    'UserAgentPatterns',
]
