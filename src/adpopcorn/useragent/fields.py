"""
Pattern table entries and field specifications.

A PatternEntry pairs a list of regexes with a list of field specs. When one of
the regexes matches, the field spec at position ``p`` reads capture group
``p + 1`` and decides what ends up in the facet under its ``name``.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Union

# Output field names
MODEL = "model"
NAME = "name"
VENDOR = "vendor"
VERSION = "version"
TYPE = "type"


@dataclass(frozen=True)
class PlainField:
    """Assign the captured value as-is."""

    name: str

    def resolve(self, captured: str | None) -> str | None:
        return captured or None


@dataclass(frozen=True)
class ConstantField:
    """
    Assign a fixed value regardless of what was captured.

    A callable value is applied to the captured text instead.
    """

    name: str
    value: Any

    def resolve(self, captured: str | None) -> Any:
        if callable(self.value):
            return self.value(captured) if captured is not None else None
        return self.value


@dataclass(frozen=True)
class TransformField:
    """
    Rewrite the captured value.

    ``pattern`` is either a compiled regex, substituted with ``replacement``
    (``count=0`` replaces every occurrence), or a lookup function called as
    ``pattern(captured, replacement)``.
    """

    name: str
    pattern: Union[re.Pattern, Callable[[str, Any], Any]]
    replacement: Any
    count: int = 0

    def resolve(self, captured: str | None) -> Any:
        if not captured:
            return None
        if isinstance(self.pattern, re.Pattern):
            return self.pattern.sub(self.replacement, captured, count=self.count)
        return self.pattern(captured, self.replacement)


@dataclass(frozen=True)
class FunctionField:
    """Substitute within the captured value, then pass it through ``fn``."""

    name: str
    pattern: re.Pattern
    replacement: str
    fn: Callable[[str], Any]

    def resolve(self, captured: str | None) -> Any:
        if not captured:
            return None
        return self.fn(self.pattern.sub(self.replacement, captured))


FieldSpec = Union[PlainField, ConstantField, TransformField, FunctionField]


@dataclass(frozen=True)
class PatternEntry:
    """One detection rule: any of ``regexes`` feeds ``fields``."""

    regexes: tuple[re.Pattern, ...]
    fields: tuple[FieldSpec, ...]


# Device type constants
CONSOLE = ConstantField(TYPE, "console")
MOBILE = ConstantField(TYPE, "mobile")
TABLET = ConstantField(TYPE, "tablet")
SMARTTV = ConstantField(TYPE, "smarttv")
