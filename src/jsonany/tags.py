"""
Variant tags for decoded JSON values.

Defines the closed Tag enumeration carried by every node of a decoded tree and
the is_number predicate over it. Serialized tag values are lower_snake.

Examples:
    >>> from jsonany.tags import Tag, is_number, tag_from_value
    >>> is_number(Tag.NUMBER_UINT)
    True
    >>> tag_from_value("bool") is Tag.BOOL
    True
"""

from __future__ import annotations

from enum import Enum
from typing import Final

__all__ = [
    "Tag",
    "NUMBER_TAGS",
    "is_number",
    "tag_from_value",
]


class Tag(Enum):
    """
    Kind of a decoded JSON node.

    Notes:
      Each AnyValue subclass returns exactly one member from tag(); the mapping
      is fixed at class definition and never changes for a node.
    """

    OBJECT = "object"
    ARRAY = "array"
    NUMBER_INT = "number_int"
    NUMBER_UINT = "number_uint"
    NUMBER_FLOAT = "number_float"
    STRING = "string"
    BOOL = "bool"
    NULL = "null"

    @property
    def is_number(self) -> bool:
        return self in NUMBER_TAGS


NUMBER_TAGS: Final[frozenset[Tag]] = frozenset(
    {Tag.NUMBER_INT, Tag.NUMBER_UINT, Tag.NUMBER_FLOAT}
)


def is_number(tag: Tag) -> bool:
    """
    Report whether a tag denotes one of the three numeric variants.

    Args:
      tag (Tag): Tag to test.

    Returns:
      bool: True for NUMBER_INT, NUMBER_UINT and NUMBER_FLOAT.
    """
    return tag in NUMBER_TAGS


def tag_from_value(s: str) -> Tag:
    """
    Parse a serialized (lower_snake) tag name into a Tag.

    Raises:
      ValueError: If s is not a known tag value.
    """
    return Tag(s)
