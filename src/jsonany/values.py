"""
Typed value model for decoded JSON documents.

Defines AnyValue, the capability set shared by every node of a decoded tree, the
eight concrete variants (Object, Array, NumberInt, NumberUint, NumberFloat,
String, Bool, Null) and safe downcast helpers. This module is zero-IO.

Responsibilities
- Carry one immutable Tag per node.
- Re-encode any subtree to canonical JSON bytes (sorted object keys, compact
  separators, UTF-8 without ASCII escaping).
- Render nodes for humans: "" for null, raw text for strings, JSON otherwise.
- Offer `xxx_ok` downcasts that return (value, matched) instead of raising.

Notes:
    - Trees are built by jsonany.decode; after decode the only mutation is
      Array.append.
    - Object keys()/iteration follow source insertion order; to_json() sorts keys.
    - Floats encode with Python's shortest round-tripping repr, so 1.0 stays
      "1.0" and re-decodes as NumberFloat.

Examples:
    >>> from jsonany import decode
    >>> from jsonany.values import object_ok, number_float_ok
    >>> root = decode(b'{"lat": 37.7668, "tags": ["a", "b"]}')
    >>> obj, ok = object_ok(root)
    >>> ok, len(obj)
    (True, 2)
    >>> lat, _ = obj.value("lat")
    >>> number_float_ok(lat)[0].float64()
    37.7668
    >>> obj.render()
    '{"lat":37.7668,"tags":["a","b"]}'

Tags
----
value model, variants, downcast, encoding
"""

from __future__ import annotations

import json
import math
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from functools import partial
from typing import Any, ClassVar, TypeVar

from .constants import CANONICAL_SEPARATORS, INT64_MAX, INT64_MIN, UINT64_MAX
from .errors import EncodeError
from .tags import Tag

__all__ = [
    "AnyValue",
    "Number",
    "Object",
    "Array",
    "NumberInt",
    "NumberUint",
    "NumberFloat",
    "String",
    "Bool",
    "Null",
    "downcast",
    "object_ok",
    "array_ok",
    "number_ok",
    "number_int_ok",
    "number_uint_ok",
    "number_float_ok",
    "string_ok",
    "bool_ok",
    "null_ok",
]

_ITEM_SEP = CANONICAL_SEPARATORS[0].encode("ascii")
_KEY_SEP = CANONICAL_SEPARATORS[1].encode("ascii")


def _encode_str(s: str) -> bytes:
    try:
        return json.dumps(s, ensure_ascii=False).encode("utf-8")
    except UnicodeEncodeError as exc:
        raise EncodeError(f"string is not encodable as UTF-8: {s!r}") from exc


class AnyValue(ABC):
    """
    Abstract node of a decoded JSON tree.

    Subclasses fix TAG at class level; tag() never changes for an instance.
    """

    __slots__ = ()

    TAG: ClassVar[Tag]

    def tag(self) -> Tag:
        return self.TAG

    @abstractmethod
    def to_json(self) -> bytes:
        """
        Encode this node and its subtree as canonical JSON bytes.

        Raises:
            EncodeError: If this node or any descendant cannot be encoded.
        """

    @abstractmethod
    def to_python(self) -> Any:
        """Convert to plain Python objects (dict, list, int, float, str, bool, None)."""

    def render(self) -> str:
        """
        Human-readable form: JSON text for most variants.

        Returns an empty string when the subtree cannot be encoded.
        """
        try:
            return self.to_json().decode("utf-8")
        except EncodeError:
            return ""

    def __str__(self) -> str:
        return self.render()


class Number(AnyValue):
    """Common base of NumberInt, NumberUint and NumberFloat."""

    __slots__ = ()


@dataclass(slots=True, frozen=True)
class Object(AnyValue):
    """
    JSON object: string keys mapped to child nodes.

    Attributes:
        members (dict[str, AnyValue]): Child nodes keyed by member name. Owned
            exclusively by this node.
    """

    TAG: ClassVar[Tag] = Tag.OBJECT

    members: dict[str, AnyValue] = field(default_factory=dict)

    # dict payload; compare trees with == or jsonany.hashing.hash_value
    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[str]:
        return iter(self.members)

    def __contains__(self, key: object) -> bool:
        return key in self.members

    def __getitem__(self, key: str) -> AnyValue:
        return self.members[key]

    def keys(self) -> list[str]:
        return list(self.members)

    def value(self, key: str) -> tuple[AnyValue | None, bool]:
        """Look up a member, returning (value, found)."""
        if key in self.members:
            return self.members[key], True
        return None, False

    def to_json(self) -> bytes:
        return _encode_tree(self)

    def to_python(self) -> dict[str, Any]:
        return _to_python_tree(self)


@dataclass(slots=True)
class Array(AnyValue):
    """
    JSON array: ordered child nodes.

    Attributes:
        elements (list[AnyValue]): Children in source order, or canonical order
            when decoded with canonicalization.

    Notes:
        append() exists for tree construction; index() rejects negative and
        out-of-range positions with IndexError.
    """

    TAG: ClassVar[Tag] = Tag.ARRAY

    elements: list[AnyValue] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[AnyValue]:
        return iter(self.elements)

    def __getitem__(self, i: int) -> AnyValue:
        return self.index(i)

    def index(self, i: int) -> AnyValue:
        if not 0 <= i < len(self.elements):
            raise IndexError(f"Array index {i} out of range for length {len(self.elements)}")
        return self.elements[i]

    def append(self, v: AnyValue) -> None:
        if not isinstance(v, AnyValue):
            raise TypeError(f"Array elements must be AnyValue, got {type(v).__name__}")
        self.elements.append(v)

    def to_json(self) -> bytes:
        return _encode_tree(self)

    def to_python(self) -> list[Any]:
        return _to_python_tree(self)


# Container walks use explicit stacks so depth is bounded only by memory.


def _encode_tree(root: AnyValue) -> bytes:
    out: list[bytes] = []
    stack: list[AnyValue | bytes] = [root]
    while stack:
        item = stack.pop()
        if isinstance(item, bytes):
            out.append(item)
        elif isinstance(item, Object):
            pending: list[AnyValue | bytes] = [b"{"]
            for i, key in enumerate(sorted(item.members)):
                if i:
                    pending.append(_ITEM_SEP)
                pending.append(_encode_str(key) + _KEY_SEP)
                pending.append(item.members[key])
            pending.append(b"}")
            stack.extend(reversed(pending))
        elif isinstance(item, Array):
            pending = [b"["]
            for i, child in enumerate(item.elements):
                if i:
                    pending.append(_ITEM_SEP)
                pending.append(child)
            pending.append(b"]")
            stack.extend(reversed(pending))
        else:
            out.append(item.to_json())
    return b"".join(out)


def _to_python_tree(root: AnyValue) -> Any:
    holder: list[Any] = [None]
    stack: list[tuple[AnyValue, Callable[[Any], None]]] = [
        (root, partial(holder.__setitem__, 0))
    ]
    while stack:
        node, put = stack.pop()
        if isinstance(node, Object):
            # fromkeys fixes insertion order before children are filled in
            d: dict[str, Any] = dict.fromkeys(node.members)
            put(d)
            stack.extend(
                (child, partial(d.__setitem__, key)) for key, child in node.members.items()
            )
        elif isinstance(node, Array):
            lst: list[Any] = [None] * len(node.elements)
            put(lst)
            stack.extend(
                (child, partial(lst.__setitem__, i)) for i, child in enumerate(node.elements)
            )
        else:
            put(node.to_python())
    return holder[0]


def _check_int(value: object, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} requires an int, got {type(value).__name__}")
    return value


@dataclass(slots=True, frozen=True)
class NumberInt(Number):
    """Signed 64-bit integer."""

    TAG: ClassVar[Tag] = Tag.NUMBER_INT

    value: int

    def __post_init__(self) -> None:
        _check_int(self.value, "NumberInt")
        if not INT64_MIN <= self.value <= INT64_MAX:
            raise ValueError(f"NumberInt out of int64 range: {self.value}")

    def int64(self) -> int:
        return self.value

    def to_json(self) -> bytes:
        return str(self.value).encode("ascii")

    def to_python(self) -> int:
        return self.value


@dataclass(slots=True, frozen=True)
class NumberUint(Number):
    """Unsigned 64-bit integer."""

    TAG: ClassVar[Tag] = Tag.NUMBER_UINT

    value: int

    def __post_init__(self) -> None:
        _check_int(self.value, "NumberUint")
        if not 0 <= self.value <= UINT64_MAX:
            raise ValueError(f"NumberUint out of uint64 range: {self.value}")

    def uint64(self) -> int:
        return self.value

    def to_json(self) -> bytes:
        return str(self.value).encode("ascii")

    def to_python(self) -> int:
        return self.value


@dataclass(slots=True, frozen=True)
class NumberFloat(Number):
    """64-bit floating point number."""

    TAG: ClassVar[Tag] = Tag.NUMBER_FLOAT

    value: float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise TypeError(f"NumberFloat requires a float, got {type(self.value).__name__}")
        object.__setattr__(self, "value", float(self.value))

    def float64(self) -> float:
        return self.value

    def to_json(self) -> bytes:
        if not math.isfinite(self.value):
            raise EncodeError(f"non-finite float has no JSON encoding: {self.value!r}")
        return repr(self.value).encode("ascii")

    def to_python(self) -> float:
        return self.value


@dataclass(slots=True, frozen=True)
class String(AnyValue):
    """UTF-8 text. render() returns the raw contents, unescaped."""

    TAG: ClassVar[Tag] = Tag.STRING

    value: str

    def render(self) -> str:
        return self.value

    def to_json(self) -> bytes:
        return _encode_str(self.value)

    def to_python(self) -> str:
        return self.value


@dataclass(slots=True, frozen=True)
class Bool(AnyValue):
    TAG: ClassVar[Tag] = Tag.BOOL

    value: bool

    def as_bool(self) -> bool:
        return self.value

    def to_json(self) -> bytes:
        return b"true" if self.value else b"false"

    def to_python(self) -> bool:
        return self.value


@dataclass(slots=True, frozen=True)
class Null(AnyValue):
    """JSON null, also produced for values of unrecognized shape."""

    TAG: ClassVar[Tag] = Tag.NULL

    def render(self) -> str:
        return ""

    def to_json(self) -> bytes:
        return b"null"

    def to_python(self) -> None:
        return None


V = TypeVar("V", bound=AnyValue)


def downcast(value: AnyValue, cls: type[V]) -> tuple[V | None, bool]:
    """
    View a generic node as a specific variant without raising.

    Args:
        value (AnyValue): Node to inspect.
        cls (type[V]): Variant class (or Number) to match.

    Returns:
        tuple[V | None, bool]: (value, True) when value is a cls, else (None, False).
    """
    if isinstance(value, cls):
        return value, True
    return None, False


def object_ok(value: AnyValue) -> tuple[Object | None, bool]:
    return downcast(value, Object)


def array_ok(value: AnyValue) -> tuple[Array | None, bool]:
    return downcast(value, Array)


def number_ok(value: AnyValue) -> tuple[Number | None, bool]:
    return downcast(value, Number)


def number_int_ok(value: AnyValue) -> tuple[NumberInt | None, bool]:
    return downcast(value, NumberInt)


def number_uint_ok(value: AnyValue) -> tuple[NumberUint | None, bool]:
    return downcast(value, NumberUint)


def number_float_ok(value: AnyValue) -> tuple[NumberFloat | None, bool]:
    return downcast(value, NumberFloat)


def string_ok(value: AnyValue) -> tuple[String | None, bool]:
    return downcast(value, String)


def bool_ok(value: AnyValue) -> tuple[Bool | None, bool]:
    return downcast(value, Bool)


def null_ok(value: AnyValue) -> tuple[Null | None, bool]:
    return downcast(value, Null)
