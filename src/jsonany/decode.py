"""
Decode JSON text into a typed jsonany value tree.

Parses input with the stdlib json module and converts the resulting generic
Python objects into AnyValue nodes, keeping signed, unsigned and floating-point
numerals apart. With canonicalization on, every array (at every nesting level)
is reordered by jsonany.canonical once its children are decoded.

Numeral classification
----------------------
| Source literal                                   | Variant
|--------------------------------------------------|-------------
| integral, fits int64                             | NumberInt
| integral, non-negative, above int64, fits uint64 | NumberUint
| integral, outside both ranges                    | NumberFloat
| fraction or exponent present                     | NumberFloat

Notes:
    - NaN, Infinity and -Infinity are not JSON and are rejected.
    - Literals that overflow a double (e.g. 1e400, or integers of 309+ digits)
      raise ParseError.
    - Nesting depth is limited by the stdlib parser only; conversion and
      canonicalization walk the tree without recursion.
    - Duplicate object keys: the last value wins.
    - Decode is all-or-nothing: either a full tree or a ParseError.

Examples:
    >>> from jsonany.decode import decode, decode_canonical
    >>> decode(b"42").tag().value
    'number_int'
    >>> decode(b"18446744073709551615").tag().value
    'number_uint'
    >>> decode_canonical(b"[3,1,2]").render()
    '[1,2,3]'
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Callable, Mapping
from functools import partial
from typing import Any, NoReturn

from .canonical import canonicalize
from .config import DecodeSettings
from .constants import INT64_MAX, INT64_MIN, MAX_INT_LITERAL_LEN, UINT64_MAX
from .errors import InputTooLargeError, ParseError
from .values import (
    AnyValue,
    Array,
    Bool,
    Null,
    NumberFloat,
    NumberInt,
    NumberUint,
    Object,
    String,
)

__all__ = [
    "RawJson",
    "decode",
    "decode_canonical",
    "load",
    "from_python",
]

logger = logging.getLogger(__name__)

RawJson = bytes | bytearray | memoryview | str

# Stands in for children not yet converted.
_PLACEHOLDER = Null()


def _parse_int(literal: str) -> int | float:
    # 64-bit integers stay exact; wider literals become floats.
    if len(literal) <= MAX_INT_LITERAL_LEN:
        n = int(literal)
        if INT64_MIN <= n <= UINT64_MAX:
            return n
    return _parse_float(literal)


def _parse_float(literal: str) -> float:
    f = float(literal)
    if math.isinf(f):
        raise ParseError(f"number {literal[:32]} overflows float64")
    return f


def _reject_constant(name: str) -> NoReturn:
    raise ParseError(f"non-standard JSON constant: {name}")


def _parse(data: RawJson) -> Any:
    if isinstance(data, memoryview):
        data = data.tobytes()
    try:
        return json.loads(
            data,
            parse_int=_parse_int,
            parse_float=_parse_float,
            parse_constant=_reject_constant,
        )
    except json.JSONDecodeError as exc:
        logger.debug("JSON parse failed at char %d: %s", exc.pos, exc.msg)
        raise ParseError(exc.msg, exc.pos, exc.lineno, exc.colno) from exc
    except UnicodeDecodeError as exc:
        logger.debug("JSON input is not decodable text: %s", exc.reason)
        raise ParseError(f"input is not valid Unicode text: {exc.reason}", exc.start) from exc
    except RecursionError as exc:
        raise ParseError("document nests too deeply to parse") from exc


def _int_to_float(n: int) -> float:
    try:
        return float(n)
    except OverflowError:
        return math.inf if n > 0 else -math.inf


def _from_scalar(obj: Any) -> AnyValue:
    # bool before int: bool is an int subclass.
    if isinstance(obj, bool):
        return Bool(obj)
    if isinstance(obj, str):
        return String(obj)
    if isinstance(obj, int):
        if INT64_MIN <= obj <= INT64_MAX:
            return NumberInt(obj)
        if 0 < obj <= UINT64_MAX:
            return NumberUint(obj)
        return NumberFloat(_int_to_float(obj))
    if isinstance(obj, float):
        return NumberFloat(obj)
    return Null()


def _convert(obj: Any, canonical: bool) -> AnyValue:
    # Containers are created top-down from an explicit stack and filled in as
    # their children are converted; nesting depth costs no Python frames.
    holder: list[AnyValue] = [_PLACEHOLDER]
    arrays: list[Array] = []
    stack: list[tuple[Any, Callable[[AnyValue], None]]] = [
        (obj, partial(holder.__setitem__, 0))
    ]
    while stack:
        item, put = stack.pop()
        if isinstance(item, Mapping):
            members: dict[str, AnyValue] = {}
            for key in item:
                members[str(key)] = _PLACEHOLDER
            put(Object(members))
            stack.extend(
                (value, partial(members.__setitem__, str(key))) for key, value in item.items()
            )
        elif isinstance(item, (list, tuple)):
            arr = Array([_PLACEHOLDER] * len(item))
            put(arr)
            arrays.append(arr)
            stack.extend(
                (value, partial(arr.elements.__setitem__, i)) for i, value in enumerate(item)
            )
        else:
            put(_from_scalar(item))
    if canonical:
        # Pre-order reversed: every array is sorted after all arrays nested in it.
        for arr in reversed(arrays):
            arr.elements[:] = canonicalize(arr.elements)
    return holder[0]


def _decode(data: RawJson, canonical: bool) -> AnyValue:
    return _convert(_parse(data), canonical)


def decode(data: RawJson) -> AnyValue:
    """
    Decode JSON text into a value tree, keeping array order from the source.

    Args:
        data (RawJson): JSON text as bytes (UTF-8/16/32) or str.

    Returns:
        AnyValue: Root node of the decoded tree.

    Raises:
        ParseError: If data is not valid JSON.
    """
    return _decode(data, False)


def decode_canonical(data: RawJson) -> AnyValue:
    """
    Decode JSON text into a value tree with every array in canonical order.

    Arrays are sorted by the canonical JSON bytes of their elements, innermost
    arrays first, so permutations of the same elements decode to trees that
    encode identically.

    Raises:
        ParseError: If data is not valid JSON.
    """
    return _decode(data, True)


def load(data: RawJson, settings: DecodeSettings | None = None) -> AnyValue:
    """
    Decode JSON text according to DecodeSettings.

    Args:
        data (RawJson): JSON text.
        settings (DecodeSettings | None): Options; defaults to DecodeSettings().

    Returns:
        AnyValue: Root node of the decoded tree.

    Raises:
        InputTooLargeError: If data exceeds settings.max_input_bytes.
        ParseError: If data is not valid JSON.
    """
    s = settings or DecodeSettings()
    if s.max_input_bytes is not None:
        if isinstance(data, str):
            size = len(data.encode("utf-8", "surrogatepass"))
        else:
            size = memoryview(data).nbytes
        if size > s.max_input_bytes:
            raise InputTooLargeError(
                f"input of {size} bytes exceeds max_input_bytes={s.max_input_bytes}"
            )
    return _decode(data, s.canonicalize)


def from_python(obj: Any, canonical: bool = False) -> AnyValue:
    """
    Wrap already-parsed Python objects as a value tree.

    Applies the same conversion as decode(): mappings become Object (keys are
    converted with str()), lists and tuples become Array, and values of any
    other unrecognized type become Null.

    Args:
        obj (Any): Generic value such as the output of json.loads.
        canonical (bool): Canonicalize every array when True.
    """
    return _convert(obj, canonical)
