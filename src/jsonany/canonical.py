"""
Canonical ordering of decoded arrays.

Provides the sort key used to canonicalize arrays (the element's canonical JSON
bytes from AnyValue.to_json()) and the stable sort built on it. This module is
zero-IO.

Notes:
    - Ordering is byte-wise lexicographic over each element's to_json() output.
    - The sort is stable: elements with byte-identical encodings keep their
      relative order (first seen wins).
    - An element whose to_json() raises EncodeError gets the key b"" and sorts
      lowest; canonicalization never aborts because of it.

Examples:
    >>> from jsonany.values import NumberInt, String
    >>> [v.render() for v in canonicalize([NumberInt(3), String("a"), NumberInt(12)])]
    ['"a"', '12', '3']
"""

from __future__ import annotations

from collections.abc import Iterable

from .errors import EncodeError
from .values import AnyValue

__all__ = [
    "canonical_key",
    "canonicalize",
]


def canonical_key(value: AnyValue) -> bytes:
    """
    Sort key for canonical array ordering.

    Args:
        value (AnyValue): Element to key.

    Returns:
        bytes: value.to_json(), or b"" when the element cannot be encoded.
    """
    try:
        return value.to_json()
    except EncodeError:
        return b""


def canonicalize(values: Iterable[AnyValue]) -> list[AnyValue]:
    """
    Return the elements in canonical order.

    Each key is computed once; the input is not modified.

    Args:
        values (Iterable[AnyValue]): Array elements in any order.

    Returns:
        list[AnyValue]: New list sorted by canonical_key with a stable sort.
            Applying canonicalize to its own output returns the same order.
    """
    return sorted(values, key=canonical_key)
