"""
Stable digests and equality over canonical value encodings.

Hashing is performed over the bytes returned by AnyValue.to_json(), so two
trees hash alike exactly when they encode alike. Combine with
decode_canonical() to compare documents whose arrays are unordered sets.

Examples:
    >>> from jsonany.hashing import hash_document
    >>> hash_document(b'{"ids":[2,1]}') == hash_document(b'{"ids": [1, 2]}')
    True
"""

from __future__ import annotations

import hashlib

from .config import DecodeSettings, normalize_hash_algorithm
from .constants import DEFAULT_HASH_ALGORITHM
from .decode import RawJson, load
from .errors import EncodeError
from .values import AnyValue

__all__ = [
    "hash_value",
    "hash_document",
    "values_equal",
]


def hash_value(value: AnyValue, algorithm: str = DEFAULT_HASH_ALGORITHM) -> str:
    """
    Hex digest of a node's canonical JSON bytes.

    Args:
        value (AnyValue): Root of the subtree to hash.
        algorithm (str): hashlib algorithm name (see DecodeSettings.hash_algorithm).

    Returns:
        str: Hex digest.

    Raises:
        ValueError: If algorithm is unsupported (see normalize_hash_algorithm).
        EncodeError: If the subtree cannot be encoded.
    """
    h = hashlib.new(normalize_hash_algorithm(algorithm))
    h.update(value.to_json())
    return h.hexdigest()


def hash_document(data: RawJson, settings: DecodeSettings | None = None) -> str:
    """
    Decode canonically, then hash; documents differing only in array order agree.

    Args:
        data (RawJson): JSON text.
        settings (DecodeSettings | None): Supplies hash_algorithm and
            max_input_bytes; canonicalization is always on.

    Raises:
        ParseError: If data is not valid JSON or exceeds max_input_bytes.
        EncodeError: If the decoded tree cannot be encoded.
    """
    s = (settings or DecodeSettings()).model_copy(update={"canonicalize": True})
    return hash_value(load(data, s), s.hash_algorithm)


def values_equal(a: AnyValue, b: AnyValue) -> bool:
    """
    Compare two trees by canonical encoding.

    Trees that cannot be encoded compare unequal.
    """
    try:
        return a.to_json() == b.to_json()
    except EncodeError:
        return False
