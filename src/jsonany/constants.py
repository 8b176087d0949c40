"""
Numeric bounds and canonical encoding defaults for jsonany.

Defines the integer ranges used to classify JSON numerals and the separators
used by every canonical encoder in the package. This module is zero-IO and uses
only the Python standard library.

Notes:
    - Integral literals inside [INT64_MIN, INT64_MAX] decode as NumberInt.
    - Integral literals inside (INT64_MAX, UINT64_MAX] decode as NumberUint.
    - Anything wider decodes as NumberFloat.
"""

from __future__ import annotations

__all__ = [
    "INT64_MIN",
    "INT64_MAX",
    "UINT64_MAX",
    "MAX_INT_LITERAL_LEN",
    "CANONICAL_SEPARATORS",
    "DEFAULT_HASH_ALGORITHM",
]

INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1
UINT64_MAX: int = 2**64 - 1

# len("-9223372036854775808") == 20; longer literals cannot fit 64 bits.
MAX_INT_LITERAL_LEN: int = 20

# Compact separators used by the Object/Array encoders.
CANONICAL_SEPARATORS: tuple[str, str] = (",", ":")

DEFAULT_HASH_ALGORITHM: str = "sha256"
