"""
jsonany: typed, introspectable JSON values with canonical array ordering.

## Responsibilities
- Decode JSON text into a tree of AnyValue nodes that keeps NumberInt,
  NumberUint and NumberFloat apart.
- Optionally canonicalize every array by the canonical JSON bytes of its
  elements, for stable comparison and hashing of documents whose arrays are sets.
- Re-encode any subtree as canonical JSON (sorted keys, compact, UTF-8).

## Public API
- decode / decode_canonical / load / from_python: build trees.
- AnyValue and variants (Object, Array, NumberInt, NumberUint, NumberFloat,
  String, Bool, Null), Number, Tag.
- xxx_ok safe downcasts returning (value, matched).
- canonicalize / canonical_key: canonical array ordering.
- hash_value / hash_document / values_equal: canonical digests.
- DecodeSettings: options with env > TOML > defaults precedence.

## Notes
- Zero-IO apart from DecodeSettings loaders; no output is written.
- stdlib json is the parser; pydantic backs DecodeSettings.

## Examples
```python
from jsonany import decode, decode_canonical, object_ok, Tag

root = decode(b'{"Image": {"Width": 800, "IDs": [116, 943, 234]}}')
image, _ = object_ok(root["Image"])
image["Width"].tag() is Tag.NUMBER_INT  # True
decode_canonical(b"[3,1,2]").render()   # '[1,2,3]'
```
"""

from __future__ import annotations

from .canonical import canonical_key, canonicalize
from .config import DecodeSettings
from .decode import decode, decode_canonical, from_python, load
from .errors import ConfigError, EncodeError, InputTooLargeError, JsonAnyError, ParseError
from .hashing import hash_document, hash_value, values_equal
from .tags import Tag, is_number
from .values import (
    AnyValue,
    Array,
    Bool,
    Null,
    Number,
    NumberFloat,
    NumberInt,
    NumberUint,
    Object,
    String,
    array_ok,
    bool_ok,
    downcast,
    null_ok,
    number_float_ok,
    number_int_ok,
    number_ok,
    number_uint_ok,
    object_ok,
    string_ok,
)

__version__ = "0.1.0"

__all__ = [
    # decode
    "decode",
    "decode_canonical",
    "load",
    "from_python",
    # value model
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
    "Tag",
    "is_number",
    # downcasts
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
    # canonical / hashing
    "canonical_key",
    "canonicalize",
    "hash_value",
    "hash_document",
    "values_equal",
    # settings / errors
    "DecodeSettings",
    "JsonAnyError",
    "ParseError",
    "InputTooLargeError",
    "EncodeError",
    "ConfigError",
]
