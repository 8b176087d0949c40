"""
Settings for jsonany decoding and hashing.

Defines DecodeSettings, a frozen pydantic model consumed by jsonany.decode.load
and jsonany.hashing. Defaults come from jsonany.constants.

Precedence
- environment (JSONANY_* variables) > TOML > defaults.
- TOML search order when no path is given:
    1) ./jsonany.toml (either a [decode] table or top-level keys)
    2) ./pyproject.toml under [tool.jsonany]

Notes
- Invalid values raise ConfigError (wrapping pydantic.ValidationError).
- Boolean env values accept the usual spellings (1/0, true/false, yes/no, on/off).
"""

from __future__ import annotations

import hashlib
import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .constants import DEFAULT_HASH_ALGORITHM
from .errors import ConfigError

__all__ = [
    "DecodeSettings",
    "normalize_hash_algorithm",
]

_ENV_FIELDS = {
    "CANONICALIZE": "canonicalize",
    "MAX_INPUT_BYTES": "max_input_bytes",
    "HASH_ALGORITHM": "hash_algorithm",
}


def normalize_hash_algorithm(name: Any) -> str:
    """
    Normalize and validate a digest algorithm name.

    Returns:
        str: Lower-case hashlib name.

    Raises:
        ValueError: If the algorithm is not guaranteed by hashlib or needs an
            explicit digest length (shake_*).
    """
    s = str(name).strip().lower()
    if s not in hashlib.algorithms_guaranteed or s.startswith("shake_"):
        raise ValueError(f"unsupported hash algorithm {name!r}")
    return s


class DecodeSettings(BaseModel):
    """
    Runtime options for decoding and hashing.

    Attributes:
        canonicalize (bool): Canonicalize every array when decoding via load().
        max_input_bytes (int | None): Reject inputs larger than this many bytes
            (measured as UTF-8 for str input). None disables the limit.
        hash_algorithm (str): hashlib algorithm used by jsonany.hashing; must be
            one of hashlib.algorithms_guaranteed.

    Examples:
        >>> from jsonany.config import DecodeSettings
        >>> DecodeSettings(canonicalize=True).canonicalize
        True
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    canonicalize: bool = False
    max_input_bytes: int | None = Field(default=None, ge=1)
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM

    @field_validator("hash_algorithm", mode="before")
    @classmethod
    def _check_hash_algorithm(cls, v: Any) -> str:
        return normalize_hash_algorithm(v)

    @classmethod
    def _apply_mapping(cls, base: DecodeSettings, cfg: dict[str, Any] | None) -> DecodeSettings:
        """Validate a loose config mapping on top of base, returning a new instance."""
        if not cfg:
            return base
        try:
            return cls.model_validate({**base.model_dump(), **cfg})
        except ValidationError as exc:
            raise ConfigError(f"invalid jsonany settings: {exc}") from exc

    @classmethod
    def from_env(
        cls, base: DecodeSettings | None = None, prefix: str = "JSONANY_"
    ) -> DecodeSettings:
        """
        Build settings from environment variables. Precedence is env > base > defaults.

        Recognized variables:
            - JSONANY_CANONICALIZE
            - JSONANY_MAX_INPUT_BYTES
            - JSONANY_HASH_ALGORITHM
        """
        s = base or cls()
        mapping: dict[str, Any] = {}
        for suffix, name in _ENV_FIELDS.items():
            v = os.getenv(prefix + suffix)
            if v:
                mapping[name] = v
        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> DecodeSettings:
        """
        Build settings from a TOML file.

        Returns defaults when no candidate file exists.

        Raises:
            ConfigError: If a candidate file is not valid TOML or holds invalid values.
        """
        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "jsonany.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        cfg: dict[str, Any] | None = None
        for p in cand:
            if not p.exists():
                continue
            try:
                with p.open("rb") as fh:
                    data = tomllib.load(fh)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigError(f"invalid TOML in {p}: {exc}") from exc
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                cfg = tool.get("jsonany") if isinstance(tool, dict) else None
            elif isinstance(data.get("decode"), dict):
                cfg = data["decode"]
            else:
                cfg = data
            if cfg:
                break

        return cls._apply_mapping(cls(), cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> DecodeSettings:
        """
        Load settings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search jsonany.toml, pyproject.toml.
        """
        return cls.from_env(base=cls.from_toml(path))
