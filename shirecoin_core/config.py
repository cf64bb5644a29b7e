"""
TOML-based configuration for Shirecoin display tools.

Loads settings from a TOML file and/or environment variables.
Environment variables take precedence over file values.

Usage:
    from shirecoin_core.config import load_config
    cfg = load_config("shirecoin.toml")
    unit, separators = cfg.display.resolve()

Example file::

    [display]
    unit = "mSHIRE"
    separators = "always"
    plus-sign = true

    [address]
    pubkey-prefix = 63
    script-prefix = 5

    [logging]
    level = "DEBUG"
    format = "json"
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomllib  # type: ignore[import]
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore[import,no-redef]

from shirecoin_core import units
from shirecoin_core.address import AddressParams
from shirecoin_core.amounts import SeparatorStyle

logger = logging.getLogger(__name__)

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass
class DisplayConfig:
    """How amounts are shown by default."""
    unit: Union[str, int] = "SHIRE"   # name or unit id
    separators: str = "standard"   # "never", "standard" or "always"
    plus_sign: bool = False

    def resolve(self) -> tuple[int, SeparatorStyle]:
        """
        Map the configured names to a unit id and separator style.

        ``unit`` may also be a plain unit id such as ``unit = 1``.
        """
        unit: Optional[int] = None
        if isinstance(self.unit, str):
            unit = units.unit_from_name(self.unit)
        elif isinstance(self.unit, int) and not isinstance(self.unit, bool):
            unit = int(self.unit) if units.valid(self.unit) else None
        if unit is None:
            logger.warning("Unknown display unit %r, using SHIRE", self.unit)
            unit = int(units.Unit.SHIRE)
        try:
            style = SeparatorStyle(str(self.separators).lower())
        except ValueError:
            logger.warning(
                "Unknown separator style %r, using standard", self.separators,
            )
            style = SeparatorStyle.STANDARD
        return unit, style


@dataclass
class AddressConfig:
    """Address version bytes."""
    pubkey_prefix: int = 63
    script_prefix: int = 5

    def params(self) -> AddressParams:
        return AddressParams(self.pubkey_prefix, self.script_prefix)


@dataclass
class LoggingConfig:
    """Logging settings."""
    level: str = "INFO"
    format: str = "human"   # "human" or "json"
    file: str | None = None


@dataclass
class ShirecoinConfig:
    """Top-level configuration container."""
    display: DisplayConfig = field(default_factory=DisplayConfig)
    address: AddressConfig = field(default_factory=AddressConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _merge(dc: Any, raw: dict[str, Any]) -> None:
    """Merge a raw dict into a dataclass instance (in-place)."""
    for key, value in raw.items():
        key_under = key.replace("-", "_")
        if hasattr(dc, key_under):
            setattr(dc, key_under, value)


def _parse_bool(name: str, value: str) -> bool:
    v = value.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ValueError(f"{name}: expected a boolean, got {value!r}")


def load_config(path: str | None = None) -> ShirecoinConfig:
    """
    Load configuration from a TOML file, then overlay environment variables.

    Env-var mapping:
        SHIRECOIN_UNIT        -> display.unit
        SHIRECOIN_SEPARATORS  -> display.separators
        SHIRECOIN_PLUS_SIGN   -> display.plus_sign   (1/0, true/false, ...)
        SHIRECOIN_LOG_LEVEL   -> logging.level
        SHIRECOIN_LOG_FMT     -> logging.format
        SHIRECOIN_LOG_FILE    -> logging.file
    """
    cfg = ShirecoinConfig()

    # ── TOML file ────────────────────────────────────────────────
    if path is not None:
        p = Path(path)
        if p.exists():
            with open(p, "rb") as f:
                data = tomllib.load(f)
            for section_name, section_dc in [
                ("display", cfg.display),
                ("address", cfg.address),
                ("logging", cfg.logging),
            ]:
                if section_name in data:
                    _merge(section_dc, data[section_name])
        else:
            logger.debug("Config file %s not found, using defaults", p)

    # ── Environment variable overrides ───────────────────────────
    if v := os.environ.get("SHIRECOIN_UNIT"):
        cfg.display.unit = v
    if v := os.environ.get("SHIRECOIN_SEPARATORS"):
        cfg.display.separators = v
    if v := os.environ.get("SHIRECOIN_PLUS_SIGN"):
        cfg.display.plus_sign = _parse_bool("SHIRECOIN_PLUS_SIGN", v)
    if v := os.environ.get("SHIRECOIN_LOG_LEVEL"):
        cfg.logging.level = v.upper()
    if v := os.environ.get("SHIRECOIN_LOG_FMT"):
        cfg.logging.format = v
    if v := os.environ.get("SHIRECOIN_LOG_FILE"):
        cfg.logging.file = v

    return cfg
