"""
Display denominations for Shirecoin amounts.

The registry is a closed, ordered table of the four units a wallet can show
amounts in.  Every lookup accepts a plain ``int`` so ids arriving from a
settings file or a combo box can be passed straight through; an id outside
the table never raises, it degrades to the documented fallback instead:

    ========  =========  ========  ==========================
    unit      factor     decimals  short name
    ========  =========  ========  ==========================
    SHIRE     100000000  8         SHIRE
    mSHIRE    100000     5         mSHIRE
    µSHIRE    100        2         bits
    sat       1          0         sat
    unknown   100000000  0         ???
    ========  =========  ========  ==========================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Mapping, Optional

from shirecoin_core.precision import COIN, THIN_SP_UTF8

UNKNOWN_NAME = "???"


class Unit(IntEnum):
    SHIRE = 0
    MSHIRE = 1
    USHIRE = 2
    SAT = 3


@dataclass(frozen=True)
class Denomination:
    """One row of the unit table."""
    unit: Unit
    factor: int            # satoshis per one display unit
    decimals: int          # maximum fractional digits
    long_name: str
    short_name: str
    description: str


_TABLE: tuple[Denomination, ...] = (
    Denomination(
        Unit.SHIRE, 100_000_000, 8,
        "SHIRE", "SHIRE",
        "Shirecoins",
    ),
    Denomination(
        Unit.MSHIRE, 100_000, 5,
        "mSHIRE", "mSHIRE",
        f"Milli-Shirecoins (1 / 1{THIN_SP_UTF8}000)",
    ),
    Denomination(
        Unit.USHIRE, 100, 2,
        "µSHIRE (bits)", "bits",
        f"Micro-Shirecoins (bits) (1 / 1{THIN_SP_UTF8}000{THIN_SP_UTF8}000)",
    ),
    Denomination(
        Unit.SAT, 1, 0,
        "Satoshi (sat)", "sat",
        f"Satoshi (sat) (1 / 100{THIN_SP_UTF8}000{THIN_SP_UTF8}000)",
    ),
)

_BY_ID: Mapping[int, Denomination] = MappingProxyType(
    {int(d.unit): d for d in _TABLE}
)

# Names accepted from config files and the command line (lower-cased).
_ALIASES: Mapping[str, Unit] = MappingProxyType({
    "shire": Unit.SHIRE,
    "mshire": Unit.MSHIRE,
    "ushire": Unit.USHIRE,
    "µshire": Unit.USHIRE,
    "μshire": Unit.USHIRE,   # Greek mu
    "bits": Unit.USHIRE,
    "sat": Unit.SAT,
    "sats": Unit.SAT,
    "satoshi": Unit.SAT,
})


def available_units() -> list[Unit]:
    """Units in display order."""
    return [d.unit for d in _TABLE]


def denominations() -> list[Denomination]:
    """Full table rows in display order."""
    return list(_TABLE)


def valid(unit: int) -> bool:
    return unit in _BY_ID


def _lookup(unit: int) -> Optional[Denomination]:
    return _BY_ID.get(unit)


def factor(unit: int) -> int:
    """Satoshis per display unit; unknown units are treated as whole coins."""
    d = _lookup(unit)
    return d.factor if d is not None else COIN


def decimals(unit: int) -> int:
    """Number of fractional digits; 0 for unknown units."""
    d = _lookup(unit)
    return d.decimals if d is not None else 0


def long_name(unit: int) -> str:
    d = _lookup(unit)
    return d.long_name if d is not None else UNKNOWN_NAME


def short_name(unit: int) -> str:
    """Compact label, e.g. ``bits``; falls back to :func:`long_name`."""
    d = _lookup(unit)
    if d is None or not d.short_name:
        return long_name(unit)
    return d.short_name


def description(unit: int) -> str:
    d = _lookup(unit)
    return d.description if d is not None else UNKNOWN_NAME


def amount_column_title(unit: int, title: str = "Amount") -> str:
    """Column header for amount tables, e.g. ``Amount (SHIRE)``.

    *title* is the already-translated base label.
    """
    if valid(unit):
        title += " (" + short_name(unit) + ")"
    return title


def unit_from_name(name: str) -> Optional[int]:
    """Resolve a unit name such as ``"mSHIRE"`` or ``"bits"`` to its id."""
    u = _ALIASES.get(name.strip().lower())
    return int(u) if u is not None else None
