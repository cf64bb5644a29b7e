"""
Precision constants and helpers for Shirecoin amounts.

Amounts are always carried as integers counted in satoshis, the smallest
indivisible unit:

    1 SHIRE = 100,000,000 sat

Nothing in this package converts amounts through ``float``.
"""

from __future__ import annotations

# Number of decimal places of the whole-coin denomination.
SHIRE_DECIMALS: int = 8

# Satoshis per whole coin.
COIN: int = 10 ** SHIRE_DECIMALS  # 100_000_000

# Protocol supply ceiling in satoshis.
MAX_MONEY: int = 21_000_000 * COIN

# Signed 64-bit bounds of the on-wire amount type.
INT64_MIN: int = -(2 ** 63)
INT64_MAX: int = 2 ** 63 - 1

# SI-style thin space used as a locale independent digit grouping mark.
THIN_SP_CP: int = 0x2009
THIN_SP_UTF8: str = "\u2009"
THIN_SP_HTML: str = "&thinsp;"


def money_range(value: int) -> bool:
    """Return True if *value* lies within ``[0, MAX_MONEY]``.

    >>> money_range(MAX_MONEY)
    True
    >>> money_range(-1)
    False
    """
    return 0 <= value <= MAX_MONEY
