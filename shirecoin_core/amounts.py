"""
Conversion between satoshi amounts and display strings.

Formatting never goes through ``locale`` or ``float``: the whole part is
grouped with SI thin spaces (U+2009), which cannot be mistaken for the
decimal point in any locale, and the fractional part is always exactly
``decimals(unit)`` digits.  Parsing accepts anything :func:`format_amount`
produces, with or without grouping, so for every valid unit and amount::

    parse(unit, format_amount(unit, n, False, SeparatorStyle.NEVER)) == n
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Optional

from shirecoin_core import units
from shirecoin_core.precision import (
    MAX_MONEY,
    THIN_SP_HTML,
    THIN_SP_UTF8,
)

logger = logging.getLogger(__name__)

# Strings longer than this would exceed 63 bits.
MAX_DIGITS = 18

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class SeparatorStyle(Enum):
    """When to group the whole part into thousands."""
    NEVER = "never"
    STANDARD = "standard"   # only when the whole part has more than 4 digits
    ALWAYS = "always"


def _group_thousands(digits: str) -> str:
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups.extend(digits[i:i + 3] for i in range(head, len(digits), 3))
    return THIN_SP_UTF8.join(groups)


def format_amount(
    unit: int,
    amount: int,
    plus_sign: bool = False,
    separators: SeparatorStyle = SeparatorStyle.STANDARD,
) -> str:
    """
    Render *amount* (satoshis) in *unit*.

    Returns an empty string for an unknown unit; callers must treat that
    as "cannot format", not as a zero-length amount.

    >>> format_amount(units.Unit.SHIRE, -123456789012)
    '-1234.56789012'
    """
    if not units.valid(unit):
        return ""
    coin = units.factor(unit)
    num_decimals = units.decimals(unit)

    n_abs = abs(amount)
    quotient, remainder = divmod(n_abs, coin)
    quotient_str = str(quotient)

    if separators is SeparatorStyle.ALWAYS or (
        separators is SeparatorStyle.STANDARD and len(quotient_str) > 4
    ):
        quotient_str = _group_thousands(quotient_str)

    if amount < 0:
        quotient_str = "-" + quotient_str
    elif plus_sign and amount > 0:
        quotient_str = "+" + quotient_str

    if num_decimals > 0:
        return quotient_str + "." + str(remainder).rjust(num_decimals, "0")
    return quotient_str


def format_with_unit(
    unit: int,
    amount: int,
    plus_sign: bool = False,
    separators: SeparatorStyle = SeparatorStyle.STANDARD,
) -> str:
    """Plain text amount followed by the unit's short name.

    Do not embed the result in HTML; use :func:`format_html_with_unit`,
    otherwise the renderer may wrap the number at a grouping space.
    """
    return (
        format_amount(unit, amount, plus_sign, separators)
        + " " + units.short_name(unit)
    )


def format_html_with_unit(
    unit: int,
    amount: int,
    plus_sign: bool = False,
    separators: SeparatorStyle = SeparatorStyle.STANDARD,
) -> str:
    text = format_with_unit(unit, amount, plus_sign, separators)
    text = text.replace(THIN_SP_UTF8, THIN_SP_HTML)
    return f"<span style='white-space: nowrap;'>{text}</span>"


def _remove_spaces(text: str) -> str:
    return "".join(
        ch for ch in text if not ch.isspace() and ch != THIN_SP_UTF8
    )


def parse_amount(unit: int, value: str) -> tuple[Optional[int], str]:
    """
    Parse a display string in *unit* into satoshis.

    Returns ``(amount, "OK")`` on success or ``(None, reason)`` on failure.
    Grouping and other whitespace are ignored.  Only the digit count and the
    64-bit range are enforced here; use :func:`precision.money_range` to
    check the value against the supply ceiling.
    """
    if not units.valid(unit):
        return None, "Unknown unit"
    if not value:
        return None, "Empty amount"
    num_decimals = units.decimals(unit)

    parts = _remove_spaces(value).split(".")
    if len(parts) > 2:
        return None, "More than one decimal point"

    whole = parts[0]
    fraction = parts[1] if len(parts) > 1 else ""
    if len(fraction) > num_decimals:
        return None, f"More than {num_decimals} decimal places"

    digits = whole + fraction.ljust(num_decimals, "0")
    if len(digits) > MAX_DIGITS:
        return None, "Too many digits"
    if not _INTEGER_RE.fullmatch(digits):
        return None, "Not a number"

    return int(digits), "OK"


def parse(unit: int, value: str) -> Optional[int]:
    """Like :func:`parse_amount` but returns only the amount (or None)."""
    amount, reason = parse_amount(unit, value)
    if amount is None:
        logger.debug("Rejected amount %r in unit %s: %s", value, unit, reason)
    return amount


def max_money() -> int:
    return MAX_MONEY
