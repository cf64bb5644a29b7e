#!/usr/bin/env python3
"""
Shirecoin unit tool: format, parse and check amounts and addresses.

Usage:
    python run_units.py units
    python run_units.py format 123456789012 --unit mSHIRE --separators always
    python run_units.py parse "1 234.5" --unit SHIRE
    python run_units.py check SXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXX

Defaults for --unit, --separators and --plus come from the [display]
section of the config file and the SHIRECOIN_* environment variables.
"""

from __future__ import annotations

import argparse
import logging
import sys

from shirecoin_core import units
from shirecoin_core.address import decode_destination
from shirecoin_core.address_validator import State, validate_check
from shirecoin_core.amounts import (
    SeparatorStyle,
    format_amount,
    format_html_with_unit,
    format_with_unit,
    parse_amount,
)
from shirecoin_core.config import ShirecoinConfig, load_config
from shirecoin_core.logging_config import setup_logging
from shirecoin_core.precision import money_range

logger = logging.getLogger("units")


def _resolve_unit(name: str | None, default: int) -> int:
    if name is None:
        return default
    unit = units.unit_from_name(name)
    if unit is None:
        raise SystemExit(f"error: unknown unit {name!r}")
    return unit


# ===================================================================
#  Commands
# ===================================================================

def cmd_units(args: argparse.Namespace, cfg: ShirecoinConfig) -> int:
    for d in units.denominations():
        print(f"{d.long_name:<16} {d.factor:>11}  {d.decimals}  {d.description}")
    return 0


def cmd_format(args: argparse.Namespace, cfg: ShirecoinConfig) -> int:
    default_unit, default_style = cfg.display.resolve()
    unit = _resolve_unit(args.unit, default_unit)
    style = SeparatorStyle(args.separators) if args.separators else default_style
    plus = args.plus or cfg.display.plus_sign

    if args.html:
        out = format_html_with_unit(unit, args.amount, plus, style)
    elif args.with_unit:
        out = format_with_unit(unit, args.amount, plus, style)
    else:
        out = format_amount(unit, args.amount, plus, style)
    print(out)
    return 0


def cmd_parse(args: argparse.Namespace, cfg: ShirecoinConfig) -> int:
    default_unit, _ = cfg.display.resolve()
    unit = _resolve_unit(args.unit, default_unit)
    amount, reason = parse_amount(unit, args.text)
    if amount is None:
        print(f"error: cannot parse {args.text!r}: {reason}", file=sys.stderr)
        return 1
    if not money_range(amount):
        logger.warning("%d is outside the valid money range", amount)
    print(amount)
    return 0


def cmd_check(args: argparse.Namespace, cfg: ShirecoinConfig) -> int:
    result = validate_check(args.address, len(args.address))
    if result.state is not State.ACCEPTABLE:
        print(f"{result.state.name.lower()}: {result.text!r}")
        return 1
    dest = decode_destination(result.text, cfg.address.params())
    if dest is None:
        print(f"invalid: {result.text} does not decode")
        return 1
    print(f"valid {dest.kind}: {dest.hash.hex()}")
    return 0


# ===================================================================
#  Entry point
# ===================================================================

def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Shirecoin amount and address tool")
    p.add_argument("--config", default=None, help="Path to shirecoin.toml config file")
    p.add_argument("--log-level", default=None, help="Override logging level")
    sub = p.add_subparsers(dest="command", required=True)

    s = sub.add_parser("units", help="List display units")
    s.set_defaults(func=cmd_units)

    s = sub.add_parser("format", help="Format a satoshi amount")
    s.add_argument("amount", type=int, help="Amount in satoshis")
    s.add_argument("--unit", default=None, help="Display unit (SHIRE, mSHIRE, bits, sat)")
    s.add_argument("--plus", action="store_true", help="Prefix positive amounts with '+'")
    s.add_argument("--separators", choices=[st.value for st in SeparatorStyle],
                   default=None, help="Thousands grouping")
    s.add_argument("--with-unit", action="store_true", help="Append the unit name")
    s.add_argument("--html", action="store_true", help="HTML-safe output with unit")
    s.set_defaults(func=cmd_format)

    s = sub.add_parser("parse", help="Parse a display amount into satoshis")
    s.add_argument("text", help="Amount text, e.g. '1 234.5'")
    s.add_argument("--unit", default=None, help="Unit the text is written in")
    s.set_defaults(func=cmd_parse)

    s = sub.add_parser("check", help="Validate an address")
    s.add_argument("address")
    s.set_defaults(func=cmd_check)

    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    cfg = load_config(args.config)
    setup_logging(
        level=args.log_level or cfg.logging.level,
        fmt=cfg.logging.format,
        log_file=cfg.logging.file,
    )
    return args.func(args, cfg)


if __name__ == "__main__":
    raise SystemExit(main())
