"""
Tests for shirecoin_core.units: the display unit table.

Covers:
  - Display order and stability of the table
  - factor / decimals per unit and the factor == 10**decimals invariant
  - Name, short name and description lookups
  - Fallbacks for unknown unit ids
  - Column titles and name resolution
"""

import pytest

from shirecoin_core import units
from shirecoin_core.precision import COIN, THIN_SP_UTF8 as THIN_SP
from shirecoin_core.units import Unit

UNKNOWN_IDS = [-1, 4, 99, 2 ** 40]


# ═══════════════════════════════════════════════════════════════════════
#  Table
# ═══════════════════════════════════════════════════════════════════════


class TestTable:

    def test_display_order(self):
        assert units.available_units() == [
            Unit.SHIRE, Unit.MSHIRE, Unit.USHIRE, Unit.SAT,
        ]

    def test_order_stable_and_fresh(self):
        first = units.available_units()
        first.reverse()
        assert units.available_units()[0] == Unit.SHIRE

    def test_denominations_match_units(self):
        assert [d.unit for d in units.denominations()] == units.available_units()

    def test_denomination_is_frozen(self):
        d = units.denominations()[0]
        with pytest.raises(AttributeError):
            d.factor = 1

    @pytest.mark.parametrize("u,factor,decimals", [
        (Unit.SHIRE, 100_000_000, 8),
        (Unit.MSHIRE, 100_000, 5),
        (Unit.USHIRE, 100, 2),
        (Unit.SAT, 1, 0),
    ])
    def test_factor_and_decimals(self, u, factor, decimals):
        assert units.factor(u) == factor
        assert units.decimals(u) == decimals

    def test_factor_is_power_of_ten(self, unit):
        assert units.factor(unit) == 10 ** units.decimals(unit)

    def test_plain_int_ids(self):
        assert units.valid(0)
        assert units.factor(1) == 100_000
        assert units.short_name(2) == "bits"


# ═══════════════════════════════════════════════════════════════════════
#  Names
# ═══════════════════════════════════════════════════════════════════════


class TestNames:

    @pytest.mark.parametrize("u,long,short", [
        (Unit.SHIRE, "SHIRE", "SHIRE"),
        (Unit.MSHIRE, "mSHIRE", "mSHIRE"),
        (Unit.USHIRE, "µSHIRE (bits)", "bits"),
        (Unit.SAT, "Satoshi (sat)", "sat"),
    ])
    def test_long_and_short(self, u, long, short):
        assert units.long_name(u) == long
        assert units.short_name(u) == short

    def test_descriptions_use_thin_space(self):
        assert units.description(Unit.SHIRE) == "Shirecoins"
        assert units.description(Unit.MSHIRE) == f"Milli-Shirecoins (1 / 1{THIN_SP}000)"
        assert units.description(Unit.USHIRE) == (
            f"Micro-Shirecoins (bits) (1 / 1{THIN_SP}000{THIN_SP}000)"
        )
        assert units.description(Unit.SAT) == (
            f"Satoshi (sat) (1 / 100{THIN_SP}000{THIN_SP}000)"
        )


# ═══════════════════════════════════════════════════════════════════════
#  Unknown ids
# ═══════════════════════════════════════════════════════════════════════


class TestUnknownUnit:

    @pytest.mark.parametrize("bad", UNKNOWN_IDS)
    def test_not_valid(self, bad):
        assert not units.valid(bad)

    @pytest.mark.parametrize("bad", UNKNOWN_IDS)
    def test_factor_falls_back_to_coin(self, bad):
        assert units.factor(bad) == COIN

    @pytest.mark.parametrize("bad", UNKNOWN_IDS)
    def test_decimals_falls_back_to_zero(self, bad):
        assert units.decimals(bad) == 0

    @pytest.mark.parametrize("bad", UNKNOWN_IDS)
    def test_names_fall_back_to_marker(self, bad):
        assert units.long_name(bad) == "???"
        assert units.short_name(bad) == "???"
        assert units.description(bad) == "???"


# ═══════════════════════════════════════════════════════════════════════
#  Column title / name resolution
# ═══════════════════════════════════════════════════════════════════════


class TestColumnTitle:

    def test_valid_unit(self):
        assert units.amount_column_title(Unit.USHIRE) == "Amount (bits)"

    def test_unknown_unit_has_no_suffix(self):
        assert units.amount_column_title(42) == "Amount"

    def test_custom_label(self):
        assert units.amount_column_title(Unit.SAT, "Betrag") == "Betrag (sat)"


class TestUnitFromName:

    @pytest.mark.parametrize("name,expected", [
        ("SHIRE", Unit.SHIRE),
        ("shire", Unit.SHIRE),
        ("mSHIRE", Unit.MSHIRE),
        ("uSHIRE", Unit.USHIRE),
        ("µSHIRE", Unit.USHIRE),
        ("\u03bcSHIRE", Unit.USHIRE),
        ("bits", Unit.USHIRE),
        (" sat ", Unit.SAT),
        ("satoshi", Unit.SAT),
    ])
    def test_known(self, name, expected):
        assert units.unit_from_name(name) == expected

    def test_unknown(self):
        assert units.unit_from_name("BTC") is None
