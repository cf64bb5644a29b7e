"""
Shirecoin core - amount display units and address entry validation.

Key features:
- Four fixed display denominations (SHIRE, mSHIRE, bits, sat)
- Exact integer <-> string conversion with locale independent grouping
- Three-state keystroke validation for address fields
- Base58Check address decoding
- Script verification flag and error code definitions
"""

__version__ = "1.0.0"
__all__ = [
    "precision",
    "units",
    "amounts",
    "address_validator",
    "address",
    "consensus",
    "config",
    "logging_config",
]
