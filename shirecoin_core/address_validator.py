"""
Keystroke validation for address entry fields.

Both validators are pure functions of ``(text, pos)``.  They strip
whitespace (including the zero-width characters that commonly ride along
with copy/paste) and report one of three states:

  - **INVALID**      : reject the keystroke
  - **INTERMEDIATE** : keep the text, judgement deferred
  - **ACCEPTABLE**   : text is well-formed

Corrections are deliberately limited to removing invisible characters, so a
typo that would send funds to the wrong place is never silently "fixed".
Checksum validation is not done here; see :mod:`shirecoin_core.address`.
"""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple

# Categorised by Unicode as "format" characters, not whitespace.
_ZERO_WIDTH = frozenset({"\u200b", "\ufeff"})

# Characters invalid in both Base58 and Bech32.
_FORBIDDEN = frozenset("IO")


class State(IntEnum):
    INVALID = 0
    INTERMEDIATE = 1
    ACCEPTABLE = 2


class ValidationResult(NamedTuple):
    state: State
    text: str
    pos: int


def _is_stripped(ch: str) -> bool:
    return ch.isspace() or ch in _ZERO_WIDTH


def is_allowed_char(ch: str) -> bool:
    """True for ASCII alphanumerics other than ``I`` and ``O``."""
    return ch.isascii() and ch.isalnum() and ch not in _FORBIDDEN


def _strip(text: str, pos: int) -> tuple[str, int]:
    kept: list[str] = []
    new_pos = pos
    for idx, ch in enumerate(text):
        if _is_stripped(ch):
            if idx < pos:
                new_pos -= 1
        else:
            kept.append(ch)
    cleaned = "".join(kept)
    return cleaned, max(0, min(new_pos, len(cleaned)))


def validate_entry(text: str, pos: int) -> ValidationResult:
    """Character-level check used while the user types."""
    cleaned, pos = _strip(text, pos)
    if all(is_allowed_char(ch) for ch in cleaned):
        return ValidationResult(State.ACCEPTABLE, cleaned, pos)
    return ValidationResult(State.INVALID, cleaned, pos)


def validate_check(text: str, pos: int) -> ValidationResult:
    """Final-form check: as :func:`validate_entry` but empty is INTERMEDIATE."""
    result = validate_entry(text, pos)
    if result.state is State.ACCEPTABLE and not result.text:
        return result._replace(state=State.INTERMEDIATE)
    return result
