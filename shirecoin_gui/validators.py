"""
QValidator adapters over :mod:`shirecoin_core.address_validator`.
"""

from __future__ import annotations

from PyQt6.QtCore import QObject
from PyQt6.QtGui import QValidator

from shirecoin_core.address import AddressParams, is_valid_address
from shirecoin_core.address_validator import (
    State,
    ValidationResult,
    validate_check,
    validate_entry,
)

_QT_STATE = {
    State.INVALID: QValidator.State.Invalid,
    State.INTERMEDIATE: QValidator.State.Intermediate,
    State.ACCEPTABLE: QValidator.State.Acceptable,
}


def _to_qt(result: ValidationResult) -> tuple[QValidator.State, str, int]:
    return _QT_STATE[result.state], result.text, result.pos


class AddressEntryValidator(QValidator):
    """Strips invisible characters and rejects non-address characters."""

    def validate(self, text: str, pos: int) -> tuple[QValidator.State, str, int]:
        return _to_qt(validate_entry(text, pos))


class AddressCheckValidator(QValidator):
    """
    Final-form validator for address fields.

    When *params* is given, a well-formed string that fails Base58Check
    decoding is reported as Intermediate so the field can flag it without
    blocking further edits.
    """

    def __init__(self, parent: QObject | None = None,
                 params: AddressParams | None = None):
        super().__init__(parent)
        self.params = params

    def validate(self, text: str, pos: int) -> tuple[QValidator.State, str, int]:
        result = validate_check(text, pos)
        if (
            self.params is not None
            and result.state is State.ACCEPTABLE
            and not is_valid_address(result.text, self.params)
        ):
            result = result._replace(state=State.INTERMEDIATE)
        return _to_qt(result)
