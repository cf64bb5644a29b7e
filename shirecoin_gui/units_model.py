"""
List model exposing the display units to Qt combo boxes and list views.
"""

from __future__ import annotations

from typing import Any

from PyQt6.QtCore import QAbstractListModel, QModelIndex, QObject, Qt

from shirecoin_core import units

UNIT_ROLE = Qt.ItemDataRole.UserRole


class UnitListModel(QAbstractListModel):
    """One row per unit, in display order."""

    def __init__(self, parent: QObject | None = None):
        super().__init__(parent)
        self._units = units.available_units()

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        return len(self._units)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        row = index.row()
        if not 0 <= row < len(self._units):
            return None
        unit = self._units[row]
        if role in (Qt.ItemDataRole.EditRole, Qt.ItemDataRole.DisplayRole):
            return units.long_name(unit)
        if role == Qt.ItemDataRole.ToolTipRole:
            return units.description(unit)
        if role == UNIT_ROLE:
            return int(unit)
        return None

    def unit_at(self, row: int) -> int | None:
        if 0 <= row < len(self._units):
            return int(self._units[row])
        return None

    def row_of(self, unit: int) -> int:
        """Row holding *unit*, or -1."""
        for row, u in enumerate(self._units):
            if u == unit:
                return row
        return -1
