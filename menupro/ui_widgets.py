#===============================================================================
#  MenuPro | ui_widgets.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Reusable list widgets: client list and the access tile grid.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from PySide6.QtWidgets import QListWidget

from .constants import GRID_SIZE, ICON_SIZE


class TileList(QListWidget):
    """Grid of access tiles. Order comes from the catalog, so no drag/drop."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setViewMode(QListWidget.IconMode)
        self.setMovement(QListWidget.Static)
        self.setResizeMode(QListWidget.Adjust)
        self.setIconSize(ICON_SIZE)
        self.setGridSize(GRID_SIZE)
        self.setSpacing(10)
        self.setSelectionMode(QListWidget.SingleSelection)


class ClientList(QListWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setSelectionMode(QListWidget.SingleSelection)
        self.setMinimumWidth(200)
        self.setMaximumWidth(320)
