#===============================================================================
#  MenuPro | tile_widget.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Metro-style tile that renders one access entry (kind badge, alias, target).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass

from PySide6.QtCore import Qt, QSize
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QFrame, QLabel, QVBoxLayout

from .constants import ACCESS_TILE_COLORS
from .models import AccessEntry, AccessType


@dataclass
class TileVisual:
    bg_color: str
    badge: str
    title: str
    subtitle: str = ""

    @staticmethod
    def for_access(entry: AccessEntry) -> "TileVisual":
        kind = AccessType(entry.kind).value
        return TileVisual(
            bg_color=ACCESS_TILE_COLORS.get(kind, "#2D7D9A"),
            badge=kind,
            title=entry.alias,
            subtitle=entry.summary(),
        )


class TileWidget(QFrame):
    """A flat tile used inside a QListWidget item."""

    def __init__(self, visual: TileVisual, size: QSize, parent=None):
        super().__init__(parent)
        self.setObjectName("AccessTile")
        self.setFixedSize(size)
        self.setStyleSheet(f"QFrame#AccessTile {{ background: {visual.bg_color}; }}")

        box = QVBoxLayout(self)
        box.setContentsMargins(10, 8, 10, 10)
        box.setSpacing(4)

        box.addWidget(_label(visual.badge, 8, bold=True, color="rgba(255,255,255,0.7)", top=True))
        box.addStretch(1)

        title = _label(visual.title, 11, bold=True, color="white")
        title.setWordWrap(True)
        box.addWidget(title)

        if visual.subtitle.strip():
            box.addWidget(_label(visual.subtitle, 9, color="rgba(255,255,255,0.85)"))


def _label(text: str, point_size: int, *, bold: bool = False, color: str, top: bool = False) -> QLabel:
    lbl = QLabel(text)
    lbl.setAlignment(Qt.AlignLeft | (Qt.AlignTop if top else Qt.AlignBottom))
    font = QFont("Segoe UI", point_size)
    font.setBold(bold)
    lbl.setFont(font)
    lbl.setStyleSheet(f"color: {color};")
    return lbl
