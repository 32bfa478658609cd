#===============================================================================
#  MenuPro | app.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Application bootstrap: data dir, logging, QApplication, main window.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import sys

from PySide6.QtWidgets import QApplication

from .app_paths import data_dir, log_dir, state_path
from .constants import APP_TITLE
from .csv_repository import CsvRepository
from .log_setup import setup_logging
from .main_window import MainWindow
from .state import load_state

logger = logging.getLogger(__name__)


def main() -> int:
    base = data_dir()
    state = load_state(state_path(base))
    log_file = setup_logging(log_dir(base), state.get("log_level", "INFO"))
    logger.info("%s starting (data: %s, log: %s)", APP_TITLE, base, log_file)

    app = QApplication(sys.argv)
    app.setApplicationName(APP_TITLE)
    w = MainWindow(CsvRepository(base))
    w.show()
    return app.exec()
