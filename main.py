#===============================================================================
#  MenuPro  |  Connection Manager
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  A desktop catalog of clients and their accesses (SSH, RDP, URL).
#  Activating an access launches the matching external tool:
#    - URL -> xdg-open
#    - SSH -> ssh inside a terminal emulator
#    - RDP -> xfreerdp / xfreerdp3 inside a terminal emulator, or directly
#             with the password passed on stdin ("Open with password")
#
#  Data Files
#  ----------
#    <data dir>/clients.csv
#    <data dir>/accesses.csv
#    <data dir>/launcher_state.json
#    <data dir>/logs/menupro.log
#  The data dir is $MENUPRO_DATA_DIR, or the platform user data dir.
#
#  Copyright & License Notes
#  -------------------------
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#
#  This source code is provided "AS IS", without warranty of any kind, express
#  or implied, including but not limited to the warranties of merchantability,
#  fitness for a particular purpose, and noninfringement.
#
#  Permission Notice (Personal/Internal Use)
#  -----------------------------------------
#  You may use, copy, and modify this software for personal or internal use.
#  Redistribution or public release should include this header and credit the
#  author. If you plan to open-source this project, consider replacing this
#  section with an OSI-approved license (e.g., MIT) for clarity.
#
#  Third-Party Components
#  ----------------------
#  This project uses third-party libraries (PySide6, platformdirs) which are
#  licensed separately by their respective authors. Ensure compliance with
#  their license terms when distributing this software.
#===============================================================================

import sys

from menupro.app import main

if __name__ == "__main__":
    sys.exit(main())
