#===============================================================================
#  MenuPro | process_launcher.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Starts external programs without a shell and without blocking the caller.
#  spawn_with_input() feeds one line on stdin while draining stdout/stderr.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import subprocess
import threading
from typing import IO, List, Optional, Sequence

logger = logging.getLogger(__name__)

DRAIN_CHUNK = 64 * 1024


def spawn(argv: Sequence[str]) -> Optional[subprocess.Popen]:
    """Start argv detached from our session. Returns None if it can't start."""
    try:
        p = subprocess.Popen(list(argv), start_new_session=True)
    except OSError as e:
        logger.warning("could not start %s: %s", argv[0], e)
        return None
    logger.info("started %s (pid %s)", argv[0], p.pid)
    return p


def _drain(stream: IO[bytes]) -> None:
    # Output is discarded; reading only keeps the child from blocking on a full pipe.
    try:
        while stream.read(DRAIN_CHUNK):
            pass
    except (OSError, ValueError):
        pass
    finally:
        stream.close()


def start_drains(p: subprocess.Popen) -> List[threading.Thread]:
    """Fire-and-forget readers for stdout/stderr. Nobody joins them."""
    threads = []
    for name, stream in (("stdout", p.stdout), ("stderr", p.stderr)):
        if stream is None:
            continue
        t = threading.Thread(target=_drain, args=(stream,), name=f"drain-{name}-{p.pid}", daemon=True)
        t.start()
        threads.append(t)
    return threads


def spawn_with_input(argv: Sequence[str], text: str) -> Optional[subprocess.Popen]:
    """Start argv with piped stdio, write `text` + newline to stdin and close it.

    The drains are started before writing so a child that floods
    stdout/stderr before reading stdin cannot deadlock us.
    """
    try:
        p = subprocess.Popen(
            list(argv),
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            start_new_session=True,
        )
    except OSError as e:
        logger.warning("could not start %s: %s", argv[0], e)
        return None

    logger.info("started %s (pid %s) with credentials on stdin", argv[0], p.pid)
    start_drains(p)

    try:
        p.stdin.write((text + "\n").encode("utf-8"))
        p.stdin.flush()
    except BrokenPipeError:
        logger.debug("%s exited before reading stdin", argv[0])
    except (OSError, ValueError) as e:
        logger.debug("writing stdin of %s failed: %s", argv[0], type(e).__name__)
    finally:
        try:
            p.stdin.close()
        except OSError:
            pass

    return p
