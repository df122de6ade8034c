# brazilian_utils/log.py
#
# Shared logger with elapsed time.
#
# Silent unless BRAZILIAN_UTILS_VERBOSE=true. Plain stdout with flush, one
# write per line.
from __future__ import annotations

import sys
import time

from brazilian_utils.config import get_settings

_start = time.monotonic()


def log(message: str) -> None:
    """Write a timestamped log line to stdout when verbose mode is on."""
    if not get_settings().verbose:
        return
    elapsed = time.monotonic() - _start
    minutes, seconds = divmod(int(elapsed), 60)
    sys.stdout.write(f"[brazilian_utils {minutes:02d}:{seconds:02d}] {message}\n")
    sys.stdout.flush()
