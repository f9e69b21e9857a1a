# pipeline/log.py
#
# Shared pipeline logger with elapsed time.
#
# Design decisions:
#   - Single log() function so every phase prints the same prefix.
#   - warn() goes to stderr: non-fatal conditions (empty optional data,
#     dropped rows) must stand out from progress lines.
#   - No external dependencies; plain stdout/stderr with flush.
from __future__ import annotations

import sys
import time

_start = time.monotonic()


def _prefix() -> str:
    elapsed = time.monotonic() - _start
    minutes, seconds = divmod(int(elapsed), 60)
    return f"[pipeline {minutes:02d}:{seconds:02d}]"


def log(message: str) -> None:
    """Write a timestamped log line to stdout."""
    sys.stdout.write(f"{_prefix()} {message}\n")
    sys.stdout.flush()


def warn(message: str) -> None:
    """Write a timestamped WARNING line to stderr."""
    sys.stderr.write(f"{_prefix()} WARNING: {message}\n")
    sys.stderr.flush()
