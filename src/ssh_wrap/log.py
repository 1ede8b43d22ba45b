"""Timestamped diagnostics on stderr, silent unless SSH_WRAP_DEBUG is set.

Stdout carries the wrapped command's output and is never written here.
"""

import os
import sys
from datetime import datetime

DEBUG_ENV = "SSH_WRAP_DEBUG"


def _timestamp() -> str:
    return datetime.now().strftime("%H:%M:%S")


def _is_debug() -> bool:
    return os.environ.get(DEBUG_ENV, "").strip().lower() not in ("", "0", "false")


def debug(msg: str) -> None:
    if _is_debug():
        print(f"[{_timestamp()}] ssh-wrap: {msg}", file=sys.stderr, flush=True)


def error(msg: str) -> None:
    if _is_debug():
        print(f"[{_timestamp()}] ssh-wrap: ERROR: {msg}", file=sys.stderr, flush=True)
