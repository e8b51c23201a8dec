# src/logging/handlers.py — v1
"""Size-rotated log file handler."""

from __future__ import annotations

import re
from logging.handlers import RotatingFileHandler
from pathlib import Path

_SIZE_RE = re.compile(r"^(\d+(?:\.\d+)?)\s*(B|KB|MB|GB)?$", re.IGNORECASE)
_UNITS = {"B": 1, "KB": 1024, "MB": 1024**2, "GB": 1024**3}


def parse_size(size: str) -> int:
    """Parse a size such as ``"10MB"``, ``"1.5 GB"`` or ``"4096"`` into bytes.

    A bare number counts bytes. Units are case-insensitive.

    Raises:
        ValueError: On an unrecognized format or a size below one byte.
    """
    match = _SIZE_RE.match(size.strip())
    if not match:
        raise ValueError(f"Invalid size format: {size!r}. Use e.g. '10MB'.")
    unit = (match.group(2) or "B").upper()
    n_bytes = int(float(match.group(1)) * _UNITS[unit])
    if n_bytes < 1:
        raise ValueError(f"Invalid size format: {size!r}. Size must be at least 1 byte.")
    return n_bytes


def create_rotating_handler(
    log_file: str | Path,
    rotation: str = "10MB",
    retention: int = 30,
) -> RotatingFileHandler:
    """Open ``log_file`` for appending, rolling it over at ``rotation`` bytes.

    ``retention`` is the number of rolled-over files kept beside the live
    one (``run.log.1`` .. ``run.log.N``); 0 truncates the live file in place.
    The file is created on the first record, parent directories right away.
    """
    path = Path(log_file).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(
        filename=str(path),
        maxBytes=parse_size(rotation),
        backupCount=retention,
        encoding="utf-8",
        delay=True,
    )
