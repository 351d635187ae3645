# src/utils/logging_setup.py
from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import Optional, Union

_FMT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"


def configure_logging(
    level: Union[int, str] = logging.INFO,
    *,
    log_to_file: bool = True,
    log_dir: str = "logs",
) -> Optional[str]:
    """
    Configure root logging for ZoomPane and return the log file path (if any).

    `level` may be a logging constant or a name like "DEBUG". Viewport
    zoom/pan traces are emitted at DEBUG by `src.core.viewport`.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"unknown log level: {level!r}")

    logging.basicConfig(level=level, format=_FMT, datefmt=_DATEFMT)
    root = logging.getLogger()
    root.setLevel(level)

    # SDL/pygame helpers are chatty at DEBUG
    for noisy in ("PIL", "asyncio"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    if not log_to_file:
        return None

    # One file sink per process
    for h in root.handlers:
        if isinstance(h, logging.FileHandler) and getattr(h, "_zoompane", False):
            return h.baseFilename

    os.makedirs(log_dir, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d-%H%M%S")
    path = os.path.join(log_dir, f"zoompane-{ts}.log")
    fh = logging.FileHandler(path, encoding="utf-8")
    fh.setLevel(level)
    fh.setFormatter(logging.Formatter(_FMT, _DATEFMT))
    fh._zoompane = True  # type: ignore[attr-defined]
    root.addHandler(fh)
    return path
