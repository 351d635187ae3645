# src/utils/exception_hook.py
from __future__ import annotations

import logging
import os
import sys
import traceback
from datetime import datetime

import pygame

logger = logging.getLogger(__name__)


def install_crash_handler(dump_dir: str = "crash_dumps") -> None:
    """
    Install a sys.excepthook that writes the traceback to `dump_dir`,
    saves the last rendered frame when a pygame display is active, then exits.
    """
    def _hook(exctype, value, tb):
        if issubclass(exctype, KeyboardInterrupt):
            sys.__excepthook__(exctype, value, tb)
            return

        os.makedirs(dump_dir, exist_ok=True)
        ts = datetime.now().strftime("%Y%m%d-%H%M%S")

        crash_path = os.path.join(dump_dir, f"trace-{ts}.log")
        with open(crash_path, "w", encoding="utf-8") as f:
            traceback.print_exception(exctype, value, tb, file=f)

        try:
            surf = pygame.display.get_surface() if pygame.display.get_init() else None
            if surf:
                pygame.image.save(surf, os.path.join(dump_dir, f"screenshot-{ts}.png"))
        except pygame.error as exc:
            logger.warning("Could not save crash screenshot: %s", exc)

        logger.critical("Unhandled %s, trace written to %s", exctype.__name__, crash_path)
        traceback.print_exception(exctype, value, tb, file=sys.stderr)
        sys.exit(1)

    sys.excepthook = _hook
