# main.py
"""
Main entry point for the ZoomPane demo.
"""
from __future__ import annotations

import argparse
import logging
import sys

import src.utils.settings as settings
from src.utils.exception_hook import install_crash_handler
from src.utils.logging_setup import configure_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Zoom (wheel) and pan (drag) a bounded 2D canvas.")
    p.add_argument("--width", type=int, default=settings.CANVAS_WIDTH, help="canvas width in pixels")
    p.add_argument("--height", type=int, default=settings.CANVAS_HEIGHT, help="canvas height in pixels")
    p.add_argument("--scale-factor", type=float, default=settings.SCALE_FACTOR,
                   help="zoom multiplier per wheel tick (> 1)")
    p.add_argument("--max-scale", type=float, default=settings.MAX_SCALE,
                   help="upper bound on the scale (> 1, never reached)")
    p.add_argument("--log-level", default="INFO", choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    p.add_argument("--no-log-file", action="store_true", help="log to stderr only")
    p.add_argument("--no-debug-overlay", action="store_true", help="hide the scale/translation overlay")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    log_path = configure_logging(args.log_level, log_to_file=not args.no_log_file)
    if log_path:
        logging.getLogger(__name__).info("Logging to %s", log_path)
    install_crash_handler()

    from src.app import ZoomPaneApp

    try:
        app = ZoomPaneApp(
            args.width,
            args.height,
            scale_factor=args.scale_factor,
            max_scale=args.max_scale,
            debug_overlay=not args.no_debug_overlay,
        )
    except ValueError as e:
        print(f"[ZoomPane] Invalid configuration: {e}", file=sys.stderr)
        return 2
    app.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
