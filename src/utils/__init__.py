# --- FILE: src/utils/__init__.py
"""
Utilities package marker: settings, logging, crash handling and the event bus.
"""

__all__ = ["settings", "logging_setup", "exception_hook", "event_bus"]
