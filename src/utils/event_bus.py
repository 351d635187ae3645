# src/utils/event_bus.py
from __future__ import annotations
from typing import Any, Callable, DefaultDict, Dict, List
from collections import defaultdict

Handler = Callable[[Dict[str, Any]], None]


class EventBus:
    """
    Tiny synchronous pub/sub used to fan viewport hooks out to UI code:
        off = bus.on("viewport.after_zoom", lambda payload: print(payload["factor"]))
        bus.emit("viewport.after_zoom", factor=1.2)
        off()  # unsubscribe
    Handlers run in subscription order on the emitting thread.
    """
    def __init__(self) -> None:
        self._subs: DefaultDict[str, List[Handler]] = defaultdict(list)

    def on(self, event: str, handler: Handler) -> Callable[[], None]:
        self._subs[event].append(handler)

        def off() -> None:
            handlers = self._subs.get(event)
            if handlers and handler in handlers:
                handlers.remove(handler)
        return off

    def emit(self, event: str, **payload: Any) -> None:
        # Copy so a handler may unsubscribe itself mid-emit
        for h in list(self._subs.get(event, ())):
            h(payload)

    def handler_count(self, event: str) -> int:
        return len(self._subs.get(event, ()))

    def clear(self) -> None:
        self._subs.clear()


# shared instance
bus = EventBus()
