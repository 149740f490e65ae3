"""Event log: bounded, thread-safe store of route events.

The watcher thread and the resolving thread both append here, so every
access goes through a single ``threading.Lock``.
"""

import threading
from collections import Counter, deque
from typing import Any

from fsroutes.observability.events import RouteEvent


class EventLog:
    """Ring buffer of route events with simple filtering.

    Args:
        max_events: Maximum number of events to retain.  Oldest events are
            dropped first.

    """

    __slots__ = ("_events", "_lock", "_max_events")

    def __init__(self, max_events: int = 1_000) -> None:
        self._max_events = max_events
        self._events: deque[RouteEvent] = deque(maxlen=max_events)
        self._lock = threading.Lock()

    def append(self, event: RouteEvent) -> None:
        """Record an event."""
        with self._lock:
            self._events.append(event)

    def query(
        self,
        *,
        event_type: type | None = None,
        path: str | None = None,
        limit: int = 100,
    ) -> list[RouteEvent]:
        """Return matching events, most recent first.

        Args:
            event_type: Only return events of this type.
            path: Substring that must occur in the event's file or
                directory path.
            limit: Maximum number of events to return.

        """
        with self._lock:
            events = list(self._events)

        results: list[RouteEvent] = []
        for event in reversed(events):
            if len(results) >= limit:
                break
            if event_type is not None and not isinstance(event, event_type):
                continue
            if path is not None:
                event_path = getattr(event, "path", None) or getattr(event, "routes_dir", "")
                if path not in event_path:
                    continue
            results.append(event)
        return results

    def recent(self, n: int = 20) -> list[RouteEvent]:
        """Return the N most recent events, oldest first."""
        with self._lock:
            items = list(self._events)
        return items[-n:]

    def clear(self) -> int:
        """Drop all events and return how many there were."""
        with self._lock:
            count = len(self._events)
            self._events.clear()
            return count

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    def stats(self) -> dict[str, Any]:
        """Summary counts by event type."""
        with self._lock:
            events = list(self._events)
        return {
            "total": len(events),
            "max_events": self._max_events,
            "by_type": dict(Counter(type(e).__name__ for e in events)),
        }
