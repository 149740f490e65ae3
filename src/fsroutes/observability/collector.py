"""Route collector: typed helpers for recording fsroutes events.

Thread Safety:
    The collector delegates to ``EventLog`` which is internally locked.
    Safe to share between the watcher thread and resolution callers.

"""

from __future__ import annotations

from typing import Literal

from fsroutes.observability.events import (
    RouteCollision,
    RouteIndexChanged,
    RoutesDiscovered,
    RoutesResolved,
    now_ns,
)
from fsroutes.observability.log import EventLog


class RouteCollector:
    """Records discovery, index and resolution events into an EventLog.

    Args:
        log: The EventLog to store events in (a fresh one by default).

    """

    __slots__ = ("_log",)

    def __init__(self, log: EventLog | None = None) -> None:
        self._log = log if log is not None else EventLog()

    @property
    def log(self) -> EventLog:
        """The underlying event log."""
        return self._log

    # ----- Discovery -----

    def record_discovery(
        self,
        routes_dir: str,
        *,
        file_count: int,
        duration_ms: float = 0.0,
    ) -> None:
        """Record a full scan of the routes directory."""
        self._log.append(
            RoutesDiscovered(
                routes_dir=routes_dir,
                file_count=file_count,
                duration_ms=duration_ms,
                timestamp_ns=now_ns(),
            )
        )

    def record_index_change(
        self,
        path: str,
        kind: Literal["added", "removed"],
        route_key: str,
    ) -> None:
        """Record a single add/remove applied to the route index."""
        self._log.append(
            RouteIndexChanged(
                path=path,
                kind=kind,
                route_key=route_key,
                timestamp_ns=now_ns(),
            )
        )

    # ----- Resolution -----

    def record_resolution(
        self,
        schema_variant: int,
        *,
        route_count: int,
        import_count: int,
        duration_ms: float = 0.0,
    ) -> None:
        """Record a completed resolution."""
        self._log.append(
            RoutesResolved(
                schema_variant=schema_variant,
                route_count=route_count,
                import_count=import_count,
                duration_ms=duration_ms,
                timestamp_ns=now_ns(),
            )
        )

    def record_collision(self, name: str, path: str, replaced: str) -> None:
        """Record a later route file overwriting an earlier one."""
        self._log.append(
            RouteCollision(
                name=name,
                path=path,
                replaced=replaced,
                timestamp_ns=now_ns(),
            )
        )
