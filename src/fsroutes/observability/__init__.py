"""Observability: events recorded while discovering and resolving routes.

Quick Start:
    >>> from fsroutes.observability import EventLog, RouteCollector
    >>> collector = RouteCollector(EventLog())
    >>> # pass collector to resolve_routes(...) / FsRoutesPlugin(...)
    >>> collector.log.stats()["total"]
    0

"""

from fsroutes.observability.collector import RouteCollector
from fsroutes.observability.events import (
    RouteCollision,
    RouteEvent,
    RouteIndexChanged,
    RoutesDiscovered,
    RoutesResolved,
    now_ns,
)
from fsroutes.observability.log import EventLog

__all__ = [
    "EventLog",
    "RouteCollector",
    "RouteCollision",
    "RouteEvent",
    "RouteIndexChanged",
    "RoutesDiscovered",
    "RoutesResolved",
    "now_ns",
]
