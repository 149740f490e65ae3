"""Event model for route discovery and resolution.

All events are frozen dataclasses with:
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

Thread Safety:
    All events are frozen (immutable) and safe to share across threads.

"""

import time
from dataclasses import dataclass
from typing import Literal


# ---------------------------------------------------------------------------
# Discovery events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class RoutesDiscovered:
    """The routes directory was scanned and the index populated.

    Attributes:
        routes_dir: Absolute path to the scanned directory.
        file_count: Number of route files found.
        duration_ms: Time spent scanning in milliseconds.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    routes_dir: str
    file_count: int
    duration_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class RouteIndexChanged:
    """A route file was added to or removed from the index.

    Attributes:
        path: Absolute path to the route file.
        kind: Whether the entry was added or removed.
        route_key: Route key of the entry.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    kind: Literal["added", "removed"]
    route_key: str
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Resolution events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class RoutesResolved:
    """A full resolution (build -> normalize -> generate) completed.

    Attributes:
        schema_variant: Output schema that was generated.
        route_count: Number of route entries in the snapshot.
        import_count: Number of import declarations emitted.
        duration_ms: Time taken in milliseconds.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    schema_variant: int
    route_count: int
    import_count: int
    duration_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class RouteCollision:
    """Two route files resolved to the same route node; the later one won.

    Attributes:
        name: Accumulated route name shared by both files.
        path: Component file that was kept.
        replaced: Component file that was overwritten.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    name: str
    path: str
    replaced: str
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

type RouteEvent = (
    RoutesDiscovered
    | RouteIndexChanged
    | RoutesResolved
    | RouteCollision
)


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
