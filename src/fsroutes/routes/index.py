"""Route index: absolute file path -> route key.

The index is the only mutable state shared between the dev-mode watcher
thread and resolution.  Mutations are single dict operations under a lock,
and resolution works on ``snapshot()``, an immutable copy, so a build never
observes a half-applied change.

Thread Safety:
    All methods are protected by a ``threading.Lock``.

"""

import threading
from dataclasses import dataclass
from pathlib import Path

from fsroutes._errors import DiscoveryError


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """A route file and its route key.

    Attributes:
        file_path: Absolute path to the component file.
        route_key: Extension-stripped POSIX path relative to the routes
            directory (e.g. ``blog/[slug]``).

    """

    file_path: str
    route_key: str


def route_key_for(file_path: str | Path, routes_dir: Path) -> str:
    """Derive the route key of *file_path*.

    ``<routes_dir>/index.tsx``       -> ``index``
    ``<routes_dir>/blog/[slug].tsx`` -> ``blog/[slug]``

    Raises:
        DiscoveryError: If *file_path* is not inside *routes_dir*.

    """
    try:
        relative = Path(file_path).relative_to(routes_dir)
    except ValueError as exc:
        msg = f"Route file {file_path} is outside the routes directory {routes_dir}"
        raise DiscoveryError(msg) from exc
    return relative.with_suffix("").as_posix()


class RouteIndex:
    """Mapping of route files to route keys, keyed by absolute file path.

    Re-adding a file overwrites its entry; insertion order is kept so
    snapshots are stable for an unchanged index.

    Args:
        routes_dir: Directory route keys are computed relative to.

    """

    __slots__ = ("_entries", "_lock", "_routes_dir")

    def __init__(self, routes_dir: Path) -> None:
        self._routes_dir = routes_dir
        self._entries: dict[str, RouteEntry] = {}
        self._lock = threading.Lock()

    @property
    def routes_dir(self) -> Path:
        return self._routes_dir

    def add(self, file_path: str | Path) -> RouteEntry:
        """Insert or overwrite the entry for *file_path*."""
        entry = RouteEntry(
            file_path=str(file_path),
            route_key=route_key_for(file_path, self._routes_dir),
        )
        self.set(entry)
        return entry

    def set(self, entry: RouteEntry) -> None:
        """Store a precomputed entry."""
        with self._lock:
            self._entries[entry.file_path] = entry

    def remove(self, file_path: str | Path) -> RouteEntry | None:
        """Delete the entry for *file_path*; return it, or None if absent."""
        with self._lock:
            return self._entries.pop(str(file_path), None)

    def get(self, file_path: str | Path) -> RouteEntry | None:
        with self._lock:
            return self._entries.get(str(file_path))

    def snapshot(self) -> tuple[RouteEntry, ...]:
        """Immutable copy of all entries in insertion order."""
        with self._lock:
            return tuple(self._entries.values())

    def clear(self) -> int:
        """Drop all entries and return how many there were."""
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
            return count

    def __contains__(self, file_path: object) -> bool:
        with self._lock:
            return str(file_path) in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
