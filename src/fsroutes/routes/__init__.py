"""Route file layer: discovery, the route index, and dev-mode watching.

Public API::

    from fsroutes.routes import RouteIndex, populate_index

    index = RouteIndex(Path("src/pages").resolve())
    populate_index(index, (".tsx",))
    entries = index.snapshot()
"""

from fsroutes.routes.discovery import discover_route_files, populate_index
from fsroutes.routes.index import RouteEntry, RouteIndex, route_key_for
from fsroutes.routes.watcher import RouteWatcher, is_route_file

__all__ = [
    "RouteEntry",
    "RouteIndex",
    "RouteWatcher",
    "discover_route_files",
    "is_route_file",
    "populate_index",
    "route_key_for",
]
