"""Shape builder trees into the route objects a router consumes.

Component files are wrapped in ``ComponentRef`` leaves rather than left as
plain strings, so the code generator can tell them apart from data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fsroutes._types import RouteObject
    from fsroutes.resolver.tree import RouteNode


@dataclass(frozen=True, slots=True)
class ComponentRef:
    """Reference to a component file, printed as an import identifier."""

    file_path: str


def normalize_flat(nodes: list[RouteNode]) -> list[RouteObject]:
    """Produce react-router v5 config objects.

    ``{"path", "component"?, "exact"?, "routes"?}``
    """
    routes: list[RouteObject] = []
    for node in nodes:
        route: RouteObject = {"path": node.path}
        if node.component is not None:
            route["component"] = ComponentRef(node.component)
        if node.is_index:
            route["exact"] = True
        if node.children:
            route["routes"] = normalize_flat(node.children)
        routes.append(route)
    return routes


def normalize_nested(nodes: list[RouteNode], case_sensitive: bool = False) -> list[RouteObject]:
    """Produce react-router v6 route objects.

    ``{"path"?, "element"?, "index"?, "caseSensitive", "children"?}``
    Index routes carry no ``path``.
    """
    routes: list[RouteObject] = []
    for node in nodes:
        route: RouteObject = {}
        if not node.is_index:
            route["path"] = node.path
        if node.component is not None:
            route["element"] = ComponentRef(node.component)
        if node.is_index:
            route["index"] = True
        route["caseSensitive"] = case_sensitive
        if node.children:
            route["children"] = normalize_nested(node.children, case_sensitive)
        routes.append(route)
    return routes
