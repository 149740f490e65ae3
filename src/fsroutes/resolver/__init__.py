"""Route resolution: route entries -> route tree -> generated module.

Public API::

    from fsroutes.resolver import resolve_routes

    code = resolve_routes(index.snapshot(), schema_variant=6)
"""

from fsroutes.resolver.codegen import GeneratedModule, generate
from fsroutes.resolver.normalize import ComponentRef, normalize_flat, normalize_nested
from fsroutes.resolver.resolve import resolve_module, resolve_routes
from fsroutes.resolver.schemas import SCHEMAS, RouteSchema, get_schema
from fsroutes.resolver.segments import Segment, SegmentKind, classify, split_route_key
from fsroutes.resolver.tree import RouteNode, build_flat_tree, build_nested_tree, sort_entries

__all__ = [
    "SCHEMAS",
    "ComponentRef",
    "GeneratedModule",
    "RouteNode",
    "RouteSchema",
    "Segment",
    "SegmentKind",
    "build_flat_tree",
    "build_nested_tree",
    "classify",
    "generate",
    "get_schema",
    "normalize_flat",
    "normalize_nested",
    "resolve_module",
    "resolve_routes",
    "sort_entries",
    "split_route_key",
]
