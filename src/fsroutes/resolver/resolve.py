"""Full resolution: route index snapshot -> generated module text."""

from __future__ import annotations

import time
from collections.abc import Iterable
from typing import TYPE_CHECKING

from fsroutes.resolver.codegen import GeneratedModule, generate
from fsroutes.resolver.schemas import get_schema

if TYPE_CHECKING:
    from fsroutes.observability.collector import RouteCollector
    from fsroutes.routes.index import RouteEntry


def resolve_module(
    entries: Iterable[RouteEntry],
    *,
    schema_variant: int = 5,
    case_sensitive: bool = False,
    strict: bool = False,
    collector: RouteCollector | None = None,
) -> GeneratedModule:
    """Run build -> normalize -> generate over a snapshot of entries.

    The result depends only on the entries (in order) and the options, so
    resolving an unchanged snapshot twice yields identical text.

    Raises:
        ConfigError: Unsupported *schema_variant*.
        RouteCollisionError: Colliding route files while *strict*.
        GenerationError: The normalized tree could not be printed.

    """
    schema = get_schema(schema_variant)
    snapshot = tuple(entries)
    t0 = time.perf_counter()

    nodes = schema.build(
        snapshot,
        case_sensitive=case_sensitive,
        strict=strict,
        collector=collector,
    )
    routes = schema.normalize(nodes, case_sensitive)
    module = generate(routes, component_expr=schema.component_expr)

    if collector is not None:
        collector.record_resolution(
            schema.variant,
            route_count=len(snapshot),
            import_count=len(module.imports),
            duration_ms=(time.perf_counter() - t0) * 1000,
        )
    return module


def resolve_routes(
    entries: Iterable[RouteEntry],
    *,
    schema_variant: int = 5,
    case_sensitive: bool = False,
    strict: bool = False,
    collector: RouteCollector | None = None,
) -> str:
    """Return the generated module text for *entries*."""
    return resolve_module(
        entries,
        schema_variant=schema_variant,
        case_sensitive=case_sensitive,
        strict=strict,
        collector=collector,
    ).code
