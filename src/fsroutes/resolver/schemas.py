"""Output schema strategies.

Each supported schema variant maps to a ``RouteSchema`` bundling the three
resolution stages (build, normalize, component expression).  Selecting a
schema is a dictionary lookup on the variant tag.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from fsroutes._errors import ConfigError
from fsroutes.resolver.codegen import element_expr, identifier_expr
from fsroutes.resolver.normalize import normalize_flat, normalize_nested
from fsroutes.resolver.tree import build_flat_tree, build_nested_tree

if TYPE_CHECKING:
    from fsroutes._types import RouteObject
    from fsroutes.resolver.tree import RouteNode


@dataclass(frozen=True, slots=True)
class RouteSchema:
    """The stages that produce one output schema.

    Attributes:
        variant: Schema tag (react-router major version).
        description: Human-readable label.
        build: Builder producing the internal node tree.
        normalize: Shapes nodes into route objects; receives
            ``case_sensitive``.
        component_expr: Renders an import identifier at a component site.

    """

    variant: int
    description: str
    build: Callable[..., list[RouteNode]]
    normalize: Callable[[list[RouteNode], bool], list[RouteObject]]
    component_expr: Callable[[str], str]


def _normalize_flat(nodes: list[RouteNode], case_sensitive: bool) -> list[RouteObject]:
    return normalize_flat(nodes)


SCHEMAS: dict[int, RouteSchema] = {
    5: RouteSchema(
        variant=5,
        description="react-router v5 (react-router-config)",
        build=build_flat_tree,
        normalize=_normalize_flat,
        component_expr=identifier_expr,
    ),
    6: RouteSchema(
        variant=6,
        description="react-router v6 (useRoutes)",
        build=build_nested_tree,
        normalize=normalize_nested,
        component_expr=element_expr,
    ),
}


def get_schema(variant: int) -> RouteSchema:
    """Look up the schema for *variant*.

    Raises:
        ConfigError: If *variant* is not a supported schema.

    """
    schema = SCHEMAS.get(variant) if isinstance(variant, int) and not isinstance(variant, bool) else None
    if schema is None:
        supported = " or ".join(str(v) for v in SCHEMAS)
        msg = f"schema_variant must be {supported}, got {variant!r}"
        raise ConfigError(msg)
    return schema
