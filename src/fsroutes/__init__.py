"""fsroutes — file-system routes for react-router.

Turns a pages directory into a route configuration module::

    src/pages/index.tsx          ->  /
    src/pages/blog/index.tsx     ->  /blog        (exact / index route)
    src/pages/blog/[slug].tsx    ->  /blog/:slug
    src/pages/docs/[...all].tsx  ->  /docs/(.*)   (v5)  or  docs/*  (v6)

Quick start::

    import fsroutes

    fsroutes.build("my-app/", output="src/routes.gen.js")
    fsroutes.dev("my-app/", schema_variant=6)

Lower-level pieces::

    from fsroutes import RouteIndex, resolve_routes

    code = resolve_routes(index.snapshot(), schema_variant=6)

Bundler integrations use :class:`FsRoutesPlugin`, which serves the
generated module under the virtual id ``~fs-routes``.
"""

# PEP 703: Declare this module as free-threading safe
_Py_mod_gil = 0

__version__ = "0.1.0.dev0"
__all__ = [
    "FsRoutesConfig",
    "FsRoutesPlugin",
    "RouteIndex",
    "__version__",
    "build",
    "dev",
    "resolve_routes",
]


def __getattr__(name: str) -> object:
    """Lazy imports for the public API.

    Keeps ``import fsroutes`` fast; watchfiles and PyYAML are only loaded
    when something that needs them is accessed.
    """
    if name == "FsRoutesConfig":
        from fsroutes.config import FsRoutesConfig

        return FsRoutesConfig

    if name == "FsRoutesPlugin":
        from fsroutes.plugin import FsRoutesPlugin

        return FsRoutesPlugin

    if name == "RouteIndex":
        from fsroutes.routes.index import RouteIndex

        return RouteIndex

    if name == "resolve_routes":
        from fsroutes.resolver import resolve_routes

        return resolve_routes

    if name == "build":
        from fsroutes.app import build

        return build

    if name == "dev":
        from fsroutes.app import dev

        return dev

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
