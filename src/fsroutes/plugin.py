"""Build-tool plugin exposing the generated routes as a virtual module.

Application code imports the well-known id::

    import routes from "~fs-routes"

The host bundler calls ``resolve_id`` for every import; the routes id is
claimed and mapped to ``~fs-routes.mjs``, whose ``load`` returns the
generated module.  In dev mode a watcher keeps the route index current and
rewrites the importing file after each change so the bundler reloads it.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from fsroutes.resolver import resolve_routes
from fsroutes.routes import RouteIndex, RouteWatcher, populate_index

if TYPE_CHECKING:
    from fsroutes.config import FsRoutesConfig
    from fsroutes.observability.collector import RouteCollector

VIRTUAL_ROUTE_IDS: tuple[str, ...] = ("~fs-routes",)

ESM_EXTENSION = ".mjs"

_RESOLVED_IDS: tuple[str, ...] = tuple(i + ESM_EXTENSION for i in VIRTUAL_ROUTE_IDS)


class FsRoutesPlugin:
    """Virtual-module hooks backed by a route index.

    The config is validated on construction, so an unsupported schema
    variant fails before ``build_start`` does any discovery.

    Args:
        config: Validated fsroutes configuration.
        collector: Optional event collector.

    """

    name = "fs-routes"

    def __init__(self, config: FsRoutesConfig, collector: RouteCollector | None = None) -> None:
        self._config = config
        self._collector = collector
        self._index = RouteIndex(config.routes_path)
        self._watcher: RouteWatcher | None = None
        self._importer: Path | None = None

    @property
    def index(self) -> RouteIndex:
        return self._index

    @property
    def importer(self) -> Path | None:
        """File that first imported the routes module (dev mode only)."""
        return self._importer

    def build_start(self) -> None:
        """Populate the index; start watching when ``is_dev`` is set.

        Raises:
            DiscoveryError: If the routes directory cannot be read.

        """
        self._index.clear()
        populate_index(self._index, self._config.route_extensions, self._collector)
        if self._config.is_dev and self._watcher is None:
            self._watcher = RouteWatcher(
                self._config,
                self._index,
                on_change=self.invalidate,
                collector=self._collector,
            )
            self._watcher.start()

    def resolve_id(self, id: str, importer: str | Path | None = None) -> str | None:  # noqa: A002
        """Claim the virtual routes id; return None for anything else."""
        if id not in VIRTUAL_ROUTE_IDS:
            return None
        if self._config.is_dev and self._importer is None and importer is not None:
            self._importer = Path(importer)
        return id + ESM_EXTENSION

    def load(self, id: str) -> str | None:  # noqa: A002
        """Return the generated routes module for a resolved virtual id."""
        if id not in _RESOLVED_IDS:
            return None
        return self.generate()

    def generate(self) -> str:
        """Resolve the current index snapshot to module text."""
        return resolve_routes(
            self._index.snapshot(),
            schema_variant=self._config.schema_variant,
            case_sensitive=self._config.case_sensitive,
            strict=self._config.strict_collisions,
            collector=self._collector,
        )

    def invalidate(self) -> None:
        """Rewrite the importing file unchanged so the bundler reprocesses it."""
        if self._importer is None or not self._importer.is_file():
            return
        self._importer.write_bytes(self._importer.read_bytes())

    def close(self) -> None:
        """Stop the watcher, if running."""
        if self._watcher is not None:
            self._watcher.stop()
            self._watcher = None
