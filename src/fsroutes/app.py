"""fsroutes application entry points.

``build`` resolves the routes directory once and writes the generated
module.  ``dev`` does the same and then keeps regenerating it while route
files are added or removed.
"""

import sys
import time
from pathlib import Path

from fsroutes.config import FsRoutesConfig
from fsroutes.config_loader import load_config
from fsroutes.observability import RouteCollector
from fsroutes.resolver import GeneratedModule, resolve_module
from fsroutes.routes import RouteIndex, RouteWatcher, populate_index


def _resolve(config: FsRoutesConfig, index: RouteIndex, collector: RouteCollector) -> GeneratedModule:
    return resolve_module(
        index.snapshot(),
        schema_variant=config.schema_variant,
        case_sensitive=config.case_sensitive,
        strict=config.strict_collisions,
        collector=collector,
    )


def _write_output(config: FsRoutesConfig, code: str) -> None:
    """Write *code* to the configured output file, or stdout."""
    target = config.output_path
    if target is None:
        sys.stdout.write(code)
        sys.stdout.flush()
        return
    target.parent.mkdir(parents=True, exist_ok=True)
    # Skip identical writes so bundlers watching the file do not reload
    if target.is_file() and target.read_text(encoding="utf-8") == code:
        return
    target.write_text(code, encoding="utf-8")


def _print_summary(
    config: FsRoutesConfig,
    route_count: int,
    module: GeneratedModule,
    duration_ms: float,
) -> None:
    """Print a resolution summary to stderr."""
    lines = [
        "",
        "─" * 41,
        f"  Resolved {route_count} route file{'s' if route_count != 1 else ''}"
        f" from {config.routes_path}",
        f"  Schema: react-router v{config.schema_variant}"
        f" ({len(module.imports)} import{'s' if len(module.imports) != 1 else ''})",
    ]
    if config.output_path is not None:
        lines.append(f"  Output: {config.output_path}")
    lines.append(f"  Done in {duration_ms:.0f}ms")

    print("\n".join(lines), file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------


def build(root: str | Path = ".", **kwargs: object) -> str:
    """Resolve all route files once and write the generated module.

    Args:
        root: Project root directory.
        **kwargs: Override FsRoutesConfig fields.

    Returns:
        The generated module text.

    Raises:
        ConfigError: Invalid configuration.
        DiscoveryError: The routes directory could not be read.
        GenerationError: The route tree could not be generated.

    """
    config = load_config(Path(root), **{**kwargs, "is_dev": False})
    collector = RouteCollector()
    t0 = time.perf_counter()

    index = RouteIndex(config.routes_path)
    populate_index(index, config.route_extensions, collector)
    module = _resolve(config, index, collector)
    _write_output(config, module.code)

    _print_summary(config, len(index), module, (time.perf_counter() - t0) * 1000)
    return module.code


def dev(root: str | Path = ".", **kwargs: object) -> None:
    """Resolve routes, then regenerate on every route file add/remove.

    Runs until interrupted (Ctrl+C).

    Args:
        root: Project root directory.
        **kwargs: Override FsRoutesConfig fields.

    """
    config = load_config(Path(root), **{**kwargs, "is_dev": True})
    collector = RouteCollector()

    index = RouteIndex(config.routes_path)
    populate_index(index, config.route_extensions, collector)

    def _regenerate() -> None:
        t0 = time.perf_counter()
        module = _resolve(config, index, collector)
        _write_output(config, module.code)
        _print_summary(config, len(index), module, (time.perf_counter() - t0) * 1000)

    _regenerate()

    watcher = RouteWatcher(config, index, on_change=_regenerate, collector=collector)
    watcher.start()
    print(f"  Watching {config.routes_path} (Ctrl+C to stop)", file=sys.stderr)
    try:
        while watcher.is_running:
            time.sleep(0.5)
    except KeyboardInterrupt:
        pass
    finally:
        watcher.stop()
