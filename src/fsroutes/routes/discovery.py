"""Route file discovery.

Scans the routes directory for component files:

    src/pages/index.tsx          -> index
    src/pages/blog/[slug].tsx    -> blog/[slug]
    src/pages/__tests__/x.tsx    -> (ignored)

``node_modules``, ``.git`` and dunder directories (``__tests__``,
``__mocks__``) are skipped.
"""

from __future__ import annotations

import re
import time
from pathlib import Path
from typing import TYPE_CHECKING

from fsroutes._errors import DiscoveryError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fsroutes.observability.collector import RouteCollector
    from fsroutes.routes.index import RouteIndex

_IGNORED_DIRS: frozenset[str] = frozenset({"node_modules", ".git"})

_DUNDER_DIR_RE = re.compile(r"^__.*__$")


def is_ignored(relative: Path) -> bool:
    """Whether any directory of *relative* (a path below routes_dir) is skipped."""
    return any(
        part in _IGNORED_DIRS or _DUNDER_DIR_RE.match(part)
        for part in relative.parts[:-1]
    )


def has_route_extension(path: Path, extensions: Iterable[str]) -> bool:
    return path.suffix in extensions


def discover_route_files(routes_dir: Path, extensions: Iterable[str]) -> tuple[Path, ...]:
    """Return all route files under *routes_dir*, sorted.

    Returns an empty tuple when *routes_dir* does not exist.

    Raises:
        DiscoveryError: If the directory tree cannot be read.  A partial
            listing would silently drop pages, so errors propagate.

    """
    if not routes_dir.is_dir():
        return ()

    suffixes = frozenset(extensions)
    found: list[Path] = []

    def _raise(exc: OSError) -> None:
        msg = f"Failed to read routes directory {exc.filename or routes_dir}: {exc}"
        raise DiscoveryError(msg) from exc

    for dirpath, dirnames, filenames in routes_dir.walk(on_error=_raise):
        # Prune in place so ignored trees are never entered
        dirnames[:] = sorted(
            d for d in dirnames
            if d not in _IGNORED_DIRS and not _DUNDER_DIR_RE.match(d)
        )
        for filename in filenames:
            path = dirpath / filename
            if has_route_extension(path, suffixes):
                found.append(path)

    return tuple(sorted(found))


def populate_index(
    index: RouteIndex,
    extensions: Iterable[str],
    collector: RouteCollector | None = None,
) -> int:
    """Scan ``index.routes_dir`` and add every route file to *index*.

    Returns the number of files found.
    """
    t0 = time.perf_counter()
    files = discover_route_files(index.routes_dir, extensions)
    for path in files:
        index.add(path)

    if collector is not None:
        collector.record_discovery(
            str(index.routes_dir),
            file_count=len(files),
            duration_ms=(time.perf_counter() - t0) * 1000,
        )
    return len(files)
