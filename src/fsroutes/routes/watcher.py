"""Route watcher: keeps the route index in sync with the routes directory.

Only file creation and deletion matter; editing a component changes
nothing about the route tree.  After a batch of changes that touched the
index, the ``on_change`` callback runs so the owner can regenerate or
invalidate the generated module.
"""

from __future__ import annotations

import sys
import threading
from pathlib import Path
from typing import TYPE_CHECKING

from watchfiles import Change

from fsroutes.routes.discovery import has_route_extension, is_ignored

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fsroutes._types import ChangeCallback
    from fsroutes.config import FsRoutesConfig
    from fsroutes.observability.collector import RouteCollector
    from fsroutes.routes.index import RouteIndex


def is_route_file(path: Path, config: FsRoutesConfig) -> bool:
    """Whether *path* is a route file under the configured routes directory."""
    try:
        relative = path.relative_to(config.routes_path)
    except ValueError:
        return False
    if not relative.parts or is_ignored(relative):
        return False
    return has_route_extension(path, config.route_extensions)


class RouteWatcher:
    """Watches the routes directory and applies add/delete events to an index.

    Uses watchfiles in a background daemon thread, the same way the
    content watcher of a dev server does.

    """

    def __init__(
        self,
        config: FsRoutesConfig,
        index: RouteIndex,
        on_change: ChangeCallback | None = None,
        collector: RouteCollector | None = None,
    ) -> None:
        self._config = config
        self._index = index
        self._on_change = on_change
        self._collector = collector
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def is_running(self) -> bool:
        """Whether the watcher background thread is active."""
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start watching in a background thread."""
        if self.is_running:
            return

        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._watch_loop,
            name="fsroutes-watcher",
            daemon=True,
        )
        self._thread.start()

    def stop(self) -> None:
        """Signal the watcher to stop and wait for the thread to finish."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout=5.0)
            self._thread = None

    def apply_changes(self, raw_changes: Iterable[tuple[Change, str]]) -> bool:
        """Apply one batch of watchfiles changes to the index.

        Returns True if the index was modified.
        """
        changed = False
        for change_type, path_str in raw_changes:
            path = Path(path_str)
            if not is_route_file(path, self._config):
                continue

            if change_type == Change.added:
                entry = self._index.add(path)
                changed = True
                if self._collector is not None:
                    self._collector.record_index_change(entry.file_path, "added", entry.route_key)
            elif change_type == Change.deleted:
                entry = self._index.remove(path)
                if entry is None:
                    continue
                changed = True
                if self._collector is not None:
                    self._collector.record_index_change(entry.file_path, "removed", entry.route_key)
        return changed

    def _watch_loop(self) -> None:
        """Background thread: run watchfiles and apply events to the index."""
        from watchfiles import watch

        for raw_changes in watch(
            self._config.routes_path,
            stop_event=self._stop_event,
            debounce=300,
            step=100,
        ):
            if not self.apply_changes(raw_changes) or self._on_change is None:
                continue
            try:
                self._on_change()
            except Exception as exc:
                # Keep watching; the next change retries the regeneration
                print(f"  Route regeneration error: {exc}", file=sys.stderr)
