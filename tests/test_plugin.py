"""Tests for fsroutes.plugin — virtual module hooks."""

from __future__ import annotations

from pathlib import Path

import pytest

from fsroutes._errors import ConfigError
from fsroutes.config import FsRoutesConfig
from fsroutes.plugin import ESM_EXTENSION, VIRTUAL_ROUTE_IDS, FsRoutesPlugin
from tests.conftest import write_page


@pytest.fixture
def plugin(project: Path, pages_dir: Path) -> FsRoutesPlugin:
    write_page(pages_dir, "index.tsx")
    write_page(pages_dir, "blog/[slug].tsx")
    p = FsRoutesPlugin(FsRoutesConfig(root=project))
    p.build_start()
    return p


class TestPluginConstruction:
    """Configuration fails fast."""

    def test_unsupported_variant_fails_before_plugin(self, project: Path) -> None:
        with pytest.raises(ConfigError):
            FsRoutesPlugin(FsRoutesConfig(root=project, schema_variant=4))


class TestResolveId:
    """resolve_id() claims only the virtual routes id."""

    def test_claims_virtual_id(self, plugin: FsRoutesPlugin) -> None:
        assert plugin.resolve_id(VIRTUAL_ROUTE_IDS[0]) == "~fs-routes" + ESM_EXTENSION

    def test_ignores_other_ids(self, plugin: FsRoutesPlugin) -> None:
        assert plugin.resolve_id("react") is None

    def test_importer_not_tracked_outside_dev(self, plugin: FsRoutesPlugin) -> None:
        plugin.resolve_id("~fs-routes", "/app/src/App.tsx")
        assert plugin.importer is None


class TestLoad:
    """load() returns generated code for the resolved id."""

    def test_load_resolved_id(self, plugin: FsRoutesPlugin, pages_dir: Path) -> None:
        code = plugin.load("~fs-routes.mjs")
        assert code is not None
        assert f'from "{pages_dir / "index.tsx"}"' in code
        assert '"path": "/blog/:slug"' in code

    def test_load_unresolved_id(self, plugin: FsRoutesPlugin) -> None:
        assert plugin.load("~fs-routes") is None
        assert plugin.load("./App.tsx") is None

    def test_load_reflects_index_changes(self, plugin: FsRoutesPlugin, pages_dir: Path) -> None:
        plugin.index.add(write_page(pages_dir, "about.tsx"))
        assert '"path": "/about"' in plugin.load("~fs-routes.mjs")

    def test_build_start_rescans(self, plugin: FsRoutesPlugin, pages_dir: Path) -> None:
        (pages_dir / "index.tsx").unlink()
        plugin.build_start()
        assert [e.route_key for e in plugin.index.snapshot()] == ["blog/[slug]"]


class TestDevMode:
    """Importer tracking and invalidation."""

    def test_importer_recorded_once(self, project: Path) -> None:
        plugin = FsRoutesPlugin(FsRoutesConfig(root=project, is_dev=True))
        plugin.resolve_id("~fs-routes", "/app/src/App.tsx")
        plugin.resolve_id("~fs-routes", "/app/src/Other.tsx")
        assert plugin.importer == Path("/app/src/App.tsx")

    def test_invalidate_rewrites_importer(self, project: Path) -> None:
        importer = project / "src" / "App.tsx"
        importer.write_text("import routes from '~fs-routes'\n")
        plugin = FsRoutesPlugin(FsRoutesConfig(root=project, is_dev=True))
        plugin.resolve_id("~fs-routes", importer)
        plugin.invalidate()
        assert importer.read_text() == "import routes from '~fs-routes'\n"

    def test_invalidate_without_importer_is_noop(self, project: Path) -> None:
        FsRoutesPlugin(FsRoutesConfig(root=project, is_dev=True)).invalidate()

    def test_build_start_starts_watcher(self, project: Path) -> None:
        plugin = FsRoutesPlugin(FsRoutesConfig(root=project, is_dev=True))
        plugin.build_start()
        try:
            assert plugin._watcher is not None
            assert plugin._watcher.is_running
        finally:
            plugin.close()
        assert plugin._watcher is None
