"""Shared test fixtures for fsroutes."""

from __future__ import annotations

from pathlib import Path

import pytest

from fsroutes.routes.index import RouteEntry

PAGES = "/app/src/pages"


def make_entries(*route_keys: str, ext: str = ".tsx") -> list[RouteEntry]:
    """Build route entries rooted at a fake ``/app/src/pages`` directory."""
    return [RouteEntry(file_path=f"{PAGES}/{key}{ext}", route_key=key) for key in route_keys]


def page(route_key: str, ext: str = ".tsx") -> str:
    """Absolute file path of *route_key* under the fake pages directory."""
    return f"{PAGES}/{route_key}{ext}"


def write_page(pages_dir: Path, relative: str, content: str = "export default () => null\n") -> Path:
    """Write a route component file and return its path."""
    p = pages_dir / relative
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content)
    return p


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project root with an empty ``src/pages`` directory."""
    (tmp_path / "src" / "pages").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def pages_dir(project: Path) -> Path:
    return project / "src" / "pages"
