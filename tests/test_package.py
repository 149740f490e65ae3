"""Tests for fsroutes package exports and metadata."""

import tomllib
from pathlib import Path

import pytest

import fsroutes

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


class TestPackageMetadata:
    """Package-level exports and metadata."""

    def test_version_string(self) -> None:
        assert isinstance(fsroutes.__version__, str)
        assert "0.1.0" in fsroutes.__version__

    def test_version_matches_pyproject(self) -> None:
        with PYPROJECT.open("rb") as f:
            project = tomllib.load(f)["project"]
        assert fsroutes.__version__ == project["version"]

    def test_free_threading_declaration(self) -> None:
        assert fsroutes._Py_mod_gil == 0

    def test_all_exports_resolvable(self) -> None:
        for name in fsroutes.__all__:
            assert getattr(fsroutes, name) is not None

    def test_invalid_attribute_raises(self) -> None:
        with pytest.raises(AttributeError, match="no attribute"):
            fsroutes.nonexistent_thing  # type: ignore[attr-defined]  # noqa: B018
