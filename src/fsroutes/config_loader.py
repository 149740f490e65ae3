"""Load FsRoutesConfig from fsroutes.yaml / fsroutes.toml / pyproject.toml.

Merges file config with CLI kwargs. CLI overrides file.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

import yaml

from fsroutes._errors import ConfigError
from fsroutes.config import FsRoutesConfig

# Recognised config keys (snake_case field names)
_CONFIG_KEYS: frozenset[str] = frozenset({
    "routes_dir",
    "route_extensions",
    "is_dev",
    "case_sensitive",
    "schema_variant",
    "output",
    "strict_collisions",
})

# camelCase spellings accepted for JS-tooling style config files
_KEY_ALIASES: dict[str, str] = {
    "routesDir": "routes_dir",
    "routeExtensions": "route_extensions",
    "isDev": "is_dev",
    "caseSensitive": "case_sensitive",
    "schemaVariant": "schema_variant",
    "strictCollisions": "strict_collisions",
}


def load_config(root: Path, **overrides: object) -> FsRoutesConfig:
    """Load FsRoutesConfig from root, optionally merging a config file.

    Looks for fsroutes.yaml, fsroutes.yml, fsroutes.toml, then the
    ``[tool.fsroutes]`` table of pyproject.toml.  Overrides whose value is
    ``None`` are ignored so unset CLI flags do not mask file values.

    Raises:
        ConfigError: On unreadable or malformed config files, or on invalid
            values (e.g. an unsupported schema variant).

    """
    file_config = _read_fsroutes_config(root)
    merged = {**file_config, **{k: v for k, v in overrides.items() if v is not None}}
    if "output" in merged and not isinstance(merged["output"], Path):
        merged["output"] = Path(str(merged["output"]))
    if "route_extensions" in merged and isinstance(merged["route_extensions"], list):
        merged["route_extensions"] = tuple(merged["route_extensions"])
    if "schema_variant" in merged:
        merged["schema_variant"] = _coerce_variant(merged["schema_variant"])
    return FsRoutesConfig(root=root, **merged)


def _coerce_variant(value: object) -> object:
    """Accept ``6``, ``"6"`` and ``"v6"`` spellings; leave others for validation."""
    if isinstance(value, str):
        text = value.strip().lower().removeprefix("v")
        if text.isdigit():
            return int(text)
    return value


def _read_fsroutes_config(root: Path) -> dict[str, object]:
    """Read fsroutes config from yaml/toml if present. Returns empty dict otherwise."""
    for name in ("fsroutes.yaml", "fsroutes.yml"):
        path = root / name
        if path.is_file():
            return _parse_yaml(path)
    toml_path = root / "fsroutes.toml"
    if toml_path.is_file():
        return _flatten_section(_parse_toml(toml_path), "fsroutes")
    pyproject = root / "pyproject.toml"
    if pyproject.is_file():
        tool = _parse_toml(pyproject).get("tool")
        if isinstance(tool, dict) and isinstance(tool.get("fsroutes"), dict):
            return _select_keys(tool["fsroutes"])
    return {}


def _parse_yaml(path: Path) -> dict[str, object]:
    """Parse YAML config."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        msg = f"Failed to read config file {path}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(data, dict):
        msg = f"Config file {path} must contain a mapping"
        raise ConfigError(msg)
    return _flatten_section(data, "fsroutes")


def _parse_toml(path: Path) -> dict[str, object]:
    """Parse TOML config."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        msg = f"Failed to read config file {path}: {exc}"
        raise ConfigError(msg) from exc


def _flatten_section(data: dict[str, object], section: str) -> dict[str, object]:
    """Extract ``section.*`` keys and recognised top-level keys."""
    result: dict[str, object] = {}
    nested = data.get(section)
    if isinstance(nested, dict):
        result.update(_select_keys(nested))
    for k, v in _select_keys({k: v for k, v in data.items() if k != section}).items():
        result.setdefault(k, v)
    return result


def _select_keys(data: dict[str, object]) -> dict[str, object]:
    """Keep recognised keys, translating camelCase aliases."""
    result: dict[str, object] = {}
    for k, v in data.items():
        key = _KEY_ALIASES.get(k, k)
        if key in _CONFIG_KEYS:
            result[key] = v
    return result
