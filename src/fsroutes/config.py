"""fsroutes configuration.

FsRoutesConfig is the central configuration object, frozen after creation.
Validation happens in ``__post_init__`` so an unsupported schema variant
fails before any discovery or resolution work starts.
"""

from dataclasses import dataclass, field
from pathlib import Path

from fsroutes._errors import ConfigError

# Schema variants understood by the resolver (react-router major versions)
SUPPORTED_SCHEMA_VARIANTS: tuple[int, ...] = (5, 6)


@dataclass(frozen=True, slots=True)
class FsRoutesConfig:
    """Configuration for route resolution.

    Attributes:
        root: Project root directory.  Always resolved to an absolute path
              on construction.
        routes_dir: Directory containing route component files, relative to
            *root* (or absolute).
        route_extensions: File suffixes treated as route files.
        is_dev: Watch ``routes_dir`` and regenerate on change.
        case_sensitive: Keep the original casing in rendered route paths.
            Route *names* used for tree merging always fold case.
        schema_variant: ``5`` for the flat-path ``react-router-config`` shape,
            ``6`` for the nested ``useRoutes`` shape.
        output: File the generated module is written to (``None`` = stdout).
        strict_collisions: Raise instead of letting the later file win when
            two route files resolve to the same route node.

    """

    root: Path = field(default_factory=Path.cwd)
    routes_dir: str = "src/pages"
    route_extensions: tuple[str, ...] = (".tsx",)
    is_dev: bool = False
    case_sensitive: bool = False
    schema_variant: int = 5
    output: Path | None = None
    strict_collisions: bool = False

    def __post_init__(self) -> None:
        if self.schema_variant not in SUPPORTED_SCHEMA_VARIANTS:
            msg = (
                f"schema_variant must be 5 or 6, got {self.schema_variant!r}"
            )
            raise ConfigError(msg)

        if not self.root.is_absolute():
            object.__setattr__(self, "root", self.root.resolve())

        if isinstance(self.route_extensions, str):
            extensions: tuple[str, ...] = (self.route_extensions,)
        else:
            extensions = tuple(self.route_extensions)
        if not extensions:
            msg = "route_extensions must name at least one file suffix"
            raise ConfigError(msg)
        object.__setattr__(
            self,
            "route_extensions",
            tuple(ext if ext.startswith(".") else f".{ext}" for ext in extensions),
        )

        if self.output is not None and not isinstance(self.output, Path):
            object.__setattr__(self, "output", Path(str(self.output)))

    @property
    def routes_path(self) -> Path:
        """Absolute path to the routes directory."""
        return self.root / self.routes_dir

    @property
    def output_path(self) -> Path | None:
        """Absolute path to the output file, or None for stdout."""
        if self.output is None:
            return None
        if self.output.is_absolute():
            return self.output
        return self.root / self.output
