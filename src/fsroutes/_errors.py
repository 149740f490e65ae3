"""fsroutes error hierarchy.

All fsroutes-specific errors inherit from FsRoutesError for easy catching.
"""


class FsRoutesError(Exception):
    """Base error for all fsroutes operations."""


class ConfigError(FsRoutesError):
    """Invalid or unsupported configuration."""


class DiscoveryError(FsRoutesError):
    """Error while enumerating route files (read failures, foreign paths)."""


class GenerationError(FsRoutesError):
    """Internal invariant violated while building or printing routes."""


class RouteCollisionError(GenerationError):
    """Two route files resolved to the same route node in strict mode."""
