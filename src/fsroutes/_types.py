"""Shared type definitions for fsroutes."""

from collections.abc import Callable

# Normalized route object as emitted into the generated module
type RouteObject = dict[str, object]

# Invoked after the route index changed
type ChangeCallback = Callable[[], None]
