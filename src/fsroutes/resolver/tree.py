"""Route tree builders.

Turns a flat snapshot of ``RouteEntry`` objects into a forest of
``RouteNode`` objects.  Entries are sorted so ancestors are inserted before
descendants and catch-all routes come last, then each entry is walked
segment by segment.  Nodes are identified by their accumulated name
(``blog-slug``), which folds case, so two keys sharing a directory prefix
attach to the same parent.

Two builders exist, one per output schema:

- ``build_flat_tree`` (react-router v5): every node carries its full path
  (``/blog/:slug``).  A trailing ``index`` marks its directory node as the
  exact-match route, or becomes an exact child of it when the directory
  already has a layout page.
- ``build_nested_tree`` (react-router v6): every node carries only its own
  fragment (``blog``, ``:slug``, ``*``); ``index`` becomes a pathless child.

Both guarantee catch-all nodes sit after every other node in their sibling
list, which is the order a first-match router tries them in.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from fsroutes._errors import RouteCollisionError
from fsroutes.resolver.segments import Segment, SegmentKind, classify, split_route_key

if TYPE_CHECKING:
    from fsroutes.observability.collector import RouteCollector
    from fsroutes.routes.index import RouteEntry


@dataclass(slots=True)
class RouteNode:
    """A node of the builder tree.

    Attributes:
        name: ``-``-joined chain of segment names from the root.
        raw_key: Route key prefix (original spelling) this node stands for.
        path: Accumulated path (flat) or own fragment (nested, ``None`` for
            index nodes).
        component: Absolute path of the component file, set only on nodes
            that terminate a route key.
        is_index: Node resolves an ``index`` segment.
        is_catch_all: Node resolves a catch-all segment.
        children: Child nodes in precedence order.

    """

    name: str
    raw_key: str
    path: str | None = None
    component: str | None = None
    is_index: bool = False
    is_catch_all: bool = False
    children: list[RouteNode] = field(default_factory=list)


def sort_entries(entries: Iterable[RouteEntry]) -> list[RouteEntry]:
    """Order entries parents-first with catch-all routes last.

    The sort is stable, so entries of equal rank keep snapshot order.
    """
    return sorted(entries, key=_sort_key)


def _sort_key(entry: RouteEntry) -> tuple[bool, int]:
    tokens = [t for t in entry.route_key.split("/") if t]
    last_is_catch_all = bool(tokens) and classify(tokens[-1]).is_catch_all
    return (last_is_catch_all, len(tokens))


# ---------------------------------------------------------------------------
# Path fragments
# ---------------------------------------------------------------------------


def flat_fragment(segment: Segment) -> str:
    """Path contribution of *segment* in the flat (v5) schema."""
    if segment.kind is SegmentKind.INDEX:
        return ""
    if segment.kind is SegmentKind.CATCH_ALL:
        return "/(.*)"
    if segment.kind is SegmentKind.DYNAMIC:
        return f"/:{segment.path_name}"
    return f"/{segment.path_name}"


def nested_fragment(segment: Segment) -> str | None:
    """Own path of *segment* in the nested (v6) schema."""
    if segment.kind is SegmentKind.INDEX:
        return None
    if segment.kind is SegmentKind.CATCH_ALL:
        return "*"
    if segment.kind is SegmentKind.DYNAMIC:
        return f":{segment.path_name}"
    return segment.path_name


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def build_flat_tree(
    entries: Iterable[RouteEntry],
    *,
    case_sensitive: bool = False,
    strict: bool = False,
    collector: RouteCollector | None = None,
) -> list[RouteNode]:
    """Build the v5 tree where every node carries its full path."""
    roots: list[RouteNode] = []
    for entry in sort_entries(entries):
        segments = split_route_key(entry.route_key, case_sensitive)
        siblings = roots
        node: RouteNode | None = None
        name = ""
        path = ""
        for i, segment in enumerate(segments):
            is_last = i == len(segments) - 1
            if segment.is_index and node is not None:
                if is_last:
                    _assign_flat_index(node, entry, strict=strict, collector=collector)
                continue

            name = _join_name(name, segment)
            path += flat_fragment(segment)
            node = _find_or_create(
                siblings,
                name,
                raw_key=_raw_prefix(segments, i),
                path=path or "/",
                is_catch_all=segment.is_catch_all,
            )
            if is_last:
                _assign_component(node, entry, strict=strict, collector=collector)
                if segment.is_index:
                    node.is_index = True
            siblings = node.children
    return roots


def build_nested_tree(
    entries: Iterable[RouteEntry],
    *,
    case_sensitive: bool = False,
    strict: bool = False,
    collector: RouteCollector | None = None,
) -> list[RouteNode]:
    """Build the v6 tree where nesting alone encodes the path hierarchy."""
    roots: list[RouteNode] = []
    for entry in sort_entries(entries):
        segments = split_route_key(entry.route_key, case_sensitive)
        siblings = roots
        name = ""
        for i, segment in enumerate(segments):
            name = _join_name(name, segment)
            node = _find_or_create(
                siblings,
                name,
                raw_key=_raw_prefix(segments, i),
                path=nested_fragment(segment),
                is_catch_all=segment.is_catch_all,
            )
            if segment.is_index:
                node.is_index = True
            if i == len(segments) - 1:
                _assign_component(node, entry, strict=strict, collector=collector)
            siblings = node.children
    return roots


def _join_name(name: str, segment: Segment) -> str:
    return f"{name}-{segment.name}" if name else segment.name


def _raw_prefix(segments: tuple[Segment, ...], i: int) -> str:
    return "/".join(s.raw for s in segments[: i + 1])


def _find_or_create(
    siblings: list[RouteNode],
    name: str,
    *,
    raw_key: str,
    path: str | None,
    is_catch_all: bool,
) -> RouteNode:
    """Return the sibling called *name*, creating a placeholder if missing.

    New non-catch-all nodes are inserted ahead of any catch-all sibling.
    """
    for sibling in siblings:
        if sibling.name == name:
            return sibling

    node = RouteNode(name=name, raw_key=raw_key, path=path, is_catch_all=is_catch_all)
    if is_catch_all:
        siblings.append(node)
        return node
    for position, sibling in enumerate(siblings):
        if sibling.is_catch_all:
            siblings.insert(position, node)
            return node
    siblings.append(node)
    return node


def _assign_component(
    node: RouteNode,
    entry: RouteEntry,
    *,
    strict: bool,
    collector: RouteCollector | None,
) -> None:
    """Attach *entry*'s file to *node*; a later file replaces an earlier one."""
    previous = node.component
    if previous is not None and previous != entry.file_path:
        if strict:
            msg = (
                f"Route files {previous} and {entry.file_path} both resolve "
                f"to route {node.name!r}"
            )
            raise RouteCollisionError(msg)
        if collector is not None:
            collector.record_collision(node.name, entry.file_path, previous)
    node.component = entry.file_path


def _assign_flat_index(
    node: RouteNode,
    entry: RouteEntry,
    *,
    strict: bool,
    collector: RouteCollector | None,
) -> None:
    """Attach a trailing ``index`` file below the directory node *node*.

    The index folds into the directory node while that node has no page of
    its own (or is already the index route).  A directory that also has a
    layout page (``blog.tsx`` next to ``blog/index.tsx``) keeps the layout
    and gains an exact ``<name>-index`` child with the same path.
    """
    if node.component is None or node.is_index:
        _assign_component(node, entry, strict=strict, collector=collector)
        node.is_index = True
        return
    child = _find_or_create(
        node.children,
        f"{node.name}-index",
        raw_key=entry.route_key,
        path=node.path,
        is_catch_all=False,
    )
    _assign_component(child, entry, strict=strict, collector=collector)
    child.is_index = True
