"""Route-key segment classification.

A route key such as ``blog/[slug]`` is split on ``/`` and each token is
classified:

    about        -> literal
    [slug]       -> dynamic     (matches one path component)
    [...rest]    -> catch-all   (matches the remaining components)
    index        -> index       (matches its parent path exactly)

Each segment carries two normalized spellings.  ``name`` is always
lower-cased and is used only as tree-merge identity.  ``path_name`` is
what ends up in the rendered URL and keeps its casing when
``case_sensitive`` is on.
"""

import re
from dataclasses import dataclass
from enum import StrEnum

_DYNAMIC_RE = re.compile(r"^\[(.+)\]$")

_CATCH_ALL_PREFIX = "..."

# Fixed name of every catch-all segment
CATCH_ALL_NAME = "all"

INDEX_NAME = "index"


class SegmentKind(StrEnum):
    LITERAL = "literal"
    DYNAMIC = "dynamic"
    CATCH_ALL = "catch_all"
    INDEX = "index"


@dataclass(frozen=True, slots=True)
class Segment:
    """One classified ``/``-delimited token of a route key.

    Attributes:
        raw: The token as written on disk.
        kind: Segment classification.
        name: Lower-cased identity used for tree merging.
        path_name: Spelling used in the rendered path.

    """

    raw: str
    kind: SegmentKind
    name: str
    path_name: str

    @property
    def is_index(self) -> bool:
        return self.kind is SegmentKind.INDEX

    @property
    def is_catch_all(self) -> bool:
        return self.kind is SegmentKind.CATCH_ALL


def classify(raw: str, case_sensitive: bool = False) -> Segment:
    """Classify a single route-key segment."""
    match = _DYNAMIC_RE.match(raw)
    if match:
        param = match.group(1)
        if param.startswith(_CATCH_ALL_PREFIX):
            return Segment(raw, SegmentKind.CATCH_ALL, CATCH_ALL_NAME, CATCH_ALL_NAME)
        return Segment(
            raw, SegmentKind.DYNAMIC, param.lower(), _normalize_case(param, case_sensitive),
        )

    text = _normalize_case(raw, case_sensitive)
    if text == INDEX_NAME:
        return Segment(raw, SegmentKind.INDEX, INDEX_NAME, INDEX_NAME)
    return Segment(raw, SegmentKind.LITERAL, raw.lower(), text)


def split_route_key(route_key: str, case_sensitive: bool = False) -> tuple[Segment, ...]:
    """Classify every segment of *route_key*, skipping empty tokens."""
    return tuple(
        classify(token, case_sensitive) for token in route_key.split("/") if token
    )


def _normalize_case(text: str, case_sensitive: bool) -> str:
    return text if case_sensitive else text.lower()
