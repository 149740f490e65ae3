"""ES module generation for normalized route trees.

A single printer walk renders the tree in ``JSON.stringify(value, null, 2)``
layout.  ``ComponentRef`` leaves are printed as expressions over generated
import identifiers; every distinct file gets exactly one import, numbered
in first-seen order (``route0``, ``route1``, ...).
"""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from fsroutes._errors import GenerationError
from fsroutes.resolver.normalize import ComponentRef

_INDENT = "  "

# Imports appended after the component imports
REACT_IMPORT = 'import React from "react"'


@dataclass(frozen=True, slots=True)
class GeneratedModule:
    """Result of code generation.

    Attributes:
        code: Complete module text.
        imports: Component file paths, in import order.

    """

    code: str
    imports: tuple[str, ...]


def identifier_expr(identifier: str) -> str:
    """Reference a component by its import binding (v5 ``component``)."""
    return identifier


def element_expr(identifier: str) -> str:
    """Instantiate a component as an element (v6 ``element``)."""
    return f"React.createElement({identifier})"


def generate(
    routes: Sequence[object],
    *,
    component_expr: Callable[[str], str] = identifier_expr,
    extra_imports: Sequence[str] = (REACT_IMPORT,),
) -> GeneratedModule:
    """Render *routes* as a module exporting them as ``default``.

    Raises:
        GenerationError: If the tree holds a value that cannot be printed
            or refers back to itself.

    """
    printer = _Printer(component_expr)
    body = printer.render(list(routes))

    imports = [
        f"import {identifier} from {json.dumps(path, ensure_ascii=False)}"
        for path, identifier in printer.identifiers.items()
    ]
    imports.extend(extra_imports)

    header = ";\n".join(imports) + ";\n\n" if imports else ""
    code = f"{header}const routes = {body};\n\nexport default routes;\n"
    return GeneratedModule(code=code, imports=tuple(printer.identifiers))


class _Printer:
    """Walks a normalized tree once, emitting text and collecting imports."""

    __slots__ = ("_active", "_component_expr", "identifiers")

    def __init__(self, component_expr: Callable[[str], str]) -> None:
        self._component_expr = component_expr
        self._active: set[int] = set()
        self.identifiers: dict[str, str] = {}

    def render(self, value: object, depth: int = 0) -> str:
        if isinstance(value, ComponentRef):
            return self._component_expr(self._identifier(value.file_path))
        if value is None:
            return "null"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, str):
            return json.dumps(value, ensure_ascii=False)
        if isinstance(value, int | float):
            try:
                return json.dumps(value, allow_nan=False)
            except ValueError as exc:
                msg = f"Cannot serialize non-finite number {value!r}"
                raise GenerationError(msg) from exc
        if isinstance(value, list | tuple):
            return self._container(value, depth, "[", "]", self._list_items)
        if isinstance(value, dict):
            return self._container(value, depth, "{", "}", self._dict_items)
        msg = f"Cannot serialize value of type {type(value).__name__}"
        raise GenerationError(msg)

    def _identifier(self, path: str) -> str:
        identifier = self.identifiers.get(path)
        if identifier is None:
            identifier = f"route{len(self.identifiers)}"
            self.identifiers[path] = identifier
        return identifier

    def _container(
        self,
        value: list[object] | tuple[object, ...] | dict[object, object],
        depth: int,
        open_: str,
        close: str,
        items: Callable[..., list[str]],
    ) -> str:
        if id(value) in self._active:
            msg = "Cannot serialize cyclic route structure"
            raise GenerationError(msg)
        if not value:
            return open_ + close

        self._active.add(id(value))
        try:
            rendered = items(value, depth + 1)
        finally:
            self._active.discard(id(value))

        indent = _INDENT * (depth + 1)
        body = ",\n".join(indent + item for item in rendered)
        return f"{open_}\n{body}\n{_INDENT * depth}{close}"

    def _list_items(self, value: list[object] | tuple[object, ...], depth: int) -> list[str]:
        return [self.render(item, depth) for item in value]

    def _dict_items(self, value: dict[object, object], depth: int) -> list[str]:
        rendered: list[str] = []
        for key, item in value.items():
            if not isinstance(key, str):
                msg = f"Route object keys must be strings, got {type(key).__name__}"
                raise GenerationError(msg)
            rendered.append(f"{json.dumps(key, ensure_ascii=False)}: {self.render(item, depth)}")
        return rendered
