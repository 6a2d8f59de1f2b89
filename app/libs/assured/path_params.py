"""Path parameter bookkeeping for a URL template.

A template such as ``/{firstName}/{lastName}`` can be filled two ways:

- by name, ``path_param("firstName", "John")``
- by position, ``get("/{firstName}/{lastName}", "John", "Doe")``

Positional values are bound to the distinct placeholders that are still
undefined at the moment the request starts, in template order. Values left
over once every placeholder is taken keep no name and are reported as
redundant when the template is rendered. A later named assignment replaces
the positional value bound to that name for every occurrence of it.
"""

import re
from collections.abc import Iterable
from typing import Any
from urllib.parse import quote

from .exceptions import PathParamError

PLACEHOLDER_PATTERN = re.compile(r"\{([^{}]+)\}")


class PathParams:
    def __init__(self, template: str = ""):
        self.template = template
        self._named: dict[str, str] = {}
        # (implicit placeholder name or None, value) in supply order
        self._unnamed: list[tuple[str | None, str]] = []

    def copy(self) -> "PathParams":
        clone = PathParams(self.template)
        clone._named = dict(self._named)
        clone._unnamed = list(self._unnamed)
        return clone

    def placeholders(self) -> list[str]:
        return list(dict.fromkeys(PLACEHOLDER_PATTERN.findall(self.template)))

    def undefined_placeholders(self) -> list[str]:
        bound = set(self._named) | {name for name, _ in self._unnamed if name is not None}
        return [name for name in self.placeholders() if name not in bound]

    def named(self) -> dict[str, str]:
        return dict(self._named)

    def unnamed(self) -> dict[str, str]:
        return {name: value for name, value in self._unnamed if name is not None}

    def unnamed_values(self) -> list[str]:
        return [value for _, value in self._unnamed]

    def merged(self) -> dict[str, str]:
        return {**self.unnamed(), **self._named}

    def set_named(self, name: str, value: Any) -> None:
        self._unnamed = [(bound, v) for bound, v in self._unnamed if bound != name]
        self._named[name] = str(value)

    def bind_unnamed(self, values: Iterable[Any]) -> None:
        free = self.undefined_placeholders()
        for index, value in enumerate(values):
            name = free[index] if index < len(free) else None
            self._unnamed.append((name, str(value)))

    def remove_named(self, name: str) -> None:
        self._named.pop(name, None)

    def remove_unnamed(self, name: str) -> None:
        self._unnamed = [(bound, v) for bound, v in self._unnamed if bound != name]

    def remove_unnamed_by_value(self, value: Any) -> None:
        value = str(value)
        for index, (_, bound_value) in enumerate(self._unnamed):
            if bound_value == value:
                del self._unnamed[index]
                return

    def remove(self, name: str) -> None:
        self.remove_named(name)
        self.remove_unnamed(name)

    def render(self, encode: bool = True) -> str:
        placeholders = self.placeholders()
        redundant = [value for name, value in self._unnamed if name not in placeholders]
        redundant += [f"{name}={value}" for name, value in self._named.items() if name not in placeholders]
        if redundant:
            raise PathParamError.redundant(redundant)

        undefined = self.undefined_placeholders()
        if undefined:
            raise PathParamError.undefined(
                len(placeholders), len(placeholders) - len(undefined), undefined
            )

        values = self.merged()

        def substitute(match: re.Match) -> str:
            value = values[match.group(1)]
            return quote(value, safe="") if encode else value

        return PLACEHOLDER_PATTERN.sub(substitute, self.template)
