import json
from typing import Any

from ._tokens import Step, parse_path, pick
from .exceptions import PathEvaluationError


class JsonPath:
    """Dotted path lookups over a JSON document.

    A key applied to a list is applied to every element, so
    ``store.book.title`` yields the titles of all books.
    """

    def __init__(self, document: str | bytes | Any):
        if isinstance(document, (str, bytes, bytearray)):
            try:
                document = json.loads(document)
            except json.JSONDecodeError as e:
                raise PathEvaluationError(f"Failed to parse the JSON document: {e}") from e
        self._document = document

    def get(self, path: str = "") -> Any:
        current = self._document
        for step in parse_path(path):
            current = _apply(current, step, path)
        return current

    def get_string(self, path: str = "") -> str | None:
        value = self.get(path)
        if value is None or isinstance(value, str):
            return value
        return json.dumps(value)

    def get_int(self, path: str) -> int | None:
        value = self.get(path)
        return None if value is None else int(value)

    def get_float(self, path: str) -> float | None:
        value = self.get(path)
        return None if value is None else float(value)

    def get_list(self, path: str = "") -> list[Any]:
        value = self.get(path)
        if value is None:
            return []
        return value if isinstance(value, list) else [value]

    def get_map(self, path: str = "") -> dict[str, Any]:
        value = self.get(path)
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise PathEvaluationError(f"Value at '{path}' is not an object.")
        return value


def _apply(current: Any, step: Step, path: str) -> Any:
    if step.kind == "key":
        return pick(_lookup(current, step.name), step.indexes)
    if step.kind == "index":
        return pick(current, step.indexes)
    if step.kind == "function" and step.name == "size":
        return 0 if current is None else len(current)
    raise PathEvaluationError(f"'{step.name}' is not supported in JSON path '{path}'.")


def _lookup(current: Any, key: str) -> Any:
    if isinstance(current, dict):
        return current.get(key)
    if isinstance(current, list):
        return [_lookup(item, key) for item in current]
    return None
