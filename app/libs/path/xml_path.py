"""Namespace aware path lookups over an XML document.

The first segment addresses the root element. Element names resolve as:

- ``bar`` matches ``bar`` in any namespace
- ``:bar`` matches ``bar`` only when it has no namespace
- ``ns:bar`` matches ``bar`` in the namespace declared for ``ns`` through
  :class:`XmlPathConfig`; an undeclared prefix matches nothing
- ``'ns:bar'`` is the quoted form of ``ns:bar``

Selecting nodes yields their text, e.g. ``foo.bar.text()`` concatenates the
text of every ``bar`` below ``foo``.
"""

import copy
from typing import Any

from lxml import etree

from ._tokens import Step, parse_path, pick
from .config import XmlPathConfig
from .exceptions import PathEvaluationError


class XmlPath:
    def __init__(self, document: str | bytes, config: XmlPathConfig | None = None):
        if isinstance(document, str):
            document = document.encode("utf-8")
        parser = etree.XMLParser(resolve_entities=False, no_network=True)
        try:
            self._root = etree.fromstring(document, parser)
        except etree.XMLSyntaxError as e:
            raise PathEvaluationError(f"Failed to parse the XML document: {e}") from e
        self._config = config or XmlPathConfig()

    @property
    def config(self) -> XmlPathConfig:
        return self._config

    def using(self, config: XmlPathConfig) -> "XmlPath":
        clone = copy.copy(self)
        clone._config = config
        return clone

    def get(self, path: str = "") -> Any:
        result = self._evaluate(path)
        if not isinstance(result, list):
            return result
        texts = [_value(item) for item in result]
        if not texts:
            return None
        return texts[0] if len(texts) == 1 else texts

    def get_string(self, path: str = "") -> str:
        result = self._evaluate(path)
        if result is None:
            return ""
        if isinstance(result, list):
            return "".join(_value(item) for item in result)
        return str(result)

    def get_int(self, path: str) -> int | None:
        value = self.get_string(path)
        return int(value) if value else None

    def get_list(self, path: str) -> list[Any]:
        result = self._evaluate(path)
        if result is None:
            return []
        if isinstance(result, list):
            return [_value(item) for item in result]
        return [result]

    def get_attributes(self, path: str) -> dict[str, str]:
        result = self._evaluate(path)
        if not isinstance(result, list) or not result or not isinstance(result[0], etree._Element):
            return {}
        return dict(result[0].attrib)

    def _evaluate(self, path: str) -> Any:
        steps = parse_path(path)
        if not steps:
            return [self._root]

        first, rest = steps[0], steps[1:]
        if first.kind != "key":
            raise PathEvaluationError(f"Path '{path}' must start with the root element name.")
        current: Any = pick([self._root] if self._matches(self._root, first) else [], first.indexes)
        current = _as_nodes(current)

        for position, step in enumerate(rest):
            if not isinstance(current, list):
                raise PathEvaluationError(f"'{step.name}' cannot follow a value in path '{path}'.")
            current = self._apply(current, step, path)
            if step.kind in ("attribute", "function") and step.name != "children":
                if position != len(rest) - 1:
                    raise PathEvaluationError(
                        f"'{step.name}' must be the last segment of path '{path}'."
                    )
        return current

    def _apply(self, nodes: list, step: Step, path: str) -> Any:
        if step.kind == "key":
            matched = [child for node in nodes for child in _children(node) if self._matches(child, step)]
            return _as_nodes(pick(matched, step.indexes))
        if step.kind == "index":
            return _as_nodes(pick(nodes, step.indexes))
        if step.kind == "attribute":
            values = [node.get(step.name) for node in nodes if step.name in node.attrib]
            return _collapse(values)
        if step.name == "text":
            return "".join(_text(node) for node in nodes)
        if step.name == "size":
            return len(nodes)
        if step.name == "name":
            return _collapse([etree.QName(node).localname for node in nodes])
        if step.name == "children":
            return _as_nodes(pick([child for node in nodes for child in _children(node)], step.indexes))
        raise PathEvaluationError(f"'{step.name}()' is not supported in XML path '{path}'.")

    def _matches(self, element, step: Step) -> bool:
        qname = etree.QName(element)
        prefix, colon, local = step.name.rpartition(":")
        if local not in ("*", qname.localname):
            return False
        if not colon:
            return True
        if prefix == "":
            return qname.namespace is None
        uri = self._config.declared_namespaces.get(prefix)
        return uri is not None and qname.namespace == uri


def _children(node) -> list:
    return [child for child in node if isinstance(child.tag, str)]


def _text(node) -> str:
    return etree.tostring(node, method="text", encoding="unicode", with_tail=False)


def _value(item: Any) -> Any:
    if isinstance(item, etree._Element):
        return _text(item)
    return item


def _as_nodes(value: Any) -> list:
    if value is None:
        return []
    return value if isinstance(value, list) else [value]


def _collapse(values: list) -> Any:
    if not values:
        return None
    return values[0] if len(values) == 1 else values
