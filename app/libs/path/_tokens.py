"""Tokenizer shared by the JSON and XML path evaluators.

A path is a dot separated list of segments:

    greeting.firstName
    x:response.'x:container'.'x:item'[0].x:name
    items[-1].@id
    foo.bar.text()

Dots inside quotes or brackets do not split.
"""

import re
from dataclasses import dataclass

from .exceptions import PathEvaluationError

FUNCTIONS = frozenset({"text", "size", "name", "children"})

_SEGMENT = re.compile(r"^(?P<head>'[^']*'|\"[^\"]*\"|[^\[\]'\"]*)(?P<indexes>(?:\[-?\d+\])*)$")
_INDEX = re.compile(r"\[(-?\d+)\]")


@dataclass(frozen=True)
class Step:
    kind: str  # "key", "attribute", "function" or "index"
    name: str = ""
    quoted: bool = False
    indexes: tuple[int, ...] = ()


def parse_path(path: str) -> list[Step]:
    path = path.strip()
    if path in ("", "$"):
        return []
    return [_parse_segment(segment, path) for segment in _split(path)]


def _split(path: str) -> list[str]:
    segments: list[str] = []
    buf: list[str] = []
    quote: str | None = None
    depth = 0
    for ch in path:
        if quote:
            if ch == quote:
                quote = None
        elif ch in "'\"":
            quote = ch
        elif ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
        elif ch == "." and depth == 0:
            segments.append("".join(buf))
            buf = []
            continue
        buf.append(ch)
    if quote or depth:
        raise PathEvaluationError(f"Unbalanced quotes or brackets in path '{path}'.")
    segments.append("".join(buf))
    return segments


def _parse_segment(segment: str, path: str) -> Step:
    match = _SEGMENT.match(segment.strip())
    if not match:
        raise PathEvaluationError(f"Invalid segment '{segment}' in path '{path}'.")
    head = match.group("head")
    indexes = tuple(int(i) for i in _INDEX.findall(match.group("indexes")))

    if head[:1] in ("'", '"'):
        return Step(kind="key", name=head[1:-1], quoted=True, indexes=indexes)
    if head.startswith("@"):
        return Step(kind="attribute", name=head[1:], indexes=indexes)
    if head.endswith("()"):
        name = head[:-2]
        if name not in FUNCTIONS:
            raise PathEvaluationError(f"Unknown function '{head}' in path '{path}'.")
        return Step(kind="function", name=name, indexes=indexes)
    if head:
        return Step(kind="key", name=head, indexes=indexes)
    if indexes:
        return Step(kind="index", indexes=indexes)
    raise PathEvaluationError(f"Empty segment in path '{path}'.")


def pick(values, indexes: tuple[int, ...]):
    """Apply ``[n]`` selectors; out of range gives ``None``."""
    for index in indexes:
        if not isinstance(values, (list, str)):
            return None
        try:
            values = values[index]
        except IndexError:
            return None
    return values
