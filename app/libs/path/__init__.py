"""Body path evaluators."""

from .config import XmlPathConfig
from .exceptions import PathEvaluationError
from .json_path import JsonPath
from .xml_path import XmlPath

__all__ = [
    "JsonPath",
    "XmlPath",
    "XmlPathConfig",
    "PathEvaluationError",
]
