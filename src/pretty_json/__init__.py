"""pretty-json package root."""

from pretty_json.document import load_document, parse_document
from pretty_json.json_types import NumberLiteral
from pretty_json.layout import pretty_text, write_pretty

__all__ = [
    "__version__",
    "NumberLiteral",
    "load_document",
    "parse_document",
    "pretty_text",
    "write_pretty",
]

__version__ = "0.1.0"
