from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import NoReturn

from pretty_json.exceptions import FileOpenError, ParseError
from pretty_json.json_types import JSONValue, NumberLiteral

log = logging.getLogger(__name__)

MAX_DEPTH = 128


def _reject_constant(name: str) -> NoReturn:
    # json accepts NaN/Infinity/-Infinity; RFC 8259 does not.
    raise ValueError(f"Invalid JSON literal: {name}")


def nesting_depth(value: JSONValue) -> int:
    """Deepest array/object nesting; scalars are depth 0."""
    deepest = 0
    stack: list[tuple[JSONValue, int]] = [(value, 0)]
    while stack:
        node, depth = stack.pop()
        if isinstance(node, dict):
            children = node.values()
        elif isinstance(node, list):
            children = node
        else:
            continue
        depth += 1
        deepest = max(deepest, depth)
        stack.extend((child, depth) for child in children)
    return deepest


def parse_document(text: str, *, max_depth: int = MAX_DEPTH) -> JSONValue:
    """Decode JSON text, keeping every number's original spelling."""
    try:
        value = json.loads(
            text,
            parse_int=NumberLiteral,
            parse_float=NumberLiteral,
            parse_constant=_reject_constant,
        )
    except ValueError as exc:
        raise ParseError(str(exc)) from exc
    except RecursionError as exc:
        raise ParseError(f"Recursion limit exceeded (max depth {max_depth})") from exc
    depth = nesting_depth(value)
    if depth > max_depth:
        raise ParseError(f"Recursion limit exceeded: depth {depth} > max depth {max_depth}")
    return value


def load_document(path: Path, *, encoding: str = "utf-8") -> JSONValue:
    log.info("Reading %s", path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise FileOpenError(path, exc.strerror or str(exc)) from exc
    try:
        text = raw.decode(encoding)
    except UnicodeDecodeError as exc:
        raise ParseError(f"{path}: {exc}") from exc
    log.debug("Decoding %d bytes", len(raw))
    return parse_document(text)
