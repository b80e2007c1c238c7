"""Dense pretty-printing layout for JSON values.

Arrays are written inline when short and flat, otherwise split into rows
whose width depends on what the array holds. Objects are written one field
per line unless their dotted property path is in the flatten set, in which
case they are written on a single line.

The property path is an immutable string passed down each call, so sibling
branches never observe each other's extensions. Array elements inherit the
path of the field that holds the array.
"""

from __future__ import annotations

import io
import json
import logging
from typing import AbstractSet, Iterator, Mapping, Sequence, TextIO

from pretty_json.exceptions import WriteError
from pretty_json.json_types import JSONValue, NumberLiteral

log = logging.getLogger(__name__)

INDENT = 4
INLINE_ARRAY_LIMIT = 10
SMALL_NESTED_ARRAY_LIMIT = 3

ROW_COMPLEX = 1
ROW_NESTED_ARRAYS = 5
ROW_SCALARS = 10

_SEPARATOR = ", "
_NO_FLATTEN: frozenset[str] = frozenset()


def _is_container(value: JSONValue) -> bool:
    return isinstance(value, (list, tuple, Mapping))


def is_chunkable(items: Sequence[JSONValue]) -> bool:
    """True when an array is laid out in rows rather than on one line."""
    return len(items) > INLINE_ARRAY_LIMIT or any(_is_container(item) for item in items)


def has_complex_element(items: Sequence[JSONValue]) -> bool:
    for item in items:
        if isinstance(item, Mapping):
            return True
        if isinstance(item, (list, tuple)) and len(item) > SMALL_NESTED_ARRAY_LIMIT:
            return True
    return False


def chunk_size(items: Sequence[JSONValue]) -> int:
    """Number of elements per row for a chunkable array.

    - any object, or any nested array longer than three items: one per row
    - otherwise any nested array: five per row
    - otherwise (a long run of scalars): ten per row
    """
    if has_complex_element(items):
        return ROW_COMPLEX
    if any(isinstance(item, (list, tuple)) for item in items):
        return ROW_NESTED_ARRAYS
    return ROW_SCALARS


def extend_path(path: str, key: str) -> str:
    if not path:
        return key
    return f"{path}.{key}"


def flatten_matches(path: str, flatten: AbstractSet[str]) -> bool:
    return path in flatten


def _rows(items: Sequence[JSONValue], size: int) -> Iterator[Sequence[JSONValue]]:
    for start in range(0, len(items), size):
        yield items[start : start + size]


def encode_string(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def encode_scalar(value: JSONValue) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, NumberLiteral):
        return value.text
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return json.dumps(value, allow_nan=False)
    if isinstance(value, str):
        return encode_string(value)
    raise TypeError(
        "pretty-json cannot render value type "
        f"{type(value).__name__}"
    )


def _write_value(
    sink: TextIO,
    value: JSONValue,
    level: int,
    path: str,
    flatten: AbstractSet[str],
) -> None:
    if isinstance(value, Mapping):
        _write_object(sink, value, level, path, flatten)
    elif isinstance(value, (list, tuple)):
        _write_array(sink, value, level, path, flatten)
    else:
        sink.write(encode_scalar(value))


def _write_array(
    sink: TextIO,
    items: Sequence[JSONValue],
    level: int,
    path: str,
    flatten: AbstractSet[str],
) -> None:
    last = len(items) - 1
    if not is_chunkable(items):
        sink.write("[")
        for idx, item in enumerate(items):
            _write_value(sink, item, level + 1, path, flatten)
            if idx < last:
                sink.write(_SEPARATOR)
        sink.write("]")
        return

    field_padding = " " * ((level + 1) * INDENT)
    sink.write("[\n")
    # Commas follow the running index over the whole array, not the row.
    idx = 0
    for row in _rows(items, chunk_size(items)):
        sink.write(field_padding)
        for item in row:
            _write_value(sink, item, level + 1, path, flatten)
            if idx < last:
                sink.write(_SEPARATOR)
            idx += 1
        sink.write("\n")
    sink.write(" " * (level * INDENT))
    sink.write("]")


def _write_object(
    sink: TextIO,
    fields: Mapping[str, JSONValue],
    level: int,
    path: str,
    flatten: AbstractSet[str],
) -> None:
    flat = flatten_matches(path, flatten)
    if flat:
        log.debug("Flattening object at %r", path)
    last = len(fields) - 1
    field_padding = " " * ((level + 1) * INDENT)

    sink.write("{ " if flat else "{\n")
    for idx, (key, value) in enumerate(fields.items()):
        if not flat:
            sink.write(field_padding)
        sink.write(encode_string(key))
        sink.write(": ")
        _write_value(sink, value, level + 1, extend_path(path, key), flatten)
        if idx < last:
            sink.write(_SEPARATOR)
        if not flat:
            sink.write("\n")
    if flat:
        sink.write(" }")
    else:
        sink.write(" " * (level * INDENT))
        sink.write("}")


def write_pretty(
    sink: TextIO,
    value: JSONValue,
    *,
    level: int = 0,
    path: str = "",
    flatten: AbstractSet[str] = _NO_FLATTEN,
) -> None:
    """Render `value` to `sink`.

    `flatten` holds dotted property paths whose objects are written on a
    single line. Matching is exact string equality against the path built
    from object keys; array indices never appear in a path. An `OSError`
    from the sink aborts the render and is raised as `WriteError`.
    """
    try:
        _write_value(sink, value, level, path, flatten)
    except OSError as exc:
        raise WriteError(str(exc)) from exc


def pretty_text(value: JSONValue, *, flatten: AbstractSet[str] = _NO_FLATTEN) -> str:
    buffer = io.StringIO()
    write_pretty(buffer, value, flatten=flatten)
    return buffer.getvalue()
