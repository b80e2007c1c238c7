from __future__ import annotations

from pathlib import Path

import pytest

from pretty_json.document import MAX_DEPTH, load_document, nesting_depth, parse_document
from pretty_json.exceptions import FileOpenError, ParseError
from pretty_json.json_types import NumberLiteral


def test_numbers_keep_their_text() -> None:
    value = parse_document('{"i": 10, "f": 1.500, "e": 2E-3}')
    assert value == {
        "i": NumberLiteral("10"),
        "f": NumberLiteral("1.500"),
        "e": NumberLiteral("2E-3"),
    }
    assert value["i"].to_python() == 10
    assert value["f"].to_python() == 1.5
    assert value["e"].is_integer is False


def test_object_order_is_insertion_order() -> None:
    value = parse_document('{"b": 1, "a": 2}')
    assert list(value) == ["b", "a"]


@pytest.mark.parametrize("text", ["NaN", "[Infinity]", '{"x": -Infinity}'])
def test_non_standard_constants_are_rejected(text: str) -> None:
    with pytest.raises(ParseError, match="Invalid JSON literal"):
        parse_document(text)


def test_malformed_json_carries_decoder_message() -> None:
    with pytest.raises(ParseError) as exc:
        parse_document('{"a": 1,}')
    assert "line 1" in str(exc.value)
    assert exc.value.__cause__ is not None


def test_trailing_commas_and_comments_are_not_tolerated() -> None:
    with pytest.raises(ParseError):
        parse_document("[1, 2,]")
    with pytest.raises(ParseError):
        parse_document("// note\n[1]")


def test_load_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "nope.json"
    with pytest.raises(FileOpenError) as exc:
        load_document(missing)
    assert exc.value.path == missing
    assert str(missing) in str(exc.value)


def test_load_rejects_bom(write_json) -> None:
    path = write_json("bom.json", "\ufeff[1]")
    with pytest.raises(ParseError, match="BOM"):
        load_document(path)


def test_load_rejects_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "latin.json"
    path.write_bytes(b'["\xe9"]')
    with pytest.raises(ParseError):
        load_document(path)


def test_load_reads_document(write_json) -> None:
    path = write_json("ok.json", '{"name": "café", "n": [1, 2]}')
    assert load_document(path) == {
        "name": "café",
        "n": [NumberLiteral("1"), NumberLiteral("2")],
    }


def test_nesting_depth() -> None:
    assert nesting_depth(NumberLiteral("1")) == 0
    assert nesting_depth([]) == 1
    assert nesting_depth({"a": [1, {"b": []}], "c": 2}) == 4


def test_depth_at_limit_is_accepted() -> None:
    text = "[" * MAX_DEPTH + "]" * MAX_DEPTH
    assert nesting_depth(parse_document(text)) == MAX_DEPTH


@pytest.mark.parametrize("depth", [MAX_DEPTH + 1, 600, 100_000])
def test_too_deep_documents_are_rejected(depth: int) -> None:
    with pytest.raises(ParseError, match="Recursion limit exceeded"):
        parse_document("[" * depth + "]" * depth)


def test_too_deep_objects_are_rejected() -> None:
    depth = MAX_DEPTH + 1
    with pytest.raises(ParseError, match="max depth"):
        parse_document('{"a": ' * depth + "1" + "}" * depth)
