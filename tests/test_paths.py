from __future__ import annotations

from pathlib import Path

import pytest

from pretty_json.paths import pretty_output_path, resolve_output_target


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("data.json", "data-pretty.json"),
        ("foo.bar.json", "foo.bar-pretty.json"),
        ("foo", "foo-pretty"),
        ("dir/sub/data.txt", "dir/sub/data-pretty.txt"),
    ],
)
def test_pretty_output_path(source: str, expected: str) -> None:
    assert pretty_output_path(Path(source)) == Path(expected)


def test_resolve_output_target() -> None:
    source = Path("in/data.json")
    assert resolve_output_target(source, None) == Path("in/data-pretty.json")
    assert resolve_output_target(source, "out.json") == Path("out.json")
    assert resolve_output_target(source, "-") == "-"
