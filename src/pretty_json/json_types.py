"""JSON value types consumed by the layout engine.

Numbers decoded from a document are carried as `NumberLiteral` so the
renderer can emit the exact text the decoder saw. Plain `int`/`float`
values are still accepted for in-memory data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class NumberLiteral:
    text: str

    @property
    def is_integer(self) -> bool:
        return not any(marker in self.text for marker in ".eE")

    def to_python(self) -> int | float:
        if self.is_integer:
            return int(self.text)
        return float(self.text)

    def __str__(self) -> str:
        return self.text


JSONScalar: TypeAlias = str | int | float | bool | None | NumberLiteral
JSONValue: TypeAlias = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]
JSONObject: TypeAlias = dict[str, JSONValue]
JSONArray: TypeAlias = list[JSONValue]
