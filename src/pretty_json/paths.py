from __future__ import annotations

from pathlib import Path

PRETTY_SUFFIX = "-pretty"
STDOUT_ALIAS = "-"


def pretty_output_path(source: Path) -> Path:
    """`data.json` -> `data-pretty.json` beside the source.

    Only the final suffix is treated as the extension, so `foo.bar.json`
    becomes `foo.bar-pretty.json` and `foo` becomes `foo-pretty`.
    """
    return source.with_name(f"{source.stem}{PRETTY_SUFFIX}{source.suffix}")


def resolve_output_target(source: Path, output: str | Path | None) -> str | Path:
    if output is None:
        return pretty_output_path(source)
    text = str(output)
    if text == STDOUT_ALIAS:
        return STDOUT_ALIAS
    return Path(text)
