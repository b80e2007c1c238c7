from __future__ import annotations

import logging
from pathlib import Path
from typing import AbstractSet, List, Optional

import typer

from pretty_json import __version__
from pretty_json.config import format_defaults, resolve_flatten_set
from pretty_json.document import load_document
from pretty_json.exceptions import FileOpenError, PrettyJsonError, WriteError
from pretty_json.json_types import JSONValue
from pretty_json.layout import pretty_text, write_pretty
from pretty_json.logging_setup import configure_logging
from pretty_json.paths import STDOUT_ALIAS, resolve_output_target

app = typer.Typer(add_completion=False)
log = logging.getLogger(__name__)

_PROG_NAME = "pretty-json"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{_PROG_NAME} {__version__}")
        raise typer.Exit(code=0)


def write_output(
    target: str | Path,
    document: JSONValue,
    *,
    flatten: AbstractSet[str],
) -> None:
    if target == STDOUT_ALIAS:
        typer.echo(pretty_text(document, flatten=flatten))
        return
    path = Path(target)
    try:
        sink = path.open("w", encoding="utf-8")
    except OSError as exc:
        raise FileOpenError(path, exc.strerror or str(exc)) from exc
    try:
        with sink:
            write_pretty(sink, document, flatten=flatten)
    except OSError as exc:
        # Buffered text is flushed on close.
        raise WriteError(str(exc)) from exc


def format_file(
    source: Path,
    output: str | Path | None = None,
    *,
    flatten: AbstractSet[str] = frozenset(),
) -> str | Path:
    """Read `source`, render it and write the result; returns the target."""
    document = load_document(source)
    target = resolve_output_target(source, output)
    log.info("Writing %s", target)
    if flatten:
        log.info("Flattening paths: %s", ", ".join(sorted(flatten)))
    write_output(target, document, flatten=flatten)
    return target


@app.command()
def main(
    source: Path = typer.Argument(..., help="Source JSON path."),
    output: Optional[str] = typer.Argument(
        None,
        help="Output path; defaults to the source name with '-pretty' appended. "
        "Use '-' for stdout.",
        show_default=False,
    ),
    flat: Optional[List[str]] = typer.Option(
        None,
        "--flat",
        "-f",
        help="Comma-separated object property paths to write on one line; "
        "use dot notation for nested properties. May be repeated.",
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", help="TOML config file (default: ./pretty_json.toml)."
    ),
    verbose: int = typer.Option(
        0, "--verbose", "-v", count=True, help="Log progress to stderr (-vv for debug)."
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Rewrite a JSON file in a dense pretty-printed layout."""
    configure_logging(verbose)
    flatten = resolve_flatten_set(flat, format_defaults(config_path=config))
    try:
        format_file(source, output, flatten=flatten)
    except PrettyJsonError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1)
