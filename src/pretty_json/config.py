from __future__ import annotations

from datetime import date, datetime, time
from pathlib import Path
from typing import TypeAlias
import logging
import tomllib

DEFAULT_CONFIG_NAME = "pretty_json.toml"

log = logging.getLogger(__name__)

TomlScalar: TypeAlias = str | int | float | bool | None | date | datetime | time
TomlValue: TypeAlias = TomlScalar | list["TomlValue"] | dict[str, "TomlValue"]
TomlTable: TypeAlias = dict[str, TomlValue]


def _load_toml(path: Path, *, explicit: bool = False) -> TomlTable:
    # Warn only for a file named with --config.
    report = log.warning if explicit else log.debug
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        report("Config file %s not found; using defaults", path)
        return {}
    except OSError as exc:
        report("Config file %s unreadable (%s); using defaults", path, exc)
        return {}
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        report("Config file %s is not valid TOML (%s); using defaults", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_config(root: Path | None = None, config_path: Path | None = None) -> TomlTable:
    if config_path is not None:
        return _load_toml(config_path, explicit=True)
    base = root if root is not None else Path.cwd()
    return _load_toml(base / DEFAULT_CONFIG_NAME)


def format_defaults(
    root: Path | None = None, config_path: Path | None = None
) -> TomlTable:
    data = load_config(root=root, config_path=config_path)
    section = data.get("format", {})
    return section if isinstance(section, dict) else {}


def split_path_list(value: TomlValue) -> list[str]:
    """Comma-split a path list; entries are kept verbatim, empties dropped."""
    items: list[str] = []
    if value is None:
        return items
    if isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, (list, tuple)):
        for item in value:
            if isinstance(item, str):
                items.extend(item.split(","))
    return [item for item in items if item]


def flatten_paths(section: TomlTable | None) -> list[str]:
    if section is None:
        return []
    if not isinstance(section, dict):
        return []
    return split_path_list(section.get("flat"))


def resolve_flatten_set(
    cli_flat: list[str] | None, section: TomlTable | None
) -> frozenset[str]:
    # An explicit --flat replaces the configured list.
    if cli_flat:
        return frozenset(split_path_list(cli_flat))
    return frozenset(flatten_paths(section))
