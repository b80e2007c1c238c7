"""Error kinds surfaced by pretty-json."""

from __future__ import annotations

from pathlib import Path


class PrettyJsonError(Exception):
    """Base class for failures that end a formatting run."""


class FileOpenError(PrettyJsonError):
    """The source could not be read or the output could not be created."""

    def __init__(self, path: str | Path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class ParseError(PrettyJsonError):
    """The source is not valid JSON; the message is the decoder's."""


class WriteError(PrettyJsonError):
    """Writing the formatted output failed part way through."""
