"""Reading ``.ber`` map files from disk."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path
from typing import IO, AnyStr

MAP_SUFFIX = ".ber"
READ_SIZE = 100


class MapFileError(Exception):
    """Raised when a map file has a bad name, cannot be opened or is malformed."""


def check_map_path(path: str | os.PathLike[str]) -> Path:
    """Check that *path* names a readable ``.ber`` file and return it as a Path."""
    name = os.fspath(path)
    if not name.endswith(MAP_SUFFIX):
        raise MapFileError("File error: name")
    try:
        with open(name, "rb"):
            pass
    except OSError as exc:
        raise MapFileError("File error: opening") from exc
    return Path(name)


def read_map(path: str | os.PathLike[str]) -> list[str]:
    """Read the rows of a map file.

    Empty lines are dropped. A file that is empty or ends with a newline
    is rejected.
    """
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapFileError("File error: opening") from exc
    if not text:
        raise MapFileError("map file is empty")
    if text.endswith("\n"):
        raise MapFileError("map file ends with a newline")
    return [row for row in text.split("\n") if row]


def iter_lines(stream: IO[AnyStr]) -> Iterator[AnyStr]:
    """Yield the lines of *stream*, each keeping its trailing newline.

    The stream is read in fixed-size chunks; it may be opened in text or
    binary mode. The last line is yielded without a newline if it has none.
    """
    pending = None
    newline = None
    while True:
        chunk = stream.read(READ_SIZE)
        if not chunk:
            break
        if newline is None:
            newline = b"\n" if isinstance(chunk, bytes) else "\n"
        pending = chunk if pending is None else pending + chunk
        while True:
            index = pending.find(newline)
            if index < 0:
                break
            yield pending[: index + 1]
            pending = pending[index + 1:]
    if pending:
        yield pending