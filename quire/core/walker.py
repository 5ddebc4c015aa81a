"""Directory walking for quire."""

from __future__ import annotations

import os
from collections.abc import Iterator
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from .classify import classify_file
from .errors import ReadError, WalkError
from .models import FileRecord

if TYPE_CHECKING:
    from typing import Any


def walk_files(root: str) -> Iterator[Path]:
    """Walk through the directory in lexical order, yielding files.

    Args:
        root: Root directory to search.

    Yields:
        Path objects for each non-directory entry, depth first.

    Raises:
        WalkError: If a directory cannot be listed.
    """
    try:
        entries = sorted(Path(root).iterdir(), key=lambda entry: entry.name)
    except OSError as e:
        raise WalkError(f"error walking {root}: {e}") from e

    for entry in entries:
        if entry.is_dir() and not entry.is_symlink():
            yield from walk_files(os.fspath(entry))
        else:
            yield entry


def read_file_data(file: FileRecord) -> None:
    """Read the raw bytes of a file into its record.

    Raises:
        ReadError: If the file cannot be opened or read.
    """
    try:
        with open(file.path, "rb") as handle:
            file.data = handle.read()
    except OSError as e:
        raise ReadError(f"error reading {file.path}: {e}") from e


def get_modification_time(path: str) -> datetime:
    """Get the file modification time as a timezone-aware local datetime.

    Raises:
        WalkError: If the file cannot be stat'ed.
    """
    try:
        mtime = os.stat(path).st_mtime
    except OSError as e:
        raise WalkError(f"error reading file info for {path}: {e}") from e
    return datetime.fromtimestamp(mtime).astimezone()


def analyze_file(file: FileRecord, root: str) -> None:
    """Classify a record, read markdown data and set its modification time.

    Raises:
        ReadError: If a markdown file cannot be read.
        WalkError: If the file cannot be stat'ed.
    """
    classify_file(file, root)

    if file.is_markdown:
        read_file_data(file)

    file.date = get_modification_time(file.path)


def find_files(root: str, logger: Any) -> list[FileRecord]:
    """Discover and analyze every file under root.

    Unreadable files are logged and left out; any other discovery failure
    aborts the walk.

    Args:
        root: Root directory to search.
        logger: Logger instance.

    Returns:
        File records in walk order.

    Raises:
        WalkError: If a directory cannot be listed or a file cannot be stat'ed.
    """
    found: list[FileRecord] = []

    for path in walk_files(root):
        file = FileRecord(name=path.name, path=os.fspath(path))
        try:
            analyze_file(file, root)
        except ReadError as e:
            logger.warning(f"Skipping {file.name}: {e}")
            continue
        logger.debug(f"Found {file.path} ({file.type.value})")
        found.append(file)

    return found
