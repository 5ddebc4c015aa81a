"""Front-matter parsing for quire."""

from __future__ import annotations

import tomllib
from typing import Literal

from pydantic import ValidationError

from .errors import MetadataParseError
from .models import FileRecord, Metadata

DELIMITER = "---"

SplitMode = Literal["all", "pair"]


def parse_frontmatter(
    text: str, name: str, split_mode: SplitMode = "all"
) -> tuple[Metadata | None, str]:
    """Split text into its front-matter metadata and body.

    With ``split_mode="all"`` the text is split on every delimiter and the
    body is the segment after the second one, so a literal ``---`` inside
    the body truncates it. ``"pair"`` only splits on the first two.

    Args:
        text: Full file content.
        name: File name, used in error messages.
        split_mode: Either ``"all"`` or ``"pair"``.

    Returns:
        Tuple of (metadata or None when there is no front matter, body).

    Raises:
        MetadataParseError: If the front-matter block cannot be decoded.
    """
    if text[:3] != DELIMITER:
        return None, text

    if split_mode == "pair":
        parts = text.split(DELIMITER, 2)
    else:
        parts = text.split(DELIMITER)

    if len(parts) < 3:
        raise MetadataParseError(
            f"error parsing metadata in '{name}': missing closing '{DELIMITER}'"
        )

    try:
        metadata = Metadata.model_validate(tomllib.loads(parts[1]))
    except (tomllib.TOMLDecodeError, ValidationError) as e:
        raise MetadataParseError(f"error parsing metadata in '{name}': {e}") from e

    return metadata, parts[2]


def read_file_metadata(file: FileRecord, split_mode: SplitMode = "all") -> None:
    """Parse the front matter of a markdown record in place.

    Args:
        file: Record whose ``data`` has been read.
        split_mode: Either ``"all"`` or ``"pair"``.

    Raises:
        MetadataParseError: If the front-matter block cannot be decoded.
    """
    if not file.data:
        file.parsed = True
        return

    file.has_metadata = False
    file.metadata = Metadata()

    text = file.data.decode("utf-8", errors="replace")
    metadata, body = parse_frontmatter(text, file.name, split_mode)
    if metadata is not None:
        file.has_metadata = True
        file.metadata = metadata
    file.body = body
    file.parsed = True
