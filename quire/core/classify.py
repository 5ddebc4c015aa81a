"""File classification for quire."""

from __future__ import annotations

from .models import FileRecord, FileType

MARKDOWN_EXTENSION = ".md"


def classify_file(file: FileRecord, root: str) -> None:
    """Assign a type and a relative sub-path to a file record.

    Args:
        file: Record to classify, mutated in place.
        root: Root path the file was discovered under.
    """
    if file.path.endswith(MARKDOWN_EXTENSION):
        file.type = FileType.MARKDOWN
    else:
        file.type = FileType.UNKNOWN

    sub_path = file.path.removeprefix(root)
    file.sub_path = sub_path.removesuffix(file.name)
