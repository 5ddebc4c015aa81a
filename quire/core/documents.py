"""Document building for quire."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import TYPE_CHECKING

from .errors import MetadataParseError, RenderError
from .frontmatter import SplitMode, read_file_metadata
from .models import Document, FileRecord, Metadata
from .rendering import render_content

if TYPE_CHECKING:
    from typing import Any

_LINE_END = re.compile(r"(?<=\n)")


def split_paragraphs(content: str) -> tuple[str, ...]:
    """Split content after each newline and trim the newline off each segment.

    Args:
        content: Rendered HTML content.

    Returns:
        Tuple of segments, at least one and none containing a newline.
    """
    return tuple(segment.strip("\n") for segment in _LINE_END.split(content))


def create_document(file: FileRecord, allow_html: bool = True) -> Document:
    """Build a Document from a classified, front-matter-parsed record.

    Args:
        file: Markdown file record.
        allow_html: Pass raw HTML in the markdown through to the sanitizer.

    Returns:
        The rendered Document.

    Raises:
        RenderError: If rendering or sanitization fails.
    """
    if file.has_metadata and file.metadata is not None:
        metadata = file.metadata
    else:
        metadata = Metadata()

    html = render_content(file.body, allow_html)
    content = html.replace("\n\n", "\n").strip("\n")
    paragraphs = split_paragraphs(content)

    if metadata.title:
        title = metadata.title
    else:
        title = file.name

    if metadata.date is not None:
        date = metadata.date
    else:
        date = file.date

    draft = metadata.draft is True

    if metadata.summary:
        summary = render_content(metadata.summary, allow_html)
        summary_raw = metadata.summary
    else:
        summary = paragraphs[0] if paragraphs else ""
        summary_raw = ""

    return Document(
        title=title,
        content=content,
        content_raw=file.body,
        content_paragraphs=paragraphs,
        date=date,
        draft=draft,
        summary=summary,
        summary_raw=summary_raw,
        name=file.name,
        sub_path=file.sub_path,
    )


def create_documents(
    files: Iterable[FileRecord],
    logger: Any,
    split_mode: SplitMode = "all",
    allow_html: bool = True,
) -> list[Document]:
    """Build Documents for every markdown record, skipping failed files.

    Records whose front matter has not been parsed successfully are parsed
    here, so a malformed block only drops that one file, on every call.

    Args:
        files: File records in discovery order.
        logger: Logger instance.
        split_mode: Front-matter split mode, ``"all"`` or ``"pair"``.
        allow_html: Pass raw HTML in the markdown through to the sanitizer.

    Returns:
        Documents in input order, without the files that failed.
    """
    documents: list[Document] = []

    for file in files:
        if not file.is_markdown:
            logger.debug(f"Ignoring {file.path}: not a markdown file")
            continue

        try:
            if not file.parsed:
                read_file_metadata(file, split_mode)
            document = create_document(file, allow_html)
        except (MetadataParseError, RenderError) as e:
            logger.error(f"Skipping {file.name}: {e}")
            continue

        documents.append(document)

    return documents


def filter_drafts(documents: Iterable[Document], include_drafts: bool) -> list[Document]:
    """Drop draft documents unless drafts are included."""
    if include_drafts:
        return list(documents)
    return [document for document in documents if not document.draft]
