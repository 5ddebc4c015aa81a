"""Core processing functions for quire.

This module contains the document pipeline: walking a content tree,
classifying files, parsing front matter and rendering documents.
"""

from .classify import classify_file
from .documents import (
    create_document,
    create_documents,
    filter_drafts,
    split_paragraphs,
)
from .errors import (
    ConfigError,
    MetadataParseError,
    QuireError,
    ReadError,
    RenderError,
    WalkError,
)
from .frontmatter import parse_frontmatter, read_file_metadata
from .models import Document, FileRecord, FileType, Metadata
from .rendering import render_content, render_markdown, sanitize_html
from .walker import analyze_file, find_files, read_file_data, walk_files

__all__ = [
    "Document",
    "FileRecord",
    "FileType",
    "Metadata",
    "QuireError",
    "WalkError",
    "ReadError",
    "MetadataParseError",
    "RenderError",
    "ConfigError",
    "classify_file",
    "parse_frontmatter",
    "read_file_metadata",
    "render_markdown",
    "sanitize_html",
    "render_content",
    "split_paragraphs",
    "create_document",
    "create_documents",
    "filter_drafts",
    "walk_files",
    "read_file_data",
    "analyze_file",
    "find_files",
]
