"""Error types raised by the quire pipeline."""

from __future__ import annotations


class QuireError(Exception):
    """Base class for all quire errors."""


class WalkError(QuireError):
    """Discovery failed (unreadable directory, missing root, failed stat)."""


class ReadError(QuireError):
    """A file's bytes could not be read."""


class MetadataParseError(QuireError):
    """The front-matter block of a file is malformed."""


class RenderError(QuireError):
    """Markdown rendering or HTML sanitization failed."""


class ConfigError(QuireError):
    """The configuration file could not be loaded."""
