"""Markdown rendering and HTML sanitization for quire."""

from __future__ import annotations

import re

import nh3
from markdown_it import MarkdownIt

from .errors import RenderError

_md = MarkdownIt("commonmark", {"html": True}).enable(["table", "strikethrough"])
_md_no_html = MarkdownIt("commonmark", {"html": False}).enable(
    ["table", "strikethrough"]
)

LINK_REL = "nofollow"

_LANGUAGE_CLASS = re.compile(r"language-[a-zA-Z0-9]+")

_ATTRIBUTES = {tag: set(attrs) for tag, attrs in nh3.ALLOWED_ATTRIBUTES.items()}
_ATTRIBUTES.setdefault("code", set()).add("class")


def _filter_attribute(tag: str, attribute: str, value: str) -> str | None:
    # Only fenced-code language hints survive on <code class>.
    if tag == "code" and attribute == "class":
        return value if _LANGUAGE_CLASS.fullmatch(value) else None
    return value


def render_markdown(text: str, allow_html: bool = True) -> str:
    """Render markdown text to raw HTML.

    Args:
        text: Markdown source.
        allow_html: If False, raw HTML in the source is escaped instead of
            passed through.

    Returns:
        Unsanitized HTML.
    """
    md = _md if allow_html else _md_no_html
    return md.render(text)


def sanitize_html(html: str) -> str:
    """Strip unsafe markup, keeping a user-generated-content allowlist."""
    return nh3.clean(
        html,
        attributes=_ATTRIBUTES,
        attribute_filter=_filter_attribute,
        link_rel=LINK_REL,
    )


def render_content(text: str, allow_html: bool = True) -> str:
    """Render markdown and sanitize the result.

    Raises:
        RenderError: If the renderer or the sanitizer fails.
    """
    try:
        return sanitize_html(render_markdown(text, allow_html))
    except Exception as e:
        raise RenderError(f"error rendering markdown: {e}") from e
