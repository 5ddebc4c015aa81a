"""Tests for front-matter parsing."""

from datetime import datetime, timezone

import pytest

from quire.core import (
    FileRecord,
    FileType,
    Metadata,
    MetadataParseError,
    parse_frontmatter,
    read_file_metadata,
)

FULL_FRONTMATTER = """---
title = "Hello"
date = 2020-01-02T03:04:05Z
draft = true
summary = "A *short* intro"
---
# Heading

Body text.
"""


def make_record(data: bytes, name: str = "post.md") -> FileRecord:
    return FileRecord(
        name=name, path=f"/data/{name}", type=FileType.MARKDOWN, data=data
    )


class TestParseFrontmatter:
    """Test splitting text into metadata and body."""

    def test_no_frontmatter(self) -> None:
        text = "# Just a heading\n\nSome text.\n"
        metadata, body = parse_frontmatter(text, "post.md")
        assert metadata is None
        assert body == text

    def test_full_frontmatter(self) -> None:
        metadata, body = parse_frontmatter(FULL_FRONTMATTER, "post.md")
        assert metadata is not None
        assert metadata.title == "Hello"
        assert metadata.date == datetime(2020, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        assert metadata.draft is True
        assert metadata.summary == "A *short* intro"
        assert body == "\n# Heading\n\nBody text.\n"

    def test_missing_keys_are_absent(self) -> None:
        metadata, body = parse_frontmatter('---\ntitle = "Only title"\n---\nBody', "p.md")
        assert metadata is not None
        assert metadata.title == "Only title"
        assert metadata.date is None
        assert metadata.draft is False
        assert metadata.summary is None
        assert body == "\nBody"

    def test_unknown_keys_are_ignored(self) -> None:
        metadata, _ = parse_frontmatter(
            '---\ntitle = "T"\ntags = ["a", "b"]\n---\nBody', "p.md"
        )
        assert metadata is not None
        assert metadata.title == "T"

    def test_local_date_becomes_midnight(self) -> None:
        metadata, _ = parse_frontmatter("---\ndate = 2021-03-04\n---\nBody", "p.md")
        assert metadata is not None
        assert metadata.date is not None
        assert (metadata.date.year, metadata.date.month, metadata.date.day) == (
            2021,
            3,
            4,
        )
        assert (metadata.date.hour, metadata.date.minute) == (0, 0)
        assert metadata.date.tzinfo is not None

    def test_local_datetime_gets_local_zone(self) -> None:
        metadata, _ = parse_frontmatter(
            "---\ndate = 2021-03-04T10:30:00\n---\nBody", "p.md"
        )
        assert metadata is not None
        assert metadata.date == datetime(2021, 3, 4, 10, 30).astimezone()

    def test_split_all_truncates_body_at_third_delimiter(self) -> None:
        text = '---\ntitle = "T"\n---\nBefore\n---\nAfter\n'
        metadata, body = parse_frontmatter(text, "p.md", split_mode="all")
        assert metadata is not None
        assert body == "\nBefore\n"

    def test_split_pair_keeps_rest_of_body(self) -> None:
        text = '---\ntitle = "T"\n---\nBefore\n---\nAfter\n'
        metadata, body = parse_frontmatter(text, "p.md", split_mode="pair")
        assert metadata is not None
        assert body == "\nBefore\n---\nAfter\n"

    def test_invalid_toml_raises(self) -> None:
        with pytest.raises(MetadataParseError, match="broken.md"):
            parse_frontmatter("---\ntitle = \n---\nBody", "broken.md")

    def test_wrong_type_raises(self) -> None:
        with pytest.raises(MetadataParseError, match="error parsing metadata"):
            parse_frontmatter('---\ndraft = "yes"\n---\nBody', "p.md")

    def test_missing_closing_delimiter_raises(self) -> None:
        with pytest.raises(MetadataParseError, match="missing closing"):
            parse_frontmatter('---\ntitle = "T"\n', "p.md")


class TestReadFileMetadata:
    """Test applying front matter to a file record."""

    def test_empty_data_leaves_record_untouched(self) -> None:
        file = make_record(b"")
        read_file_metadata(file)
        assert file.metadata is None
        assert file.has_metadata is False
        assert file.body == ""

    def test_without_frontmatter(self) -> None:
        file = make_record(b"Plain body\n")
        read_file_metadata(file)
        assert file.has_metadata is False
        assert file.metadata == Metadata()
        assert file.body == "Plain body\n"

    def test_with_frontmatter(self) -> None:
        file = make_record(FULL_FRONTMATTER.encode("utf-8"))
        read_file_metadata(file)
        assert file.has_metadata is True
        assert file.parsed is True
        assert file.metadata is not None
        assert file.metadata.title == "Hello"
        assert file.body == "\n# Heading\n\nBody text.\n"

    def test_short_data_without_delimiter(self) -> None:
        file = make_record(b"hi")
        read_file_metadata(file)
        assert file.has_metadata is False
        assert file.body == "hi"

    def test_invalid_utf8_is_replaced(self) -> None:
        file = make_record(b"caf\xe9\n")
        read_file_metadata(file)
        assert file.body == "caf\ufffd\n"

    def test_parse_error_keeps_default_state(self) -> None:
        file = make_record(b"---\ntitle = \n---\nBody")
        with pytest.raises(MetadataParseError):
            read_file_metadata(file)
        assert file.has_metadata is False
        assert file.parsed is False
        assert file.metadata == Metadata()
        assert file.body == ""
