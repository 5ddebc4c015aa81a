"""Data models for quire."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date as date_type
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class FileType(Enum):
    """Classification of a discovered file."""

    UNKNOWN = "unknown"
    MARKDOWN = "markdown"


class Metadata(BaseModel):
    """Front-matter metadata of a markdown file.

    Absent keys stay ``None``; ``draft`` defaults to ``False``.
    """

    model_config = ConfigDict(extra="ignore", strict=True, frozen=True)

    title: str | None = None
    date: datetime | None = None
    draft: bool = False
    summary: str | None = None

    @field_validator("date", mode="before")
    @classmethod
    def _normalize_date(cls, value: Any) -> Any:
        # TOML local dates have no time part, local datetimes have no zone.
        if isinstance(value, date_type) and not isinstance(value, datetime):
            value = datetime(value.year, value.month, value.day)
        if isinstance(value, datetime) and value.tzinfo is None:
            value = value.astimezone()
        return value


@dataclass
class FileRecord:
    """One filesystem entry under consideration."""

    name: str
    path: str
    sub_path: str = ""
    type: FileType = FileType.UNKNOWN
    data: bytes = b""
    body: str = ""
    has_metadata: bool = False
    metadata: Metadata | None = None
    parsed: bool = False
    date: datetime | None = None

    @property
    def is_markdown(self) -> bool:
        return self.type is FileType.MARKDOWN


@dataclass(frozen=True)
class Document:
    """Rendered document ready for templating."""

    title: str
    content: str
    content_raw: str
    content_paragraphs: tuple[str, ...]
    date: datetime | None
    draft: bool
    summary: str
    summary_raw: str
    name: str = ""
    sub_path: str = ""
