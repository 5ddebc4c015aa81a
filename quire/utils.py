"""Console output helpers for quire."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from rich.console import Console
from rich.table import Table

from .core.models import Document, FileRecord

console = Console()


def _format_date(value: datetime | None) -> str:
    return value.strftime("%Y-%m-%d %H:%M") if value is not None else "-"


def print_documents(documents: Iterable[Document]) -> None:
    """Print documents as a rich table."""
    table = Table(title="Documents")
    table.add_column("Title", style="bold cyan")
    table.add_column("Path")
    table.add_column("Date")
    table.add_column("Draft")
    table.add_column("Summary", overflow="ellipsis", max_width=40)

    for document in documents:
        table.add_row(
            document.title,
            f"{document.sub_path}{document.name}",
            _format_date(document.date),
            "yes" if document.draft else "",
            document.summary_raw or document.summary,
        )

    console.print(table)


def print_files(files: Iterable[FileRecord]) -> None:
    """Print discovered file records as a rich table."""
    table = Table(title="Files")
    table.add_column("Name", style="bold cyan")
    table.add_column("Sub-path")
    table.add_column("Type")
    table.add_column("Modified")

    for file in files:
        table.add_row(
            file.name,
            file.sub_path,
            file.type.value,
            _format_date(file.date),
        )

    console.print(table)
