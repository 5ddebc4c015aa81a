"""Command line interface for quire."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import click
from loguru import logger

from . import __version__
from .config import Config, get_config_path, load_config, save_config
from .core import QuireError, create_documents, filter_drafts, find_files
from .utils import console, print_documents, print_files


class DefaultCommandGroup(click.Group):
    """Group that falls back to a default command when none is provided."""

    def __init__(
        self,
        *args: Any,
        default_command: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.default_command = default_command

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, Any, list[str]]:
        if args:
            cmd_name = args[0]
            cmd = self.get_command(ctx, cmd_name)
            if cmd is not None:
                return cmd_name, cmd, args[1:]

        if self.default_command:
            cmd = self.get_command(ctx, self.default_command)
            if cmd is None:
                raise click.UsageError(
                    f"Default command '{self.default_command}' not found."
                )
            return self.default_command, cmd, args
        result: tuple[str | None, Any, list[str]] = super().resolve_command(ctx, args)
        return result


def setup_logger(verbose: bool = False) -> Any:
    """Set up logger with appropriate level."""
    logger.remove()
    logger.add(
        sys.stderr,
        format="{level}: {message}",
        level="DEBUG" if verbose else "INFO",
    )

    return logger


def get_config_or_default(root: Path, **kwargs: Any) -> tuple[Config, dict[str, Any]]:
    """Load config from the content root and merge with CLI arguments.

    CLI arguments override config values. If config doesn't exist, uses defaults.

    Args:
        root: Path to the content root.
        **kwargs: CLI argument values that override config; None means unset.

    Returns:
        Tuple of (config object, dict of effective values).

    Raises:
        ConfigError: If the config file exists but is invalid.
    """
    config = load_config(root) or Config()
    effective: dict[str, Any] = {}

    split_mode = kwargs.get("split_mode")
    effective["split_mode"] = (
        split_mode if split_mode is not None else config.frontmatter.split_mode
    )

    include_drafts = kwargs.get("include_drafts")
    effective["include_drafts"] = (
        include_drafts
        if include_drafts is not None
        else config.output.include_drafts
    )

    effective["allow_html"] = config.rendering.allow_html

    return config, effective


@click.group(cls=DefaultCommandGroup, default_command="build")
@click.version_option(version=__version__, prog_name="quire")
def cli() -> None:
    """Render a tree of markdown files into publishable documents.

    ROOT: Path to the content directory

    This tool will:
    - Walk the content directory and pick up markdown (.md) files
    - Read TOML front matter (title, date, draft, summary) between '---' lines
    - Render markdown bodies and summaries to sanitized HTML
    - Fall back to the file name for titles and the modification time for dates
    - Skip and report files whose front matter cannot be parsed
    """


@cli.command()
@click.argument(
    "root",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
@click.option(
    "--drafts/--no-drafts",
    "include_drafts",
    default=None,
    help="Include documents marked as draft (default: from config, else include)",
)
@click.option(
    "--split-mode",
    type=click.Choice(["all", "pair"]),
    default=None,
    help="Front matter split: on every '---' (all) or the first two only (pair)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def build(
    root: Path,
    include_drafts: bool | None,
    split_mode: str | None,
    verbose: bool,
) -> None:
    """Build documents from the markdown files under ROOT.

    ROOT: Path to the content directory
    """
    logger = setup_logger(verbose)
    logger.info(f"Building documents from {root}")

    try:
        _, effective = get_config_or_default(
            root, split_mode=split_mode, include_drafts=include_drafts
        )
        found = find_files(str(root), logger)
        markdown_files = [file for file in found if file.is_markdown]
        documents = create_documents(
            markdown_files,
            logger,
            split_mode=effective["split_mode"],
            allow_html=effective["allow_html"],
        )
    except QuireError as e:
        logger.error(f"Error building documents: {e}")
        raise click.ClickException(str(e)) from e

    skipped = len(markdown_files) - len(documents)
    documents = filter_drafts(documents, effective["include_drafts"])

    print_documents(documents)
    console.print("[bold green]Build Summary[/]")
    console.print(f"Total documents: [bold]{len(documents)}[/]")
    console.print(f"Skipped files: [bold]{skipped}[/]")
    logger.info("Build complete!")


@cli.command()
@click.argument(
    "root",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def files(root: Path, verbose: bool) -> None:
    """List the files discovered under ROOT.

    ROOT: Path to the content directory
    """
    logger = setup_logger(verbose)

    try:
        found = find_files(str(root), logger)
    except QuireError as e:
        logger.error(f"Error walking {root}: {e}")
        raise click.ClickException(str(e)) from e

    print_files(found)
    markdown_count = sum(1 for file in found if file.is_markdown)
    console.print(f"Total files: [bold]{len(found)}[/]")
    console.print(f"Markdown files: [bold]{markdown_count}[/]")


@cli.command()
@click.argument(
    "root",
    type=click.Path(file_okay=False, dir_okay=True, path_type=Path),
)
@click.option(
    "--overwrite-config",
    is_flag=True,
    help="Overwrite an existing .quire/config.yaml",
)
def init(root: Path, overwrite_config: bool) -> None:
    """Write a default .quire/config.yaml under ROOT.

    ROOT: Path to the content directory (created if missing)
    """
    config_path = get_config_path(root)
    if config_path.exists() and not overwrite_config:
        raise click.ClickException(
            f"config.yaml already exists at {config_path}. Use --overwrite-config to overwrite."
        )

    root.mkdir(parents=True, exist_ok=True)
    save_config(Config(), root)
    console.print(f"Wrote default configuration to [bold]{config_path}[/]")


if __name__ == "__main__":
    cli()
