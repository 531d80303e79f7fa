"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from gbmigrate.config import Settings, load_config
from gbmigrate.core.pipeline import run_conversion
from gbmigrate.util.fs import reset_dir
from gbmigrate.util.git import refresh_worktrees


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def convert_cmd(
    skip_refresh: Annotated[bool, typer.Option("--skip-refresh", help="Skip git worktree refresh")] = False,
    content: Annotated[Optional[str], typer.Option("--content-dir", help="Output directory")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log every converted file")] = False,
    ):
    """Convert every configured GitBook tree into the Hugo content directory."""
    settings = _settings(overrides={
        "skip_refresh": skip_refresh or None, "content_dir": content,
        "log_level": "DEBUG" if verbose else None,
    })
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    if not settings.skip_refresh:
        try:
            refresh_worktrees(settings.conversions)
        except (RuntimeError, OSError) as e:
            _fail("Worktree refresh failed", e)

    reset_dir(Path(settings.content_dir))

    failures = []
    for conv in settings.conversions:
        typer.echo(f"# Converting {conv.source_dir}")
        failures.extend(run_conversion(conv, settings))

    if failures:
        typer.echo("# ERRORS")
        for failure in failures:
            typer.echo(str(failure))
        raise typer.Exit(1)
    typer.echo(f"Converted {len(settings.conversions)} tree(s) into {settings.content_dir}/")
