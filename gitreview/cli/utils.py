"""Shared utility functions for CLI commands."""

import logging
from pathlib import Path
from typing import Optional

import typer

from gitreview.options import ReviewOptions
from gitreview.prompts import list_templates
from gitreview.user_config import get_default_excludes, get_default_template

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr.

    Args:
        verbose: Log at DEBUG instead of WARNING.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("gitreview").setLevel(level)


def build_review_options(
    root: Path,
    commit: Optional[str] = None,
    branch: Optional[str] = None,
    last: bool = False,
    output: Optional[str] = None,
    exclude: Optional[list[str]] = None,
    focus: Optional[list[str]] = None,
    ignore: Optional[list[str]] = None,
    template: Optional[str] = None,
    regenerate: bool = False,
) -> ReviewOptions:
    """Combine command line values with the repo config into ReviewOptions.

    - Without --commit or --branch the last commit is reviewed.
    - Excludes from .gitreview.yaml come before the command line ones.
    - The template from .gitreview.yaml is used when --template is not given.

    Args:
        root: Directory holding .gitreview.yaml.

    Returns:
        The review options.
    """
    if not commit and not branch:
        last = True

    excludes = get_default_excludes(root) + list(exclude or [])

    return ReviewOptions(
        commit=commit,
        branch=branch,
        last=last,
        output=output,
        exclude=excludes or None,
        focus=list(focus) if focus else None,
        ignore=list(ignore) if ignore else None,
        template=template or get_default_template(root),
        regenerate=regenerate,
    )


def print_templates(templates_dir: Optional[Path] = None) -> None:
    """Print the available review templates."""
    typer.echo("Available templates:")
    for name in list_templates(templates_dir):
        typer.echo(f"  - {name}")
