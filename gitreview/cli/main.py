"""Main CLI command for reviewing a git diff."""

from pathlib import Path
from typing import List, Optional

import typer

import gitreview.config as _config
from gitreview import __version__
from gitreview.cache import open_review_cache
from gitreview.config import get_model_id, load_config
from gitreview.git import GitError, get_diff, get_repo_root
from gitreview.llm import LLMError, MissingAPIKeyError, get_provider
from gitreview.output import OutputError, handle_review_output
from gitreview.reviewer import get_ai_review
from gitreview.cli.utils import build_review_options, configure_logging, print_templates


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"gitreview {__version__}")
        raise typer.Exit()


def main_command(
    ctx: typer.Context,
    commit: Optional[str] = typer.Option(
        None,
        "--commit",
        "-c",
        help="Compare with specific commit",
    ),
    branch: Optional[str] = typer.Option(
        None,
        "--branch",
        "-b",
        help="Compare with branch (origin/<name>)",
    ),
    last: bool = typer.Option(
        False,
        "--last",
        "-l",
        help="Compare with last commit (default)",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write review output to a file",
    ),
    exclude: Optional[List[str]] = typer.Option(
        None,
        "--exclude",
        help="Exclude files/directories matching this pattern (repeatable)",
    ),
    focus: Optional[List[str]] = typer.Option(
        None,
        "--focus",
        help="Focus review on a specific area, e.g. security (repeatable)",
    ),
    ignore: Optional[List[str]] = typer.Option(
        None,
        "--ignore",
        help="Ignore a specific area in the review (repeatable)",
    ),
    template: Optional[str] = typer.Option(
        None,
        "--template",
        help="Use a specific review template (default, security, performance)",
    ),
    regenerate: bool = typer.Option(
        False,
        "--regenerate",
        "-r",
        help="Ignore any cached review and ask the model again",
    ),
    show_templates: bool = typer.Option(
        False,
        "--list-templates",
        help="List available review templates and exit",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Review a git diff with a generative AI model."""
    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    configure_logging(verbose)

    if show_templates:
        print_templates()
        raise typer.Exit(0)

    # Show help if no options provided
    if not commit and not branch and not last and not output:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)

    root = Path.cwd()
    load_config(root)

    options = build_review_options(
        root,
        commit=commit,
        branch=branch,
        last=last,
        output=output,
        exclude=exclude,
        focus=focus,
        ignore=ignore,
        template=template,
        regenerate=regenerate,
    )

    typer.secho(
        f"\nGit Diff Reviewer powered by {_config.ACTIVE_PROVIDER.value} ({get_model_id()})\n",
        fg=typer.colors.CYAN,
        bold=True,
        err=True,
    )

    # Step 1: Get the diff
    typer.echo("Fetching git diff...", err=True)
    try:
        get_repo_root()
        diff = get_diff(options)
    except GitError as e:
        typer.secho("Failed to fetch git diff", fg=typer.colors.RED, err=True)
        typer.secho(f"Git error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    if not diff:
        typer.secho("No changes found to review.", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(0)

    typer.secho("Git diff retrieved successfully", fg=typer.colors.GREEN, err=True)

    # Step 2: Get the review (cached or generated)
    typer.echo("Analyzing code changes with AI...", err=True)
    try:
        cache = open_review_cache(get_model_id(), root)
        result = get_ai_review(diff, options, cache, get_provider())
    except (MissingAPIKeyError, LLMError) as e:
        typer.secho("AI Review Failed", fg=typer.colors.RED, err=True)
        typer.secho(f"Error getting AI review: {e}", fg=typer.colors.RED, err=True)
        typer.secho(
            "The diff was retrieved successfully, but the AI review failed.",
            fg=typer.colors.YELLOW,
            err=True,
        )
        raise typer.Exit(1)

    if result.cached:
        typer.secho("Using cached review result", fg=typer.colors.CYAN, err=True)
    else:
        typer.secho("AI review completed", fg=typer.colors.GREEN, err=True)

    # Step 3: Output
    try:
        handle_review_output(result.review, options)
    except OutputError as e:
        typer.secho("Failed to write review output", fg=typer.colors.RED, err=True)
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
