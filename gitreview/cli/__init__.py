"""CLI entry point for gitreview.

This module provides the CLI application. The review itself runs as the
app callback so that `gitreview -l` works without a subcommand.
"""

import typer

from gitreview.cli.main import main_command

# Main application
app = typer.Typer(
    name="gitreview",
    help="gitreview: AI-powered git diff reviewer",
    add_completion=False,
)

# Set the main callback for default behavior (includes --version flag)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "main_command",
]
