"""Review formatting and output.

Contains:
- format_review_sections: Normalize model output into blank-line separated sections
- strip_ansi_codes: Remove ANSI escape sequences from text
- colorize_review: Add terminal colors to a review
- render_review: Print a review to the console
- write_review_file: Write a plain-text review report to a file
- handle_review_output: Pick file or console output based on options
"""

import re
from pathlib import Path

import typer

from gitreview.options import ReviewOptions

REPORT_TITLE = "CODE REVIEW RESULTS"
RULE_WIDTH = 50

# ESC or CSI, optional parameters, final byte
_ANSI_PATTERN = re.compile(
    r"[\u001b\u009b][\[()#;?]*(?:[0-9]{1,4}(?:;[0-9]{0,4})*)?[0-9A-ORZcf-nqry=><]"
)


class OutputError(Exception):
    """Raised when the review cannot be written."""

    pass


def format_review_sections(text: str) -> str:
    """Split a review on blank lines and rejoin the non-empty sections.

    Args:
        text: Raw model output.

    Returns:
        The review with trimmed sections separated by single blank lines.
    """
    sections = [section.strip() for section in text.split("\n\n")]
    return "\n\n".join(section for section in sections if section)


def strip_ansi_codes(text: str) -> str:
    """Remove ANSI color codes from a string.

    Args:
        text: String possibly containing ANSI escape sequences.

    Returns:
        The string with escape sequences removed.
    """
    return _ANSI_PATTERN.sub("", text)


def colorize_review(review: str) -> str:
    """Color each review section blue for terminal display."""
    sections = review.split("\n\n")
    return "\n\n".join(typer.style(section, fg=typer.colors.BLUE) for section in sections)


def render_review(review: str) -> None:
    """Print a review to the console with a header and rules.

    Args:
        review: The review text.
    """
    rule = typer.style("=" * RULE_WIDTH, fg=typer.colors.CYAN)
    typer.echo("")
    typer.secho(REPORT_TITLE, fg=typer.colors.CYAN, bold=True)
    typer.echo("")
    typer.echo(rule)
    typer.echo(colorize_review(review))
    typer.echo(rule)
    typer.secho("\nReview completed successfully!\n", fg=typer.colors.GREEN)


def write_review_file(review: str, output_path: Path) -> None:
    """Write the review report to a file as plain text.

    Args:
        review: The review text.
        output_path: Destination file, overwritten if it exists.

    Raises:
        OutputError: If the file cannot be written.
    """
    report = strip_ansi_codes(f"{REPORT_TITLE}\n\n{review}")
    try:
        output_path.write_text(report, encoding="utf-8")
    except OSError as e:
        raise OutputError(f"Failed to write review to {output_path}: {e}")


def handle_review_output(review: str, options: ReviewOptions) -> None:
    """Write the review to options.output, or print it if no file is given.

    Args:
        review: The review text.
        options: The review options.

    Raises:
        OutputError: If the output file cannot be written.
    """
    if options.output:
        output_path = Path(options.output)
        write_review_file(review, output_path)
        typer.secho(f"Review written to file: {output_path}", fg=typer.colors.GREEN)
    else:
        render_review(review)
