"""Running git and locating the repository.

Contains:
- _run_git_command: Run git and return its decoded, stripped stdout
- get_repo_root: Absolute path of the enclosing work tree
"""

import logging
import subprocess
from pathlib import Path
from typing import Optional

from gitreview.git.exceptions import GitError

logger = logging.getLogger(__name__)

GIT_OUTPUT_ENCODING = "utf-8"


def _decode_output(raw: Optional[bytes]) -> str:
    # Bytes that are not valid UTF-8 (e.g. Latin-1 sources) become U+FFFD
    return (raw or b"").decode(GIT_OUTPUT_ENCODING, errors="replace")


def _run_git_command(args: list[str]) -> str:
    """Run git with the given arguments.

    Output is read as bytes and decoded leniently, so a diff touching files
    in another encoding is still returned.

    Args:
        args: Arguments after ``git``.

    Returns:
        Decoded stdout with surrounding whitespace removed.

    Raises:
        GitError: If git is missing or exits with a non-zero status.
    """
    command = ["git", *args]
    logger.debug("Running: %s", " ".join(command))
    try:
        completed = subprocess.run(command, capture_output=True, check=True)
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")
    except subprocess.CalledProcessError as e:
        detail = _decode_output(e.stderr).strip()
        raise GitError(f"Git command failed: {' '.join(command)}\n{detail}")
    return _decode_output(completed.stdout).strip()


def get_repo_root() -> Path:
    """Return the top-level directory of the current git work tree.

    Raises:
        GitError: If the current directory is not inside a repository.
    """
    try:
        toplevel = _run_git_command(["rev-parse", "--show-toplevel"])
    except GitError:
        raise GitError("Not in a git repository. Please run this command from within a git repo.")
    return Path(toplevel)
