"""Git diff retrieval.

Contains:
- get_diff: Get the diff to review for the given options
- build_exclude_pathspecs: Turn exclude patterns into git pathspec arguments
- EMPTY_TREE_HASH: Hash of git's empty tree, used to diff the first commit
"""

import logging
from typing import Optional

from gitreview.git.runner import _run_git_command
from gitreview.git.exceptions import BranchNotFoundError, GitError, InvalidRevisionError
from gitreview.git.branch import get_commit_count, remote_branch_exists
from gitreview.options import ReviewOptions

logger = logging.getLogger(__name__)

# git hash-object -t tree /dev/null
EMPTY_TREE_HASH = "4b825dc642cb6eb9a060e54bf8d69288fbee4904"


def build_exclude_pathspecs(patterns: Optional[list[str]]) -> list[str]:
    """Build the pathspec arguments that exclude the given patterns.

    Supports git pathspec globs like *.lock, build/*, etc. Patterns are
    relative to the current directory.

    Args:
        patterns: Path patterns to exclude.

    Returns:
        Arguments to append to a git diff command, empty if no patterns.
    """
    if not patterns:
        return []
    return ["--", "."] + [f":(exclude){pattern}" for pattern in patterns]


def get_diff(options: ReviewOptions) -> str:
    """Get the diff to review.

    Modes, in order of precedence:
    - options.commit: diff of the working tree against that commit
    - options.branch: diff against origin/<branch>
    - otherwise: the last commit (against the empty tree if it is the only one)

    Args:
        options: The review options.

    Returns:
        The diff text, or an empty string if the repository has no commits
        or nothing changed.

    Raises:
        InvalidRevisionError: If the commit cannot be resolved.
        BranchNotFoundError: If origin/<branch> does not exist.
        GitError: For other git failures.
    """
    commit_count = get_commit_count()
    if commit_count == 0:
        logger.info("No commits found in the repository.")
        return ""

    pathspecs = build_exclude_pathspecs(options.exclude)

    if options.commit:
        try:
            diff = _run_git_command(["diff", options.commit] + pathspecs)
        except GitError:
            raise InvalidRevisionError(
                f"Invalid commit hash or commit not found: {options.commit}"
            )
    elif options.branch:
        if not remote_branch_exists(options.branch):
            raise BranchNotFoundError(f"Branch 'origin/{options.branch}' not found")
        diff = _run_git_command(["diff", f"origin/{options.branch}"] + pathspecs)
    elif commit_count == 1:
        # First commit: compare with the empty tree
        diff = _run_git_command(["diff", EMPTY_TREE_HASH, "HEAD"] + pathspecs)
    else:
        diff = _run_git_command(["diff", "HEAD^", "HEAD"] + pathspecs)

    return diff or ""
