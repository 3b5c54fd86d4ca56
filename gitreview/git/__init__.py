"""Git diff collector module for gitreview.

This package runs the git binary to collect the diff under review:
- exceptions: GitError, InvalidRevisionError, BranchNotFoundError
- runner: _run_git_command, get_repo_root
- branch: get_commit_count, remote_branch_exists
- diff: get_diff, build_exclude_pathspecs, EMPTY_TREE_HASH
"""

# Exceptions
from gitreview.git.exceptions import (
    BranchNotFoundError,
    GitError,
    InvalidRevisionError,
)

# Runner utilities
from gitreview.git.runner import (
    _run_git_command,
    get_repo_root,
)

# History and branch utilities
from gitreview.git.branch import (
    get_commit_count,
    remote_branch_exists,
)

# Diff utilities
from gitreview.git.diff import (
    EMPTY_TREE_HASH,
    build_exclude_pathspecs,
    get_diff,
)


__all__ = [
    # Exceptions
    "GitError",
    "InvalidRevisionError",
    "BranchNotFoundError",
    # Runner
    "_run_git_command",
    "get_repo_root",
    # Branch
    "get_commit_count",
    "remote_branch_exists",
    # Diff
    "EMPTY_TREE_HASH",
    "build_exclude_pathspecs",
    "get_diff",
]
