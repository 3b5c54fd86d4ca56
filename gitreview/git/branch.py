"""Git history and branch utilities.

Contains:
- get_commit_count: Count the commits reachable from HEAD
- remote_branch_exists: Check whether origin/<branch> exists
"""

from gitreview.git.runner import _run_git_command
from gitreview.git.exceptions import GitError


def get_commit_count() -> int:
    """Count the commits reachable from HEAD.

    Returns:
        Number of commits, 0 if the repository has no commits yet.
    """
    try:
        output = _run_git_command(["rev-list", "HEAD", "--count"])
    except GitError:
        # HEAD does not resolve until the first commit exists
        return 0
    try:
        return int(output)
    except ValueError:
        return 0


def remote_branch_exists(branch: str, remote: str = "origin") -> bool:
    """Check whether a remote-tracking branch exists.

    Args:
        branch: Branch name without the remote prefix.
        remote: Remote name.

    Returns:
        True if refs/remotes/<remote>/<branch> is known locally.
    """
    output = _run_git_command(["branch", "--all", "--format=%(refname)"])
    if not output:
        return False
    return f"refs/remotes/{remote}/{branch}" in output.split("\n")
