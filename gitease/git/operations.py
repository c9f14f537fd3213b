# gitease Git Operations
# Git command execution, one step-specific error per git step

import subprocess
from pathlib import Path
from typing import Optional


class GitError(Exception):
    """Exception raised for git operation errors."""

    step = "git"

    def __init__(self, message: str, returncode: int = 1, stderr: str = ""):
        self.message = message
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)


class FetchFailed(GitError):
    """Refreshing remote references failed."""

    step = "fetch"


class BranchCreateFailed(GitError):
    """Creating the local branch failed."""

    step = "checkout"


class PushFailed(GitError):
    """Pushing to the remote failed."""

    step = "push"


class StageFailed(GitError):
    """Staging working-tree changes failed."""

    step = "add"


class CommitFailed(GitError):
    """Creating the commit failed (including 'nothing to commit')."""

    step = "commit"


class StatusFailed(GitError):
    """Querying the working-tree status failed."""

    step = "status"


def _run_git(*args: str, cwd: Optional[Path] = None) -> subprocess.CompletedProcess[str]:
    """
    Run a git command.

    Output is decoded as UTF-8; undecodable bytes (e.g. Latin-1 file names)
    are replaced rather than raising.

    Args:
        *args: Git command arguments.
        cwd: Working directory.

    Returns:
        CompletedProcess with result.

    Raises:
        GitError: If the command exits non-zero.
    """
    cmd = ["git", *args]
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            check=False,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise GitError("git command not found. Is git installed?", returncode=127)

    if result.returncode != 0:
        raise GitError(
            f"Git command failed: {' '.join(cmd)}",
            returncode=result.returncode,
            stderr=_failure_output(result),
        )
    return result


def _failure_output(result: subprocess.CompletedProcess[str]) -> str:
    # git commit reports "nothing to commit" on stdout, not stderr
    stderr = result.stderr.strip() if result.stderr else ""
    if stderr:
        return stderr
    return result.stdout.strip() if result.stdout else ""


def _run_step(
    error_cls: type[GitError],
    message: str,
    *args: str,
    cwd: Optional[Path] = None,
) -> subprocess.CompletedProcess[str]:
    """Run one git step, re-raising any failure as ``error_cls``."""
    try:
        return _run_git(*args, cwd=cwd)
    except GitError as e:
        raise error_cls(message, returncode=e.returncode, stderr=e.stderr or e.message) from e


def fetch_args(remote: str = "origin") -> list[str]:
    return ["fetch", remote]


def create_branch_args(name: str, start_point: str) -> list[str]:
    return ["checkout", "-b", name, start_point]


def push_args(
    remote: Optional[str] = None,
    branch: Optional[str] = None,
    *,
    set_upstream: bool = False,
) -> list[str]:
    args = ["push"]
    if set_upstream:
        args.append("-u")
    if remote:
        args.append(remote)
        if branch:
            args.append(branch)
    return args


def stage_all_args() -> list[str]:
    return ["add", "-A"]


def commit_args(message: str) -> list[str]:
    return ["commit", "-m", message]


def status_args(*, short: bool = False) -> list[str]:
    args = ["status"]
    if short:
        args.append("--short")
    return args


def fetch(path: Optional[Path] = None, *, remote: str = "origin") -> subprocess.CompletedProcess[str]:
    """
    Refresh remote references without merging.

    Args:
        path: Repository path.
        remote: Remote name.

    Raises:
        FetchFailed: If git fetch exits non-zero.
    """
    return _run_step(FetchFailed, "Error fetching from remote.", *fetch_args(remote), cwd=path)


def create_branch(
    name: str,
    start_point: str,
    path: Optional[Path] = None,
) -> subprocess.CompletedProcess[str]:
    """
    Create and check out a new local branch starting at ``start_point``.

    When ``start_point`` is a remote-tracking branch (e.g. ``origin/main``)
    git sets it as the new branch's upstream.

    Raises:
        BranchCreateFailed: If git checkout exits non-zero.
    """
    return _run_step(
        BranchCreateFailed,
        "Error creating new branch.",
        *create_branch_args(name, start_point),
        cwd=path,
    )


def push(
    path: Optional[Path] = None,
    *,
    remote: Optional[str] = None,
    branch: Optional[str] = None,
    set_upstream: bool = False,
    message: str = "Error pushing changes.",
) -> subprocess.CompletedProcess[str]:
    """
    Push commits to remote.

    Args:
        path: Repository path.
        remote: Remote name (git's configured upstream if not specified).
        branch: Branch name (only used together with remote).
        set_upstream: Set upstream tracking.
        message: Error message used when the push fails.

    Raises:
        PushFailed: If git push exits non-zero.
    """
    args = push_args(remote, branch, set_upstream=set_upstream)
    return _run_step(PushFailed, message, *args, cwd=path)


def stage_all(path: Optional[Path] = None) -> subprocess.CompletedProcess[str]:
    """
    Stage all changes, including deletions and untracked files.

    Raises:
        StageFailed: If git add exits non-zero.
    """
    return _run_step(StageFailed, "Error staging changes.", *stage_all_args(), cwd=path)


def commit(message: str, path: Optional[Path] = None) -> subprocess.CompletedProcess[str]:
    """
    Create a commit from the index.

    Args:
        message: Commit message.
        path: Repository path.

    Raises:
        CommitFailed: If git commit exits non-zero, e.g. nothing to commit.
    """
    return _run_step(CommitFailed, "Error committing changes.", *commit_args(message), cwd=path)


def status(path: Optional[Path] = None, *, short: bool = False) -> subprocess.CompletedProcess[str]:
    """
    Query working-tree and index status.

    Raises:
        StatusFailed: If git status exits non-zero (e.g. not a repository).
    """
    return _run_step(
        StatusFailed,
        "Error getting repository status.",
        *status_args(short=short),
        cwd=path,
    )


def get_head_commit(path: Optional[Path] = None) -> Optional[str]:
    """Get the full hash of HEAD, or None if there is no commit yet."""
    try:
        result = _run_git("rev-parse", "HEAD", cwd=path)
        return result.stdout.strip()
    except GitError:
        return None
