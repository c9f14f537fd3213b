# gitease Workflows
# Multi-step git command sequences: new branch, commit-and-push, status

import shlex
import subprocess
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from gitease.git import operations as git


@dataclass
class StepResult:
    """A single git invocation within a workflow."""

    args: list[str]
    returncode: Optional[int] = None
    stdout: str = ""
    stderr: str = ""

    @property
    def command(self) -> str:
        """Command line as the user would type it."""
        return shlex.join(["git", *self.args])

    @property
    def executed(self) -> bool:
        return self.returncode is not None


@dataclass
class WorkflowResult:
    """Outcome of a successful (or dry-run) workflow."""

    name: str
    message: str = ""
    steps: list[StepResult] = field(default_factory=list)
    dry_run: bool = False
    branch: Optional[str] = None
    commit_hash: Optional[str] = None
    output: str = ""

    @property
    def commands(self) -> list[str]:
        return [step.command for step in self.steps]


StepCallback = Callable[[StepResult], None]


def _require(value: str, what: str) -> str:
    if not value or not value.strip():
        raise ValueError(f"{what} must not be empty")
    return value


def _run(
    result: WorkflowResult,
    args: list[str],
    action: Callable[[], subprocess.CompletedProcess[str]],
    on_step: Optional[StepCallback],
) -> Optional[subprocess.CompletedProcess[str]]:
    """Record a step, announce it, then run it unless this is a dry run.

    Step errors propagate unchanged, so nothing after a failed step runs.
    """
    step = StepResult(args=args)
    result.steps.append(step)
    if on_step is not None:
        on_step(step)

    if result.dry_run:
        return None

    completed = action()
    step.returncode = completed.returncode
    step.stdout = completed.stdout or ""
    step.stderr = completed.stderr or ""
    return completed


def new_branch(
    branch: str,
    source: str = "main",
    *,
    path: Optional[Path] = None,
    remote: str = "origin",
    dry_run: bool = False,
    on_step: Optional[StepCallback] = None,
) -> WorkflowResult:
    """
    Create a local branch from ``<remote>/<source>`` and push it upstream.

    Runs, in order: ``git fetch <remote>``,
    ``git checkout -b <branch> <remote>/<source>``,
    ``git push -u <remote> <branch>``.

    Args:
        branch: Name of the new branch.
        source: Remote branch to start from.
        path: Repository working directory.
        remote: Remote name.
        dry_run: Record the commands without running them.
        on_step: Called with each step before it runs.

    Returns:
        WorkflowResult with the executed steps.

    Raises:
        ValueError: If branch or source is empty.
        FetchFailed, BranchCreateFailed, PushFailed: On the first failing step.
    """
    _require(branch, "Branch name")
    _require(source, "Source branch")
    start_point = f"{remote}/{source}"

    result = WorkflowResult(name="new-branch", dry_run=dry_run, branch=branch)

    _run(result, git.fetch_args(remote), lambda: git.fetch(path, remote=remote), on_step)
    _run(
        result,
        git.create_branch_args(branch, start_point),
        lambda: git.create_branch(branch, start_point, path),
        on_step,
    )
    _run(
        result,
        git.push_args(remote, branch, set_upstream=True),
        lambda: git.push(
            path,
            remote=remote,
            branch=branch,
            set_upstream=True,
            message="Error pushing new branch to remote.",
        ),
        on_step,
    )

    result.message = f"Successfully created and pushed new branch '{branch}'."
    return result


def commit_and_push(
    message: str,
    *,
    path: Optional[Path] = None,
    remote: Optional[str] = None,
    dry_run: bool = False,
    on_step: Optional[StepCallback] = None,
) -> WorkflowResult:
    """
    Stage everything, commit it with ``message`` and push.

    Without ``remote`` a plain ``git push`` is used, so the current branch's
    upstream decides where the commit goes.

    Raises:
        ValueError: If message is empty.
        StageFailed, CommitFailed, PushFailed: On the first failing step.
    """
    _require(message, "Commit message")

    result = WorkflowResult(name="commit-push", dry_run=dry_run)

    _run(result, git.stage_all_args(), lambda: git.stage_all(path), on_step)
    _run(result, git.commit_args(message), lambda: git.commit(message, path), on_step)
    if not dry_run:
        result.commit_hash = git.get_head_commit(path)
    _run(result, git.push_args(remote), lambda: git.push(path, remote=remote), on_step)

    result.message = "Successfully committed and pushed changes."
    return result


def show_status(
    *,
    path: Optional[Path] = None,
    short: bool = False,
    on_step: Optional[StepCallback] = None,
) -> WorkflowResult:
    """
    Query the working-tree and index status. Never modifies the repository.

    Raises:
        StatusFailed: If the status query fails, e.g. outside a repository.
    """
    result = WorkflowResult(name="status")

    completed = _run(result, git.status_args(short=short), lambda: git.status(path, short=short), on_step)

    result.output = completed.stdout if completed is not None else ""
    return result
