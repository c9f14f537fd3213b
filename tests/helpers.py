# gitease Test Helpers
# Fake git runner shared by workflow and CLI tests

import subprocess

from gitease.git.operations import GitError


class FakeGit:
    """Stand-in for _run_git that records calls and fails chosen subcommands."""

    def __init__(self, fail_on: str = "", returncode: int = 1, stderr: str = "", outputs: dict | None = None):
        self.calls: list[tuple[str, ...]] = []
        self.cwds: list = []
        self.fail_on = fail_on
        self.returncode = returncode
        self.stderr = stderr
        self.outputs = outputs or {}

    def __call__(self, *args: str, cwd=None, **kwargs):
        self.calls.append(args)
        self.cwds.append(cwd)
        if args[0] == self.fail_on:
            raise GitError(f"Git command failed: git {' '.join(args)}", returncode=self.returncode, stderr=self.stderr)
        return subprocess.CompletedProcess(
            args=["git", *args], returncode=0, stdout=self.outputs.get(args[0], ""), stderr=""
        )

    @property
    def subcommands(self) -> list[str]:
        return [call[0] for call in self.calls]
