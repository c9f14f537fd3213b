# gitease Console Output
# Rich-based console output for git workflows

from typing import Optional

from rich.console import Console as RichConsole
from rich.panel import Panel
from rich.syntax import Syntax
from rich.text import Text

from gitease.git.operations import GitError
from gitease.workflows import StepResult, WorkflowResult


class Console:
    """
    Console output manager using Rich.

    Provides formatted output for git workflows.
    """

    def __init__(self, *, verbose: bool = False, colored: bool = True):
        """
        Initialize console.

        Args:
            verbose: Enable verbose output.
            colored: Enable colored output.
        """
        self.verbose = verbose
        self._console = RichConsole(no_color=not colored, highlight=False, soft_wrap=True)

    def print(self, *args, **kwargs) -> None:
        """Print to console."""
        self._console.print(*args, **kwargs)

    def print_error(self, message: str) -> None:
        """Red error message."""
        self._console.print(Text.assemble(("✗", "red"), " ", message))

    def print_warning(self, message: str) -> None:
        """Yellow warning message."""
        self._console.print(Text.assemble(("⚠", "yellow"), " ", message))

    def print_success(self, message: str) -> None:
        """Green success message."""
        self._console.print(Text.assemble(("✓", "green"), " ", message))

    def print_info(self, message: str) -> None:
        """Blue info message."""
        self._console.print(Text.assemble(("ℹ", "blue"), " ", message))

    def print_step(self, step: StepResult) -> None:
        """Echo a git command about to run (verbose only)."""
        if not self.verbose:
            return
        self._console.print(Text(f"$ {step.command}", style="dim"))

    def print_git_output(self, output: str) -> None:
        """Print text produced by git verbatim, without markup parsing."""
        if not output:
            return
        self._console.print(Text(output.rstrip("\n")))

    def print_workflow_result(self, result: WorkflowResult) -> None:
        """
        Print the outcome of a workflow.

        Dry runs list the commands that would run instead of a success line.
        """
        if result.dry_run:
            self.print_info("Dry run - no git commands executed")
            for command in result.commands:
                self._console.print(Text(f"  {command}", style="cyan"))
            return

        if self.verbose:
            for step in result.steps:
                self._print_step_details(step)

        if result.commit_hash and self.verbose:
            self.print_info(f"Commit: {result.commit_hash}")

        self.print_success(result.message)

    def _print_step_details(self, step: StepResult) -> None:
        detail = step.stderr.strip()
        if detail:
            self._console.print(Text(detail, style="dim"))

    def print_git_error(self, error: GitError) -> None:
        """
        Print a failed step: the step message, then git's own output.

        Args:
            error: Step error raised by the git layer.
        """
        self.print_error(error.message)
        if error.stderr:
            for line in error.stderr.splitlines():
                self._console.print(Text(f"  {line}", style="dim"))
        if self.verbose:
            self._console.print(Text(f"  step: {error.step}, exit code: {error.returncode}", style="dim"))

    def print_config(self, yaml_text: str, source: Optional[str] = None) -> None:
        """Print configuration YAML in a panel."""
        title = f"gitease configuration ({source})" if source else "gitease configuration"
        self._console.print(
            Panel(
                Syntax(yaml_text.rstrip("\n"), "yaml", theme="ansi_dark", background_color="default"),
                title=title,
                border_style="blue",
            )
        )


def create_console(*, verbose: bool = False, colored: bool = True) -> Console:
    """
    Create a console instance.

    Args:
        verbose: Enable verbose output.
        colored: Enable colored output.

    Returns:
        Console instance.
    """
    return Console(verbose=verbose, colored=colored)
