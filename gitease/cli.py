"""Click-based CLI for gitease."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Optional

import click

from gitease import __version__
from gitease.config import (
    CONFIG_ENV_VAR,
    ConfigError,
    GiteaseConfig,
    dump_config,
    get_config_path,
    load_config,
    validate_config_file,
    write_default_config,
)
from gitease.git import GitError
from gitease.output import Console, create_console
from gitease.workflows import WorkflowResult, commit_and_push, new_branch, show_status

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _not_blank(ctx: click.Context, param: click.Parameter, value: Optional[str]) -> Optional[str]:
    if value is not None and not value.strip():
        raise click.BadParameter("must not be empty")
    return value


def _config_path(ctx: click.Context) -> Path:
    return ctx.obj.get("config_path") or get_config_path()


def _load(ctx: click.Context) -> tuple[GiteaseConfig, Console]:
    """Load configuration and build the console for a command.

    Command-line flags win over configuration values.
    """
    try:
        config = load_config(_config_path(ctx))
    except ConfigError as e:
        console = create_console(colored=not ctx.obj["no_color"])
        console.print_error(e.message)
        for err in e.errors:
            console.print(f"  • {err}", markup=False)
        ctx.exit(1)

    console = create_console(
        verbose=ctx.obj["verbose"] or config.output.verbose,
        colored=config.output.colored and not ctx.obj["no_color"],
    )
    return config, console


def _run_workflow(ctx: click.Context, console: Console, workflow: Callable[[], WorkflowResult]) -> WorkflowResult:
    """Run a workflow, turning a failed git step into an error message and exit code."""
    try:
        return workflow()
    except GitError as e:
        console.print_git_error(e)
        ctx.exit(e.returncode or 1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__, prog_name="gitease")
@click.option(
    "-C",
    "--cwd",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Run git in this directory instead of the current one",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar=CONFIG_ENV_VAR,
    help=f"Configuration file (default: ~/.config/gitease/config.yaml, env: {CONFIG_ENV_VAR})",
)
@click.option("--verbose", "-v", is_flag=True, help="Echo git commands and show git output")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.pass_context
def cli(ctx: click.Context, cwd: Optional[Path], config_path: Optional[Path], verbose: bool, no_color: bool) -> None:
    """gitease - shortcuts for everyday git command sequences.

    \b
    Workflows:
      new-branch   fetch, create a branch from a remote branch, push -u
      commit-push  add -A, commit -m, push
      status       show working tree status

    Each git step is checked as soon as it exits; the first failing step
    stops the workflow and its exit code becomes gitease's exit code.
    """
    ctx.ensure_object(dict)
    ctx.obj["cwd"] = cwd
    ctx.obj["config_path"] = config_path
    ctx.obj["verbose"] = verbose
    ctx.obj["no_color"] = no_color


@cli.command("new-branch")
@click.argument("branch", callback=_not_blank)
@click.argument("source", required=False, callback=_not_blank)
@click.option("--remote", "-r", default=None, help="Remote to fetch from and push to (default: origin)")
@click.option("--dry-run", "-n", is_flag=True, help="Show the git commands without running them")
@click.pass_context
def new_branch_cmd(
    ctx: click.Context,
    branch: str,
    source: Optional[str],
    remote: Optional[str],
    dry_run: bool,
) -> None:
    """Create BRANCH from a remote branch and push it upstream.

    SOURCE is the remote branch to start from (default: main).

    \b
    Runs:
      git fetch <remote>
      git checkout -b BRANCH <remote>/SOURCE
      git push -u <remote> BRANCH

    \b
    Examples:
      gitease new-branch feature-x             # from origin/main
      gitease new-branch hotfix-1 release-2.0  # from origin/release-2.0
      gitease -C ~/src/app new-branch docs -n  # preview only
    """
    config, console = _load(ctx)

    result = _run_workflow(
        ctx,
        console,
        lambda: new_branch(
            branch,
            source or config.git.default_source_branch,
            path=ctx.obj["cwd"],
            remote=remote or config.git.remote,
            dry_run=dry_run,
            on_step=None if dry_run else console.print_step,
        ),
    )
    console.print_workflow_result(result)


@cli.command("commit-push")
@click.argument("message", callback=_not_blank)
@click.option("--remote", "-r", default=None, help="Push to this remote instead of the branch's upstream")
@click.option("--dry-run", "-n", is_flag=True, help="Show the git commands without running them")
@click.pass_context
def commit_push_cmd(ctx: click.Context, message: str, remote: Optional[str], dry_run: bool) -> None:
    """Stage all changes, commit them with MESSAGE and push.

    \b
    Runs:
      git add -A
      git commit -m MESSAGE
      git push

    \b
    Examples:
      gitease commit-push "fix typo"
      gitease commit-push "wip" --remote backup
    """
    _, console = _load(ctx)

    result = _run_workflow(
        ctx,
        console,
        lambda: commit_and_push(
            message,
            path=ctx.obj["cwd"],
            remote=remote,
            dry_run=dry_run,
            on_step=None if dry_run else console.print_step,
        ),
    )
    console.print_workflow_result(result)


@cli.command("status")
@click.option("--short", "-s", is_flag=True, help="Use git's short format")
@click.pass_context
def status_cmd(ctx: click.Context, short: bool) -> None:
    """Show the working tree status.

    Read-only: the repository is never modified.

    \b
    Examples:
      gitease status
      gitease -C ~/src/app status -s
    """
    _, console = _load(ctx)

    result = _run_workflow(
        ctx,
        console,
        lambda: show_status(path=ctx.obj["cwd"], short=short, on_step=console.print_step),
    )
    console.print_git_output(result.output)


@cli.group("config")
def config_group() -> None:
    """Configuration management.

    \b
    Settings (YAML):
      git.remote                 remote used by new-branch (default: origin)
      git.default_source_branch  new-branch source (default: main)
      output.verbose             echo git commands
      output.colored             colored output
    """


@config_group.command("show")
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Show the effective configuration."""
    config, console = _load(ctx)
    path = _config_path(ctx)

    if not path.exists():
        console.print_info(f"Configuration file not found: {path} (using defaults)")

    console.print_config(dump_config(config), source=str(path))


@config_group.command("init")
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing configuration file")
@click.pass_context
def config_init(ctx: click.Context, force: bool) -> None:
    """Write a default configuration file."""
    console = create_console(colored=not ctx.obj["no_color"])
    path, written = write_default_config(_config_path(ctx), force=force)

    if written:
        console.print_success(f"Created configuration: {path}")
    else:
        console.print_warning(f"Configuration already exists: {path} (use --force to overwrite)")


@config_group.command("validate")
@click.pass_context
def config_validate(ctx: click.Context) -> None:
    """Validate the configuration file."""
    console = create_console(colored=not ctx.obj["no_color"])
    path = _config_path(ctx)
    is_valid, errors = validate_config_file(path)

    if is_valid:
        console.print_success(f"Configuration is valid: {path}")
        return

    console.print_error(f"Configuration has errors: {path}")
    for err in errors:
        console.print(f"  • {err}", markup=False)
    ctx.exit(1)


@config_group.command("path")
@click.pass_context
def config_path_cmd(ctx: click.Context) -> None:
    """Print the configuration file path."""
    click.echo(str(_config_path(ctx)))


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
