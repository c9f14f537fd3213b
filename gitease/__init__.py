"""gitease - shortcuts for everyday git command sequences.

Wraps fetch/checkout/push, add/commit/push and status behind three
subcommands with step-by-step error reporting.
"""

__version__ = "1.0.0"
__author__ = "gitease contributors"

__all__ = [
    "__version__",
    "new_branch",
    "commit_and_push",
    "show_status",
    "GitError",
]


def __getattr__(name: str):
    """Lazy import to avoid loading dependencies during setup."""
    if name in ("new_branch", "commit_and_push", "show_status"):
        from gitease import workflows

        return getattr(workflows, name)
    if name == "GitError":
        from gitease.git.operations import GitError

        return GitError
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
