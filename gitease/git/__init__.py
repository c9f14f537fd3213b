# gitease Git Module
# Git operations and step errors

from gitease.git.operations import (
    BranchCreateFailed,
    CommitFailed,
    FetchFailed,
    GitError,
    PushFailed,
    StageFailed,
    StatusFailed,
    commit,
    create_branch,
    fetch,
    get_head_commit,
    push,
    stage_all,
    status,
)

__all__ = [
    # Errors
    "GitError",
    "FetchFailed",
    "BranchCreateFailed",
    "PushFailed",
    "StageFailed",
    "CommitFailed",
    "StatusFailed",
    # Steps
    "fetch",
    "create_branch",
    "push",
    "stage_all",
    "commit",
    "status",
    # Queries
    "get_head_commit",
]
