# gitease Output Module
# Rich console output

from gitease.output.console import Console, create_console

__all__ = [
    "Console",
    "create_console",
]
