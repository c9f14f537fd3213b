# gitease Default Configuration
# Default configuration as Python dict and YAML generator

from typing import Any

import yaml

DEFAULT_CONFIG: dict[str, Any] = {
    "git": {
        "remote": "origin",
        "default_source_branch": "main",
    },
    "output": {
        "verbose": False,
        "colored": True,
    },
}


def generate_default_config() -> str:
    """
    Generate the default configuration file contents.

    Returns:
        YAML string with a short comment header.
    """
    header = (
        "# gitease configuration\n"
        "#\n"
        "# git.remote                 remote used by new-branch (fetch, push -u)\n"
        "# git.default_source_branch  branch new-branch starts from\n"
        "# output.verbose             echo each git command before it runs\n"
        "# output.colored             colored console output\n"
        "\n"
    )
    body = yaml.dump(DEFAULT_CONFIG, default_flow_style=False, sort_keys=False, allow_unicode=True)
    return header + body
