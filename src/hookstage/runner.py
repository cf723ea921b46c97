"""
Hook runner - what the installed hook script executes.

Commands come from the project's pyproject.toml:

    [tool.hookstage.hooks]
    pre-commit = ["ruff check .", "pytest -q"]
"""

import os
import subprocess
import tomllib
from pathlib import Path

from hookstage.errors import HookConfigError
from hookstage.types import HookName

PYPROJECT = "pyproject.toml"


def load_hook_commands(root: str | os.PathLike, hook: HookName | str) -> list[str]:
    """Load the commands configured for `hook`, returning [] if none are."""
    hook = HookName(hook)
    pyproject = Path(root) / PYPROJECT
    if not pyproject.exists():
        return []

    try:
        with open(pyproject, "rb") as fh:
            data = tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise HookConfigError(f"{pyproject}: {exc}") from exc

    hooks = data
    for key in ("tool", "hookstage", "hooks"):
        hooks = hooks.get(key, {})
        if not isinstance(hooks, dict):
            raise HookConfigError(f"{pyproject}: {key} must be a table")
    commands = hooks.get(hook.value, [])

    if isinstance(commands, str):
        return [commands]
    if not isinstance(commands, list) or not all(isinstance(c, str) for c in commands):
        raise HookConfigError(
            f"{pyproject}: tool.hookstage.hooks.{hook.value} must be a string or a list of strings"
        )
    return commands


def run_hook(root: str | os.PathLike, hook: HookName | str) -> int:
    """
    Run the configured commands in order from `root`.

    Returns the exit status of the first failing command, or 0.
    """
    for command in load_hook_commands(root, hook):
        result = subprocess.run(command, shell=True, cwd=root)
        if result.returncode != 0:
            return result.returncode
    return 0
