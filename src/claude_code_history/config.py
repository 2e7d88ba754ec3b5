"""Locating the Claude Code projects directory."""

import os
from pathlib import Path

PROJECTS_DIR_ENV = "CLAUDE_HISTORY_DIR"


class ConfigError(Exception):
    """Raised when the projects directory cannot be determined."""

    pass


def resolve_projects_dir(source=None, environ=None):
    """Resolve the directory that holds one folder per project.

    Precedence: explicit source, then the CLAUDE_HISTORY_DIR environment
    variable, then ~/.claude/projects based on HOME (or USERPROFILE).

    Raises ConfigError when none of them is available.
    """
    if environ is None:
        environ = os.environ

    if source:
        return Path(source).expanduser()

    override = environ.get(PROJECTS_DIR_ENV)
    if override:
        return Path(override).expanduser()

    home = environ.get("HOME") or environ.get("USERPROFILE")
    if not home:
        raise ConfigError(
            "Cannot determine the home directory: set HOME, USERPROFILE "
            f"or {PROJECTS_DIR_ENV}, or pass --source."
        )
    return Path(home) / ".claude" / "projects"
