"""Project and session discovery.

Claude Code keeps one folder per project under the projects directory and
one ``<sessionId>.jsonl`` file per session inside it.
"""

import logging
from pathlib import Path

from .session import SESSION_SUFFIX

logger = logging.getLogger(__name__)


def list_projects(projects_dir):
    """Return the sorted project folder names under projects_dir.

    A missing or unreadable directory yields an empty list.
    """
    folder = Path(projects_dir)
    if not folder.is_dir():
        logger.warning("Projects folder not found: %s", folder)
        return []

    try:
        return sorted(entry.name for entry in folder.iterdir() if entry.is_dir())
    except OSError as e:
        logger.warning("Error reading projects directory %s: %s", folder, e)
        return []


def list_sessions(projects_dir, project):
    """Return the sorted session ids (file stems) of a project."""
    folder = Path(projects_dir) / project
    if not folder.is_dir():
        return []

    try:
        return sorted(
            entry.stem
            for entry in folder.iterdir()
            if entry.is_file() and entry.name.endswith(SESSION_SUFFIX)
        )
    except OSError as e:
        logger.warning("Error reading project %s: %s", project, e)
        return []


def get_project_display_name(folder_name: str) -> str:
    """Convert an encoded project folder name to a readable project name.

    Claude Code encodes the working directory into the folder name:
    - -home-user-projects-myproject -> myproject
    - -Users-name-code-app -> app

    Leading home prefixes and common container directories (projects, code,
    src, ...) are dropped; the remainder is joined back with dashes.
    """
    prefixes_to_strip = ("-home-", "-mnt-c-users-", "-users-")

    name = folder_name
    for prefix in prefixes_to_strip:
        if name.lower().startswith(prefix):
            name = name[len(prefix) :]
            break

    parts = [p for p in name.split("-") if p]
    skip_dirs = {"projects", "code", "repos", "src", "dev", "work", "documents"}

    # The first part is usually a username when a container dir follows it
    if len(parts) > 1 and any(p.lower() in skip_dirs for p in parts[1:]):
        parts = parts[1:]

    # Keep everything after the last container directory
    for i in range(len(parts) - 1, -1, -1):
        if parts[i].lower() in skip_dirs:
            parts = parts[i + 1 :]
            break

    if parts:
        return "-".join(parts)
    return folder_name
