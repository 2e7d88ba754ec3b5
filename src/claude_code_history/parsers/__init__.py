"""Session loading and discovery.

This package reads Claude Code session files and enumerates the projects
and sessions available under a projects directory.
"""

from .session import (
    SESSION_SUFFIX,
    load_session,
    parse_session_lines,
    session_path,
)

from .discovery import (
    get_project_display_name,
    list_projects,
    list_sessions,
)

__all__ = [
    # Session loading
    "SESSION_SUFFIX",
    "load_session",
    "parse_session_lines",
    "session_path",
    # Discovery
    "get_project_display_name",
    "list_projects",
    "list_sessions",
]
