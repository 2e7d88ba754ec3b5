"""View Claude Code conversation history from the command line."""

# Record model
from .models import (
    MalformedRecordError,
    Message,
    MessageKind,
    Session,
    TextBlock,
    ToolResultBlock,
    ToolResultMeta,
    ToolUseBlock,
    UnknownBlock,
    decode_message,
)

# Loading and discovery
from .parsers import (
    get_project_display_name,
    list_projects,
    list_sessions,
    load_session,
    parse_session_lines,
)

# Rendering
from .render import Role, extract_message_content, message_role

# Queries
from .query import (
    SearchReport,
    SessionView,
    search_sessions,
    show_session,
    summarize_sessions,
)

from .config import ConfigError, resolve_projects_dir

from .cli import cli, main

__all__ = [
    "MalformedRecordError",
    "Message",
    "MessageKind",
    "Session",
    "TextBlock",
    "ToolResultBlock",
    "ToolResultMeta",
    "ToolUseBlock",
    "UnknownBlock",
    "decode_message",
    "get_project_display_name",
    "list_projects",
    "list_sessions",
    "load_session",
    "parse_session_lines",
    "Role",
    "extract_message_content",
    "message_role",
    "SearchReport",
    "SessionView",
    "search_sessions",
    "show_session",
    "summarize_sessions",
    "ConfigError",
    "resolve_projects_dir",
    "cli",
    "main",
]
