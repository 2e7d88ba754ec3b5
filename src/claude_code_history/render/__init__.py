"""Plain-text rendering of session messages."""

from .content import (
    Role,
    extract_message_content,
    join_parts,
    message_role,
    render_block,
)
from .tools import (
    DEFAULT_FORMATTER,
    TOOL_FORMATTERS,
    ToolFormatter,
    format_tool_result,
    format_tool_use,
    truncate,
)

__all__ = [
    "Role",
    "extract_message_content",
    "join_parts",
    "message_role",
    "render_block",
    "DEFAULT_FORMATTER",
    "TOOL_FORMATTERS",
    "ToolFormatter",
    "format_tool_result",
    "format_tool_use",
    "truncate",
]
