"""Turn a Message into readable text."""

from enum import Enum

from ..models import MessageKind, TextBlock, ToolResultBlock, ToolUseBlock
from .tools import format_tool_result, format_tool_use


class Role(Enum):
    ASSISTANT = ("🤖 Claude", "🤖")
    SYSTEM = ("📤 System", "📤")
    USER = ("👤 User", "👤")

    def __init__(self, label, icon):
        self.label = label
        self.icon = icon


def message_role(message):
    """Classify who authored a message, for display only.

    User entries that carry tool result metadata were produced by Claude
    Code itself, not typed by the user.
    """
    if message.kind == MessageKind.ASSISTANT:
        return Role.ASSISTANT
    if message.tool_result_meta is not None:
        return Role.SYSTEM
    return Role.USER


def render_block(block, verbose=False, message_meta=None):
    """Render one content block; blocks with nothing to show give ''."""
    if isinstance(block, TextBlock):
        return block.text
    elif isinstance(block, ToolUseBlock):
        return format_tool_use(block, verbose)
    elif isinstance(block, ToolResultBlock):
        return format_tool_result(block, verbose, fallback_meta=message_meta)
    return ""


def _is_bracketed(part):
    return part.startswith("[")


def join_parts(parts):
    """Join rendered blocks.

    A blank line separates a bracketed part (starting with "[") from a
    non-bracketed neighbour; everything else is joined with one newline.
    """
    result = ""
    for i, part in enumerate(parts):
        if i > 0:
            if _is_bracketed(part) != _is_bracketed(parts[i - 1]):
                result += "\n\n"
            else:
                result += "\n"
        result += part
    return result


def extract_message_content(message, verbose=False):
    """Extract the text representation of a message.

    Args:
        message: A decoded Message
        verbose: Render tool calls and results in full detail

    Returns:
        String content verbatim, block content rendered and joined, or ''
        when the message has no content.
    """
    content = message.content
    if not content:
        return ""
    if isinstance(content, str):
        return content

    parts = [
        render_block(block, verbose, message_meta=message.tool_result_meta)
        for block in content
    ]
    return join_parts([part for part in parts if part])
