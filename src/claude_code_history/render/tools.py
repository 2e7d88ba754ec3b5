"""Plain-text formatting of tool calls and tool results.

Every known tool has a compact formatter (one short line used for previews
and search) and a verbose formatter (multi-line detail for ``--full``).
Tools missing from ``TOOL_FORMATTERS`` use ``DEFAULT_FORMATTER``.
"""

import json
from typing import Callable, NamedTuple

INDENT = "   "
ELLIPSIS = "..."

BASH_COMMAND_PREVIEW = 40
EDIT_PREVIEW = 50
TOOL_RESULT_PREVIEW = 80

TODO_STATUS_ICONS = {
    "pending": "⏳",
    "in_progress": "🔄",
    "completed": "✅",
}
TODO_OTHER_ICON = "📌"
TODO_PREVIEW_COUNT = 3


class ToolFormatter(NamedTuple):
    compact: Callable[[str, dict], str]
    verbose: Callable[[str, dict], str]


def truncate(text, max_length):
    """Cut text to max_length characters, appending an ellipsis if cut."""
    if len(text) > max_length:
        return text[:max_length] + ELLIPSIS
    return text


def indent_lines(text, prefix=INDENT):
    """Prefix every line of text, including empty ones."""
    return "\n".join(prefix + line for line in text.split("\n"))


def base_name(path):
    """Last path segment, or the whole path when it ends with a slash."""
    return path.split("/")[-1] or path


def _str_field(tool_input, key):
    value = tool_input.get(key)
    if value is None or value is False:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def _list_field(tool_input, key):
    value = tool_input.get(key)
    return value if isinstance(value, list) else []


# Bash


def _bash_compact(name, tool_input):
    description = _str_field(tool_input, "description")
    command = _str_field(tool_input, "command")
    if description:
        return f"🔧 {description}"
    if command:
        return f"🔧 {truncate(command, BASH_COMMAND_PREVIEW)}"
    return "🔧 Bash command"


def _bash_verbose(name, tool_input):
    description = _str_field(tool_input, "description")
    command = _str_field(tool_input, "command")
    result = "🔧 Running Bash command"
    if description:
        result += f"\n{INDENT}{description}"
    if command:
        result += f"\n{INDENT}$ {command}"
    return result


# Read


def _read_compact(name, tool_input):
    file_path = _str_field(tool_input, "file_path")
    if file_path:
        return f"📖 {base_name(file_path)}"
    return "📖 Reading file"


def _read_verbose(name, tool_input):
    file_path = _str_field(tool_input, "file_path")
    limit = _str_field(tool_input, "limit")
    offset = _str_field(tool_input, "offset")
    result = "📖 Reading file"
    if file_path:
        result += f"\n{INDENT}📄 {base_name(file_path)}"
        details = []
        if limit and limit != "0":
            details.append(f"{limit} lines")
        if offset and offset != "0":
            details.append(f"from line {offset}")
        if details:
            result += f" ({', '.join(details)})"
    return result


# Edit / MultiEdit


def _edit_compact(name, tool_input):
    file_path = _str_field(tool_input, "file_path")
    if file_path:
        return f"✏️ {base_name(file_path)}"
    return "✏️ Editing file"


def _edit_verbose(name, tool_input):
    file_path = _str_field(tool_input, "file_path")
    old_string = _str_field(tool_input, "old_string")
    new_string = _str_field(tool_input, "new_string")
    result = "✏️  Editing file"
    if file_path:
        result += f"\n{INDENT}📄 {base_name(file_path)}"
    if old_string and new_string:
        result += f'\n{INDENT}🔄 Replacing: "{truncate(old_string, EDIT_PREVIEW)}"'
        result += f'\n{INDENT}➡️  With: "{truncate(new_string, EDIT_PREVIEW)}"'
    return result


def _multi_edit_compact(name, tool_input):
    file_path = _str_field(tool_input, "file_path")
    if file_path:
        return f"📝 {base_name(file_path)}"
    return "📝 Multi-editing file"


def _multi_edit_verbose(name, tool_input):
    file_path = _str_field(tool_input, "file_path")
    edits = _list_field(tool_input, "edits")
    result = "📝 Multi-editing file"
    if file_path:
        result += f"\n{INDENT}📄 {base_name(file_path)}"
    result += f"\n{INDENT}🔄 {len(edits)} changes"
    return result


# Write


def _write_compact(name, tool_input):
    file_path = _str_field(tool_input, "file_path")
    if file_path:
        return f"💾 {base_name(file_path)}"
    return "💾 Creating file"


def _write_verbose(name, tool_input):
    file_path = _str_field(tool_input, "file_path")
    content = _str_field(tool_input, "content")
    result = "💾 Creating file"
    if file_path:
        result += f"\n{INDENT}📄 {base_name(file_path)}"
    if content:
        result += f"\n{INDENT}📏 {len(content):,} characters"
    return result


# TodoWrite / TodoRead


def _todo_write_compact(name, tool_input):
    todos = _list_field(tool_input, "todos")
    return f"📋 {len(todos)} tasks"


def _todo_write_verbose(name, tool_input):
    todos = _list_field(tool_input, "todos")
    result = "📋 Managing tasks"
    result += f"\n{INDENT}📝 {len(todos)} tasks updated"
    for todo in todos[:TODO_PREVIEW_COUNT]:
        if not isinstance(todo, dict):
            todo = {}
        icon = TODO_STATUS_ICONS.get(_str_field(todo, "status"), TODO_OTHER_ICON)
        result += f"\n{INDENT}{icon} {_str_field(todo, 'content')}"
    if len(todos) > TODO_PREVIEW_COUNT:
        result += f"\n{INDENT}... and {len(todos) - TODO_PREVIEW_COUNT} more tasks"
    return result


def _todo_read(name, tool_input):
    return "📋 Reading tasks"


# Glob / Grep


def _glob_compact(name, tool_input):
    pattern = _str_field(tool_input, "pattern")
    return f"🔍 {pattern}" if pattern else "🔍 Finding files"


def _glob_verbose(name, tool_input):
    pattern = _str_field(tool_input, "pattern")
    path = _str_field(tool_input, "path")
    result = "🔍 Finding files"
    if pattern:
        result += f"\n{INDENT}🎯 Pattern: {pattern}"
    if path:
        result += f"\n{INDENT}📁 In: {path}"
    return result


def _grep_compact(name, tool_input):
    pattern = _str_field(tool_input, "pattern")
    return f"🔎 {pattern}" if pattern else "🔎 Searching"


def _grep_verbose(name, tool_input):
    pattern = _str_field(tool_input, "pattern")
    include = _str_field(tool_input, "include")
    path = _str_field(tool_input, "path")
    result = "🔎 Searching content"
    if pattern:
        result += f"\n{INDENT}🎯 Pattern: {pattern}"
    if include:
        result += f"\n{INDENT}📋 Include: {include}"
    if path:
        result += f"\n{INDENT}📁 In: {path}"
    return result


# LS


def _ls_compact(name, tool_input):
    path = _str_field(tool_input, "path")
    if path:
        return f"📁 {base_name(path)}"
    return "📁 Listing directory"


# Fallback for tools without a dedicated formatter


def _default_compact(name, tool_input):
    return f"🔧 {name}"


def _default_verbose(name, tool_input):
    dump = json.dumps(tool_input, indent=2, ensure_ascii=False, default=str)
    return f"🔧 {name}\n{INDENT}{dump}"


DEFAULT_FORMATTER = ToolFormatter(_default_compact, _default_verbose)

TOOL_FORMATTERS = {
    "Bash": ToolFormatter(_bash_compact, _bash_verbose),
    "Read": ToolFormatter(_read_compact, _read_verbose),
    "Edit": ToolFormatter(_edit_compact, _edit_verbose),
    "MultiEdit": ToolFormatter(_multi_edit_compact, _multi_edit_verbose),
    "Write": ToolFormatter(_write_compact, _write_verbose),
    "TodoWrite": ToolFormatter(_todo_write_compact, _todo_write_verbose),
    "TodoRead": ToolFormatter(_todo_read, _todo_read),
    "Glob": ToolFormatter(_glob_compact, _glob_verbose),
    "Grep": ToolFormatter(_grep_compact, _grep_verbose),
    "LS": ToolFormatter(_ls_compact, _default_verbose),
}


def format_tool_use(block, verbose=False):
    """Render a ToolUseBlock using the formatter registered for its tool."""
    formatter = TOOL_FORMATTERS.get(block.name, DEFAULT_FORMATTER)
    render = formatter.verbose if verbose else formatter.compact
    return render(block.name, block.input or {})


def stringify_result_content(content):
    """Tool result content as text; structured content becomes compact JSON."""
    if isinstance(content, str):
        return content
    return json.dumps(content, ensure_ascii=False, separators=(",", ":"), default=str)


def _has_result_content(content):
    return content is not None and content != ""


def format_tool_result(block, verbose=False, fallback_meta=None):
    """Render a ToolResultBlock.

    Args:
        block: The tool result block
        verbose: Full output with indented content and stdout/stderr sections
        fallback_meta: ToolResultMeta to use when the block carries none

    Returns:
        The rendered text.
    """
    if not verbose:
        if _has_result_content(block.content):
            text = stringify_result_content(block.content)
            return f"📤 {truncate(text, TOOL_RESULT_PREVIEW)}"
        return "📤 Tool completed"

    result = "📤 Tool Result"
    if _has_result_content(block.content):
        result += "\n" + indent_lines(stringify_result_content(block.content))

    meta = block.meta or fallback_meta
    if meta is not None:
        if meta.stdout:
            result += f"\n{INDENT}📤 Output:\n{indent_lines(meta.stdout)}"
        if meta.stderr:
            result += f"\n{INDENT}⚠️  Error:\n{indent_lines(meta.stderr)}"
        if meta.interrupted:
            result += f"\n{INDENT}⏹️  Interrupted: true"
    return result
