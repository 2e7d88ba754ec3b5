"""Typed records for Claude Code session log entries.

Each line of a session ``.jsonl`` file is one JSON object. Only ``user`` and
``assistant`` entries become :class:`Message` objects; content blocks are
decoded into one dataclass per block type so the renderers can dispatch on
type instead of poking at raw dicts.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class MalformedRecordError(ValueError):
    """Raised when a log line cannot be decoded into a Message."""


class MessageKind(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


@dataclass
class TextBlock:
    text: str


@dataclass
class ToolUseBlock:
    name: str
    input: dict


@dataclass
class ToolResultMeta:
    """Auxiliary data Claude Code attaches to tool results (``toolUseResult``).

    The payload varies per tool. Dict payloads fill the named fields, anything
    else is only kept in ``raw``.
    """

    stdout: str = ""
    stderr: str = ""
    interrupted: bool = False
    raw: Any = None


@dataclass
class ToolResultBlock:
    content: Any = None
    meta: ToolResultMeta | None = None


@dataclass
class UnknownBlock:
    type: str


@dataclass
class Message:
    uuid: str
    kind: MessageKind
    timestamp: datetime
    content: Any = None  # None, str, or list of blocks
    parent_uuid: str | None = None
    is_meta: bool = False
    tool_result_meta: ToolResultMeta | None = None
    raw: dict = field(default_factory=dict, repr=False)


@dataclass
class Session:
    id: str
    project: str
    messages: list
    start_time: datetime
    end_time: datetime


def parse_timestamp(value):
    """Parse an ISO-8601 timestamp as written by Claude Code.

    Accepts a trailing ``Z`` for UTC. Raises MalformedRecordError when the
    value is missing or unparseable.
    """
    if not isinstance(value, str) or not value:
        raise MalformedRecordError("missing timestamp")
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise MalformedRecordError(f"invalid timestamp: {value!r}")


def decode_tool_result_meta(payload):
    """Decode a ``toolUseResult`` payload, or return None when absent.

    Empty dicts and lists still count as present: the entry was produced by
    a tool, even if it carries no details.
    """
    if payload is None or payload is False or payload == "":
        return None
    if not isinstance(payload, dict):
        return ToolResultMeta(raw=payload)
    stdout = payload.get("stdout")
    stderr = payload.get("stderr")
    return ToolResultMeta(
        stdout=stdout if isinstance(stdout, str) else "",
        stderr=stderr if isinstance(stderr, str) else "",
        interrupted=bool(payload.get("interrupted", False)),
        raw=payload,
    )


def decode_block(block):
    """Decode one content block. Unrecognised shapes become UnknownBlock."""
    if not isinstance(block, dict):
        return UnknownBlock(type=type(block).__name__)

    block_type = block.get("type", "")
    if block_type == "text":
        text = block.get("text")
        return TextBlock(text=text if isinstance(text, str) else "")
    elif block_type == "tool_use":
        name = block.get("name")
        tool_input = block.get("input")
        return ToolUseBlock(
            name=name if isinstance(name, str) and name else "Unknown tool",
            input=tool_input if isinstance(tool_input, dict) else {},
        )
    elif block_type == "tool_result":
        return ToolResultBlock(
            content=block.get("content"),
            meta=decode_tool_result_meta(block.get("toolUseResult")),
        )
    return UnknownBlock(type=str(block_type))


def decode_content(content):
    """Decode ``message.content``: a string, a list of blocks, or nothing."""
    if content is None or isinstance(content, str):
        return content
    if isinstance(content, list):
        return [decode_block(block) for block in content]
    return None


def is_message_entry(obj):
    """Check whether a raw log entry is a user or assistant message."""
    return isinstance(obj, dict) and obj.get("type") in ("user", "assistant")


def decode_message(obj):
    """Decode one raw log entry into a Message.

    Raises MalformedRecordError when the entry is not a user/assistant
    message or has no usable timestamp. Every other missing field falls back
    to a default.
    """
    if not isinstance(obj, dict):
        raise MalformedRecordError(f"expected a JSON object, got {type(obj).__name__}")
    if not is_message_entry(obj):
        raise MalformedRecordError(f"not a message entry: type={obj.get('type')!r}")

    message_data = obj.get("message")
    if not isinstance(message_data, dict):
        message_data = {}

    return Message(
        uuid=obj.get("uuid") or "",
        parent_uuid=obj.get("parentUuid"),
        kind=MessageKind(obj["type"]),
        timestamp=parse_timestamp(obj.get("timestamp")),
        content=decode_content(message_data.get("content")),
        is_meta=bool(obj.get("isMeta", False)),
        tool_result_meta=decode_tool_result_meta(obj.get("toolUseResult")),
        raw=obj,
    )
