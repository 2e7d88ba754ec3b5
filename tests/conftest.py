"""Pytest configuration and fixtures for claude-code-history tests."""

import json

import pytest


def _entry(
    entry_type,
    content,
    timestamp,
    uuid=None,
    parent_uuid=None,
    is_meta=False,
    tool_use_result=None,
):
    entry = {
        "type": entry_type,
        "uuid": uuid or f"{entry_type}-{timestamp}",
        "parentUuid": parent_uuid,
        "sessionId": "test-session",
        "timestamp": timestamp,
        "message": {"role": entry_type, "content": content},
    }
    if is_meta:
        entry["isMeta"] = True
    if tool_use_result is not None:
        entry["toolUseResult"] = tool_use_result
    return entry


@pytest.fixture
def make_entry():
    """Factory for raw session log entries (dicts)."""
    return _entry


@pytest.fixture
def projects_dir(tmp_path):
    """An empty Claude projects directory."""
    folder = tmp_path / "projects"
    folder.mkdir()
    return folder


@pytest.fixture
def write_session(projects_dir):
    """Write a session file; entries may be dicts or raw strings (lines)."""

    def write(project, session_id, entries):
        project_dir = projects_dir / project
        project_dir.mkdir(parents=True, exist_ok=True)
        lines = [e if isinstance(e, str) else json.dumps(e) for e in entries]
        path = project_dir / f"{session_id}.jsonl"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return write


@pytest.fixture
def numbered_session(write_session, make_entry):
    """A 10-message session alternating user and assistant messages."""
    entries = []
    for i in range(1, 11):
        entry_type = "user" if i % 2 else "assistant"
        content = (
            f"message {i}" if entry_type == "user" else [{"type": "text", "text": f"message {i}"}]
        )
        entries.append(
            make_entry(entry_type, content, f"2025-01-15T10:00:{i:02d}.000Z", uuid=f"m{i}")
        )
    write_session("-home-user-projects-app", "numbered", entries)
    return "-home-user-projects-app", "numbered"
