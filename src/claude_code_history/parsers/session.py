"""Session file loading.

Reads a Claude Code ``.jsonl`` session log and assembles the ordered message
list. One bad line never aborts the whole session.
"""

import json
import logging
from pathlib import Path

from ..models import MalformedRecordError, Session, decode_message, is_message_entry

logger = logging.getLogger(__name__)

SESSION_SUFFIX = ".jsonl"


def session_path(projects_dir, project, session_id):
    """Return the path of the log file backing a session."""
    return Path(projects_dir) / project / f"{session_id}{SESSION_SUFFIX}"


def parse_session_lines(lines, project, session_id):
    """Build a Session from raw JSONL lines.

    Blank lines are skipped. Lines that are not valid JSON, or message
    entries that cannot be decoded, are logged and dropped. Non-message
    entries (summaries, snapshots, system records) are ignored.

    Args:
        lines: Iterable of text lines from the session file
        project: Project folder name the session belongs to
        session_id: Session identifier (file stem)

    Returns:
        A Session, or None when no message could be parsed.
    """
    messages = []

    for line_no, line in enumerate(lines, 1):
        line = line.strip()
        if not line:
            continue
        try:
            obj = json.loads(line)
        except json.JSONDecodeError as e:
            logger.warning(
                "Skipping corrupt line %d in %s/%s: %s", line_no, project, session_id, e
            )
            continue

        if isinstance(obj, dict) and "type" in obj and not is_message_entry(obj):
            logger.debug(
                "Ignoring %r entry on line %d in %s/%s",
                obj.get("type"),
                line_no,
                project,
                session_id,
            )
            continue

        try:
            messages.append(decode_message(obj))
        except MalformedRecordError as e:
            logger.warning(
                "Skipping malformed record on line %d in %s/%s: %s",
                line_no,
                project,
                session_id,
                e,
            )

    if not messages:
        return None

    return Session(
        id=session_id,
        project=project,
        messages=messages,
        start_time=messages[0].timestamp,
        end_time=messages[-1].timestamp,
    )


def load_session(projects_dir, project, session_id):
    """Load a session from ``<projects_dir>/<project>/<session_id>.jsonl``.

    Returns None when the file does not exist, cannot be read, or holds no
    parseable messages.
    """
    filepath = session_path(projects_dir, project, session_id)
    if not filepath.is_file():
        return None

    try:
        with open(filepath, "r", encoding="utf-8", errors="replace") as f:
            return parse_session_lines(f, project, session_id)
    except OSError as e:
        logger.warning("Error reading session file %s: %s", filepath, e)
        return None
