"""Queries over the projects directory: listing, showing and searching sessions.

Every function takes the projects directory explicitly and reloads the
session files it needs; nothing is cached between calls.
"""

from dataclasses import dataclass, field
from datetime import datetime

from .parsers import list_projects, list_sessions, load_session
from .render import Role, extract_message_content, message_role

PREVIEW_LINES = 3
SEARCH_PREVIEW_COUNT = 3
SEARCH_PREVIEW_LENGTH = 100


@dataclass
class SessionSummary:
    id: str
    start_time: datetime
    message_count: int


@dataclass
class RenderedMessage:
    message: object
    role: Role
    content: str


@dataclass
class SessionView:
    session: object
    messages: list
    total: int
    limit: int | None = None
    recent: int | None = None

    @property
    def shown(self):
        return len(self.messages)

    @property
    def truncation_note(self):
        """Footer text when recent/limit hid part of the session, else None."""
        if self.recent and self.recent < self.total:
            return f"Showing recent {self.recent} of {self.total} messages"
        if self.limit and self.limit < self.total:
            return f"Showing {self.limit} of {self.total} messages"
        return None


@dataclass
class MatchPreview:
    timestamp: datetime
    role: Role
    text: str


@dataclass
class SessionMatches:
    project: str
    session_id: str
    matches: list
    previews: list = field(default_factory=list)

    @property
    def count(self):
        return len(self.matches)

    @property
    def hidden(self):
        """Number of matches not covered by a preview."""
        return self.count - len(self.previews)


@dataclass
class SearchReport:
    keyword: str
    results: list = field(default_factory=list)

    @property
    def total(self):
        return sum(result.count for result in self.results)


def summarize_sessions(projects_dir, project):
    """List the sessions of a project with start time and message count.

    Sessions without any parseable message are left out.
    """
    summaries = []
    for session_id in list_sessions(projects_dir, project):
        session = load_session(projects_dir, project, session_id)
        if session is None:
            continue
        summaries.append(
            SessionSummary(
                id=session_id,
                start_time=session.start_time,
                message_count=len(session.messages),
            )
        )
    return summaries


def slice_messages(messages, limit=None, recent=None):
    """Keep the last `recent` messages, or else the first `limit` messages."""
    if recent:
        return messages[-recent:]
    if limit:
        return messages[:limit]
    return list(messages)


def show_session(projects_dir, project, session_id, full=False, limit=None, recent=None):
    """Load and render a session for display.

    Slicing applies to the raw message list, meta entries included; meta
    entries are then dropped from the rendered list.

    Args:
        projects_dir: The projects directory
        project: Project folder name
        session_id: Session identifier
        full: Render content in verbose mode
        limit: Show only the first N messages
        recent: Show only the last N messages (wins over limit)

    Returns:
        A SessionView, or None when the session does not exist.
    """
    session = load_session(projects_dir, project, session_id)
    if session is None:
        return None

    rendered = []
    for message in slice_messages(session.messages, limit=limit, recent=recent):
        if message.is_meta:
            continue
        rendered.append(
            RenderedMessage(
                message=message,
                role=message_role(message),
                content=extract_message_content(message, verbose=full),
            )
        )

    return SessionView(
        session=session,
        messages=rendered,
        total=len(session.messages),
        limit=limit,
        recent=recent,
    )


def preview_lines(text, max_lines=PREVIEW_LINES):
    """First max_lines lines of text, with a trailing '...' line if cut."""
    lines = text.split("\n")
    if len(lines) > max_lines:
        return "\n".join(lines[:max_lines]) + "\n..."
    return text


def search_preview(text, max_length=SEARCH_PREVIEW_LENGTH):
    """Single-line preview of a search match."""
    preview = text[:max_length].replace("\n", " ")
    if len(text) > max_length:
        preview += "..."
    return preview


def search_session(session, keyword):
    """Return the non-meta messages of a session whose compact text contains keyword."""
    needle = keyword.lower()
    matches = []
    for message in session.messages:
        if message.is_meta:
            continue
        content = extract_message_content(message, verbose=False)
        if needle in content.lower():
            matches.append(message)
    return matches


def search_sessions(projects_dir, keyword, project=None):
    """Case-insensitive substring search across sessions.

    Args:
        projects_dir: The projects directory
        keyword: Text to look for
        project: Restrict the search to one project folder

    Returns:
        A SearchReport with one SessionMatches per session that matched, in
        discovery order.
    """
    projects = [project] if project else list_projects(projects_dir)
    report = SearchReport(keyword=keyword)

    for proj in projects:
        for session_id in list_sessions(projects_dir, proj):
            session = load_session(projects_dir, proj, session_id)
            if session is None:
                continue

            matches = search_session(session, keyword)
            if not matches:
                continue

            previews = [
                MatchPreview(
                    timestamp=match.timestamp,
                    role=message_role(match),
                    text=search_preview(extract_message_content(match)),
                )
                for match in matches[:SEARCH_PREVIEW_COUNT]
            ]
            report.results.append(
                SessionMatches(
                    project=proj,
                    session_id=session_id,
                    matches=matches,
                    previews=previews,
                )
            )

    return report
