"""Rendering status placeholders and the leaderboard into named containers.

Rendering goes through a ``ContentSink`` so the scoring code never touches a
page directly. ``HtmlPage`` is the in-memory sink used by the server.
"""

from __future__ import annotations

import logging
from typing import Protocol

from .formatting import escape_html
from .models import TeamStanding

logger = logging.getLogger(__name__)

DEFAULT_LOADING_MESSAGE = "Loading..."


class ContentSink(Protocol):
    """Anything that holds named containers whose inner HTML can be replaced."""

    def has_container(self, container_id: str) -> bool: ...

    def set_content(self, container_id: str, html: str) -> None: ...


class HtmlPage:
    """A minimal HTML document made of named ``<div>`` containers."""

    def __init__(self, title: str, container_ids: tuple[str, ...] = ()):
        self.title = title
        self._containers: dict[str, str] = {cid: "" for cid in container_ids}

    def add_container(self, container_id: str, html: str = "") -> None:
        self._containers[container_id] = html

    def has_container(self, container_id: str) -> bool:
        return container_id in self._containers

    def set_content(self, container_id: str, html: str) -> None:
        if container_id not in self._containers:
            raise KeyError(container_id)
        self._containers[container_id] = html

    def content(self, container_id: str) -> str:
        return self._containers[container_id]

    def render(self) -> str:
        body = "\n".join(
            f'<div id="{escape_html(cid)}">{html}</div>' for cid, html in self._containers.items()
        )
        return (
            "<!DOCTYPE html>\n"
            '<html lang="en">\n'
            f"<head><meta charset=\"utf-8\"><title>{escape_html(self.title)}</title></head>\n"
            f"<body>\n<h1>{escape_html(self.title)}</h1>\n{body}\n</body>\n"
            "</html>\n"
        )


def _render_into(sink: ContentSink, container_id: str, html: str) -> bool:
    if not sink.has_container(container_id):
        logger.debug("Container %s not found, nothing rendered", container_id)
        return False
    sink.set_content(container_id, html)
    return True


def show_error(sink: ContentSink, container_id: str, message: str) -> bool:
    """Show an error message in a container. Returns False if the container is missing."""
    html = f'<p style="text-align: center; color: red;">{escape_html(message)}</p>'
    return _render_into(sink, container_id, html)


def show_loading(sink: ContentSink, container_id: str, message: str = DEFAULT_LOADING_MESSAGE) -> bool:
    """Show a loading message in a container. Returns False if the container is missing."""
    return _render_into(sink, container_id, f'<div class="loading">{escape_html(message)}</div>')


def _format_score(total: float) -> str:
    return str(int(total)) if float(total).is_integer() else f"{total:g}"


def leaderboard_table(standings: list[TeamStanding]) -> str:
    if not standings:
        return '<p class="empty">No scores yet.</p>'
    rows = "\n".join(
        f"<tr><td>{s.position}</td><td>{escape_html(s.team_name)}</td><td>{_format_score(s.total)}</td></tr>"
        for s in standings
    )
    return (
        '<table class="leaderboard">\n'
        "<thead><tr><th>#</th><th>Team</th><th>Score</th></tr></thead>\n"
        f"<tbody>\n{rows}\n</tbody>\n"
        "</table>"
    )


def show_leaderboard(sink: ContentSink, container_id: str, standings: list[TeamStanding]) -> bool:
    """Render the standings as a table. Returns False if the container is missing."""
    return _render_into(sink, container_id, leaderboard_table(standings))
