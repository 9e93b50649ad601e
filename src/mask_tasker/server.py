"""Mask Tasker Scores MCP Server.

FastMCP server with read-only tools over the monthly score data files,
plus an HTML leaderboard resource.
Run: mask-tasker-scores
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from .config import get_settings
from .core.clients.data_files import load_config, load_month
from .core.errors import ScoresError
from .core.formatting import format_date
from .core.rendering import HtmlPage, show_error, show_leaderboard, show_loading
from .core.scoring import add_submissions, calculate_total_scores, rank_teams

logger = logging.getLogger(__name__)

LEADERBOARD_CONTAINER = "leaderboard"

READ_ONLY = ToolAnnotations(readOnlyHint=True, destructiveHint=False, idempotentHint=True, openWorldHint=True)


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncIterator[None]:
    """Configure logging for the server process."""
    settings = get_settings()
    logging.basicConfig(level=settings.logging_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    logger.info("Serving score data from %s", settings.data_url)
    yield


mcp = FastMCP(
    "Mask Tasker Scores",
    instructions="Monthly team-score submissions for Mask Tasker: list months, inspect a month's submissions, and see the overall leaderboard.",
    lifespan=lifespan,
)


def _error_payload(title: str, exc: ScoresError) -> dict:
    return {
        "title": title,
        "error": str(exc),
        "summary": f"{title} unavailable: {exc}",
    }


# ─── MCP UI Resource ──────────────────────────────────────────────────────────

LEADERBOARD_RESOURCE_URI = "ui://mask-tasker/leaderboard"


async def build_leaderboard_page() -> HtmlPage:
    """Render the overall leaderboard, or an error placeholder if the config is unreachable."""
    page = HtmlPage("Mask Tasker Leaderboard", (LEADERBOARD_CONTAINER,))
    show_loading(page, LEADERBOARD_CONTAINER)
    try:
        config = await load_config()
    except ScoresError:
        show_error(page, LEADERBOARD_CONTAINER, "Could not load the leaderboard. Please try again later.")
        return page
    totals = await calculate_total_scores(config.months)
    show_leaderboard(page, LEADERBOARD_CONTAINER, rank_teams(totals))
    return page


@mcp.resource(LEADERBOARD_RESOURCE_URI, mime_type="text/html")
async def leaderboard_ui() -> str:
    """Mask Tasker leaderboard as an HTML page."""
    page = await build_leaderboard_page()
    return page.render()


# ─── Tool 1: Months ──────────────────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def scores_months() -> dict:
    """List the month identifiers that have score data."""
    try:
        config = await load_config()
    except ScoresError as exc:
        return _error_payload("Months", exc)
    months = [str(m) for m in config.months]
    return {
        "title": "Months",
        "months": months,
        "count": len(months),
        "summary": f"{len(months)} month(s) available" + (f": {', '.join(months)}" if months else ""),
    }


# ─── Tool 2: Single month ────────────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def scores_month(month_id: str) -> dict:
    """One month's submissions and per-team totals.

    Args:
        month_id: Month identifier as listed by scores_months (e.g. '1', '2').
    """
    try:
        data = await load_month(month_id)
    except ScoresError as exc:
        return _error_payload(f"Month {month_id}", exc)

    totals = add_submissions({}, data.submissions)
    return {
        "title": data.label or f"Month {month_id}",
        "month_id": month_id,
        "date": format_date(data.date) if data.date else None,
        "submissions": [s.model_dump(by_alias=True) for s in data.submissions],
        "team_totals": totals,
        "summary": f"{len(data.submissions)} submission(s) from {len(totals)} team(s).",
    }


# ─── Tool 3: Leaderboard ─────────────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def scores_leaderboard() -> dict:
    """Overall standings — every team's total score across all months that could be loaded."""
    try:
        config = await load_config()
    except ScoresError as exc:
        return _error_payload("Leaderboard", exc)

    totals = await calculate_total_scores(config.months)
    standings = rank_teams(totals)

    if standings:
        leader = standings[0]
        summary = f"{len(standings)} team(s) ranked. Leader: {leader.team_name} with {leader.total:g} points."
    else:
        summary = "No scores recorded yet."

    return {
        "title": "Leaderboard",
        "months": [str(m) for m in config.months],
        "standings": [s.model_dump() for s in standings],
        "summary": summary,
    }


def main():
    """Entry point for the CLI command."""
    mcp.run()


if __name__ == "__main__":
    main()
