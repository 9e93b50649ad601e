"""Score aggregation across months.

Months are loaded one at a time. A month that fails to load is logged and
skipped, so the totals always reflect whichever months are reachable.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, Iterable

from .clients.data_files import load_month
from .models import MonthData, MonthId, MonthLoad, Submission, TeamStanding

logger = logging.getLogger(__name__)

MonthLoader = Callable[[MonthId], Awaitable[MonthData]]


async def try_load_month(month_id: MonthId, loader: MonthLoader = load_month) -> MonthLoad:
    """Load a month, capturing any failure in the result instead of raising."""
    try:
        data = await loader(month_id)
    except Exception as exc:
        return MonthLoad.err(month_id, exc)
    return MonthLoad.ok(month_id, data)


def add_submissions(totals: dict[str, float], submissions: Iterable[Submission]) -> dict[str, float]:
    """Add each submission's score to ``totals`` in place, starting new teams at zero."""
    for submission in submissions:
        if submission.team_name not in totals:
            totals[submission.team_name] = 0
        totals[submission.team_name] += submission.score
    return totals


async def calculate_total_scores(
    month_ids: Iterable[MonthId],
    loader: MonthLoader = load_month,
) -> dict[str, float]:
    """Sum every team's scores across the given months.

    Teams only appear in the result if they have a submission in at least one
    month that loaded. Failed months are logged and contribute nothing.
    """
    totals: dict[str, float] = {}
    loaded = 0
    for month_id in month_ids:
        result = await try_load_month(month_id, loader)
        if not result.is_ok:
            logger.warning("Could not load month %s: %s", result.month_id, result.error)
            continue
        add_submissions(totals, result.data.submissions)
        loaded += 1

    logger.debug("Aggregated %d team(s) from %d month(s)", len(totals), loaded)
    return totals


def rank_teams(totals: dict[str, float]) -> list[TeamStanding]:
    """Order teams by total score, highest first.

    Equal totals share a position and the next position is skipped (1, 1, 3).
    Ties are listed alphabetically.
    """
    ordered = sorted(totals.items(), key=lambda item: (-item[1], item[0]))
    standings = []
    position = 0
    previous = None
    for index, (team_name, total) in enumerate(ordered, start=1):
        if total != previous:
            position = index
            previous = total
        standings.append(TeamStanding(position=position, team_name=team_name, total=total))
    return standings
