"""Mask Tasker Scores.

Monthly team-score submissions: load the JSON data files, total each team's
scores across months, and render the leaderboard.
"""

__version__ = "0.1.0"

from .core.scoring import calculate_total_scores, rank_teams

__all__ = ["calculate_total_scores", "rank_teams"]
