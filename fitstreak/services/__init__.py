"""Services module."""

from .streaks import calculate_streak, calculate_consistency, next_milestone, milestone_progress
from .streak_tracker import StreakTracker
from .dashboard import DashboardService

__all__ = [
    "calculate_streak",
    "calculate_consistency",
    "next_milestone",
    "milestone_progress",
    "StreakTracker",
    "DashboardService",
]
