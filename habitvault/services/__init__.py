from habitvault.services.analytics import completion_rates, heatmap, timeframe_completion, weekly_trend
from habitvault.services.streaks import compute_current_streak, recompute_streak
from habitvault.services.timeframes import habit_timeframe, timeframe_from_description

__all__ = [
    "compute_current_streak",
    "recompute_streak",
    "completion_rates",
    "heatmap",
    "weekly_trend",
    "timeframe_completion",
    "habit_timeframe",
    "timeframe_from_description",
]
