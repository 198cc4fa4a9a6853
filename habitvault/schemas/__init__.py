from habitvault.schemas.analytics import CompletionRateOut, HeatmapCellOut, TimeframeCompletionOut, WeeklyTrendOut
from habitvault.schemas.completion import CompletionIn, CompletionOut, HabitDayOut
from habitvault.schemas.habit import HabitIn, HabitOut, HabitUpdateIn
from habitvault.schemas.settings import SettingsIn, SettingsOut
from habitvault.schemas.user import UserIn, UserOut

__all__ = [
    "UserIn",
    "UserOut",
    "HabitIn",
    "HabitUpdateIn",
    "HabitOut",
    "CompletionIn",
    "CompletionOut",
    "HabitDayOut",
    "CompletionRateOut",
    "HeatmapCellOut",
    "WeeklyTrendOut",
    "TimeframeCompletionOut",
    "SettingsIn",
    "SettingsOut",
]
