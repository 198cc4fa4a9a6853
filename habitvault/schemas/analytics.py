import datetime as dt
from typing import Optional

from habitvault.schemas.base import CamelModel


class CompletionRateOut(CamelModel):
    habit_id: int
    habit_name: str
    completion_rate: int


class HeatmapCellOut(CamelModel):
    date: dt.date
    count: int
    rate: int
    timeframe: Optional[str] = None
    daily_count: int = 0
    weekly_count: int = 0
    monthly_count: int = 0
    daily_rate: int = 0
    weekly_rate: int = 0
    monthly_rate: int = 0
    has_daily: bool = False
    has_weekly: bool = False
    has_monthly: bool = False


class WeeklyTrendOut(CamelModel):
    date: dt.date
    completion_rate: int


class TimeframeCompletionOut(CamelModel):
    date: dt.date
    daily: int
    weekly: int
    monthly: int
