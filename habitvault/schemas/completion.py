import datetime as dt
from typing import Optional

from habitvault.schemas.base import CamelModel
from habitvault.schemas.habit import HabitOut


class CompletionIn(CamelModel):
    date: Optional[dt.date] = None
    completed: Optional[bool] = None


class CompletionOut(CamelModel):
    id: int
    habit_id: int
    date: dt.date
    completed: bool
    completed_at: dt.datetime


class HabitDayOut(CamelModel):
    habit: HabitOut
    completion: Optional[CompletionOut] = None
