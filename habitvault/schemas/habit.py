from datetime import date, datetime
from typing import Annotated, Literal, Optional

from pydantic import Field, field_validator

from habitvault.schemas.base import CamelModel

Weekday = Annotated[int, Field(ge=0, le=6)]
Timeframe = Literal["daily", "weekly", "monthly"]


class HabitIn(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    target_days: list[Weekday] = Field(min_length=1)
    start_date: date
    timeframe: Optional[Timeframe] = None

    @field_validator("target_days")
    @classmethod
    def unique_target_days(cls, value: list[int]) -> list[int]:
        return sorted(set(value))


class HabitUpdateIn(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    target_days: Optional[list[Weekday]] = Field(default=None, min_length=1)
    start_date: Optional[date] = None
    timeframe: Optional[Timeframe] = None

    @field_validator("target_days")
    @classmethod
    def unique_target_days(cls, value: Optional[list[int]]) -> Optional[list[int]]:
        return sorted(set(value)) if value is not None else None


class HabitOut(CamelModel):
    id: int
    user_id: int
    name: str
    description: Optional[str] = None
    target_days: list[int]
    start_date: date
    timeframe: Optional[str] = None
    current_streak: int
    longest_streak: int
    created_at: Optional[datetime] = None
