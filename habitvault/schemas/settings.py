from typing import Literal, Optional

from pydantic import Field

from habitvault.schemas.base import CamelModel


class SettingsIn(CamelModel):
    dark_mode: Optional[bool] = None
    time_range: Optional[Literal["week", "month", "year"]] = None
    show_quotes: Optional[bool] = None
    reminder_time: Optional[str] = Field(default=None, pattern=r"^([01]\d|2[0-3]):[0-5]\d$")
    reminder_enabled: Optional[bool] = None
    email_notifications: Optional[bool] = None
    compact_view: Optional[bool] = None


class SettingsOut(CamelModel):
    user_id: int
    dark_mode: bool
    time_range: str
    show_quotes: bool
    reminder_time: str
    reminder_enabled: bool
    email_notifications: bool
    compact_view: bool
