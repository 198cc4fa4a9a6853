from habitvault.models.base import Base
from habitvault.models.habit import Habit
from habitvault.models.habit_completion import HabitCompletion
from habitvault.models.user import User
from habitvault.models.user_settings import UserSettings

__all__ = [
    "Base",
    "User",
    "Habit",
    "HabitCompletion",
    "UserSettings",
]
