from habitvault.crud.completions import (
    get_completions,
    get_completions_for_day,
    has_completions_before,
    record_completion,
    upsert_completion,
)
from habitvault.crud.habits import create_habit, delete_habit, get_habit, get_habits_by_user, update_habit
from habitvault.crud.settings import get_or_create_settings, update_settings
from habitvault.crud.users import create_user, get_user, get_user_by_email, get_user_by_username, update_user

__all__ = [
    "get_user",
    "get_user_by_username",
    "get_user_by_email",
    "create_user",
    "update_user",
    "get_habits_by_user",
    "get_habit",
    "create_habit",
    "update_habit",
    "delete_habit",
    "get_completions",
    "get_completions_for_day",
    "has_completions_before",
    "upsert_completion",
    "record_completion",
    "get_or_create_settings",
    "update_settings",
]
