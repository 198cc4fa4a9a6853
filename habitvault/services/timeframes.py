from typing import Optional

DAILY = "daily"
WEEKLY = "weekly"
MONTHLY = "monthly"
TIMEFRAMES = (DAILY, WEEKLY, MONTHLY)


def timeframe_from_description(description: Optional[str]) -> str:
    text = (description or "").lower()
    if WEEKLY in text:
        return WEEKLY
    if MONTHLY in text:
        return MONTHLY
    return DAILY


def habit_timeframe(habit) -> str:
    """Explicit timeframe if the habit has one, else what its description says."""
    explicit = (getattr(habit, "timeframe", None) or "").strip().lower()
    if explicit in TIMEFRAMES:
        return explicit
    return timeframe_from_description(getattr(habit, "description", None))
