import logging
from datetime import date, timedelta
from typing import Iterable, Optional

from sqlalchemy import and_, select
from sqlalchemy.orm import Session

from habitvault.config import settings
from habitvault.models import Habit, HabitCompletion
from habitvault.services.dates import today_local, weekday_index

logger = logging.getLogger(__name__)


def compute_current_streak(
    target_days: Iterable[int],
    completed_dates: set[date],
    today: date,
    lookback_days: int = 365,
) -> int:
    """Consecutive completed target days ending today, 0 if today isn't done.

    Non-target days are skipped without breaking the run. The walk never
    goes further back than ``lookback_days`` before today.
    """
    if today not in completed_dates:
        return 0

    targets = set(target_days)
    limit = today - timedelta(days=lookback_days)
    streak = 1
    check = today - timedelta(days=1)
    while check >= limit:
        if weekday_index(check) in targets:
            if check not in completed_dates:
                break
            streak += 1
        check -= timedelta(days=1)
    return streak


def recompute_streak(db: Session, habit: Habit, today: Optional[date] = None, commit: bool = True) -> Habit:
    # Left untouched when today has no completed row.
    today = today or today_local()
    lookback = settings.STREAK_LOOKBACK_DAYS
    rows = db.execute(
        select(HabitCompletion.date, HabitCompletion.completed).where(
            and_(
                HabitCompletion.habit_id == habit.id,
                HabitCompletion.date >= today - timedelta(days=lookback),
                HabitCompletion.date <= today,
            )
        )
    ).all()
    completed_dates = {row_date for row_date, completed in rows if completed}

    if today not in completed_dates:
        return habit

    current = compute_current_streak(habit.target_days or [], completed_dates, today, lookback)
    habit.current_streak = current
    habit.longest_streak = max(current, habit.longest_streak or 0)
    db.add(habit)
    if commit:
        db.commit()
        db.refresh(habit)
    else:
        db.flush()
    logger.info("Habit %s streak updated: current=%s longest=%s", habit.id, habit.current_streak, habit.longest_streak)
    return habit
