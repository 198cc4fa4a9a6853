import logging
from datetime import date, datetime
from typing import Optional

from sqlalchemy import and_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from habitvault.models import Habit, HabitCompletion
from habitvault.services.streaks import recompute_streak

logger = logging.getLogger(__name__)


def _find_completion(db: Session, habit_id: int, day: date) -> Optional[HabitCompletion]:
    return db.scalar(
        select(HabitCompletion).where(
            and_(HabitCompletion.habit_id == habit_id, HabitCompletion.date == day)
        )
    )


def get_completions(db: Session, habit_id: int, start: date, end: date) -> list[HabitCompletion]:
    return list(
        db.scalars(
            select(HabitCompletion)
            .where(
                and_(
                    HabitCompletion.habit_id == habit_id,
                    HabitCompletion.date >= start,
                    HabitCompletion.date <= end,
                )
            )
            .order_by(HabitCompletion.date)
        )
    )


def upsert_completion(
    db: Session, habit_id: int, day: date, completed: bool, commit: bool = True
) -> HabitCompletion:
    now = datetime.utcnow()
    row = _find_completion(db, habit_id, day)
    if row is None:
        try:
            with db.begin_nested():
                row = HabitCompletion(habit_id=habit_id, date=day, completed=completed, completed_at=now)
                db.add(row)
        except IntegrityError:
            # Another request inserted the same (habit, date) first.
            row = _find_completion(db, habit_id, day)
            if row is None:
                raise
            row.completed = completed
            row.completed_at = now
    else:
        row.completed = completed
        row.completed_at = now

    if not commit:
        db.flush()
        return row
    db.commit()
    db.refresh(row)
    return row


def record_completion(
    db: Session,
    habit: Habit,
    day: date,
    completed: bool = True,
    today: Optional[date] = None,
) -> HabitCompletion:
    logger.info("Toggling completion for habit %s (%s) on %s to %s", habit.id, habit.name, day.isoformat(), completed)
    # Completion and streak land in one commit.
    row = upsert_completion(db, habit.id, day, completed, commit=False)
    recompute_streak(db, habit, today=today, commit=False)
    db.commit()
    db.refresh(row)
    return row


def get_completions_for_day(db: Session, habits: list[Habit], day: date) -> list[tuple[Habit, Optional[HabitCompletion]]]:
    if not habits:
        return []
    rows = db.scalars(
        select(HabitCompletion).where(
            and_(HabitCompletion.habit_id.in_([h.id for h in habits]), HabitCompletion.date == day)
        )
    )
    by_habit = {row.habit_id: row for row in rows}
    return [(habit, by_habit.get(habit.id)) for habit in habits]


def has_completions_before(db: Session, habit_id: int, day: date) -> bool:
    return db.scalar(
        select(HabitCompletion.id)
        .where(and_(HabitCompletion.habit_id == habit_id, HabitCompletion.date < day))
        .limit(1)
    ) is not None
