from typing import Optional

from sqlalchemy import and_, select
from sqlalchemy.orm import Session

from habitvault.models import Habit

EDITABLE_FIELDS = ("name", "description", "target_days", "start_date", "timeframe")


def get_habits_by_user(db: Session, user_id: int) -> list[Habit]:
    return list(
        db.scalars(
            select(Habit).where(Habit.user_id == user_id).order_by(Habit.created_at.desc(), Habit.id.desc())
        )
    )


def get_habit(db: Session, habit_id: int, user_id: int) -> Optional[Habit]:
    return db.scalar(select(Habit).where(and_(Habit.id == habit_id, Habit.user_id == user_id)))


def create_habit(db: Session, user_id: int, data: dict) -> Habit:
    habit = Habit(user_id=user_id, **{k: v for k, v in data.items() if k in EDITABLE_FIELDS})
    db.add(habit)
    db.commit()
    db.refresh(habit)
    return habit


def update_habit(db: Session, habit: Habit, data: dict) -> Habit:
    for field, value in data.items():
        if field in EDITABLE_FIELDS:
            setattr(habit, field, value)
    db.add(habit)
    db.commit()
    db.refresh(habit)
    return habit


def delete_habit(db: Session, habit: Habit) -> None:
    db.delete(habit)
    db.commit()
