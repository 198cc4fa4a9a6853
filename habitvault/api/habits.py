import logging
from datetime import date, timedelta
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from habitvault.api.deps import get_current_user, get_db
from habitvault.crud import (
    create_habit,
    delete_habit,
    get_completions,
    get_completions_for_day,
    get_habit,
    get_habits_by_user,
    has_completions_before,
    record_completion,
    update_habit,
)
from habitvault.models import Habit, HabitCompletion, User
from habitvault.schemas import CompletionIn, CompletionOut, HabitDayOut, HabitIn, HabitOut, HabitUpdateIn
from habitvault.services.dates import today_local

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["habits"])

COMPLETIONS_DEFAULT_DAYS = 30
REQUIRED_FIELDS = ("name", "target_days", "start_date")


def _get_habit_or_404(db: Session, habit_id: int, user: User) -> Habit:
    habit = get_habit(db, habit_id, user.id)
    if not habit:
        raise HTTPException(status_code=404, detail="Habit not found")
    return habit


@router.get("/habits", response_model=list[HabitOut])
def list_habits(user: User = Depends(get_current_user), db: Session = Depends(get_db)) -> list[Habit]:
    return get_habits_by_user(db, user.id)


@router.get("/habits/{habit_id}", response_model=HabitOut)
def read_habit(habit_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)) -> Habit:
    return _get_habit_or_404(db, habit_id, user)


@router.post("/habits", response_model=HabitOut, status_code=201)
def add_habit(payload: HabitIn, user: User = Depends(get_current_user), db: Session = Depends(get_db)) -> Habit:
    habit = create_habit(db, user.id, payload.model_dump())
    logger.info("User %s created habit %s (%s)", user.id, habit.id, habit.name)
    return habit


@router.put("/habits/{habit_id}", response_model=HabitOut)
def edit_habit(
    habit_id: int,
    payload: HabitUpdateIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Habit:
    habit = _get_habit_or_404(db, habit_id, user)
    data: dict[str, Any] = payload.model_dump(exclude_unset=True)
    for field in REQUIRED_FIELDS:
        if field in data and data[field] is None:
            del data[field]
    if "start_date" in data and has_completions_before(db, habit.id, data["start_date"]):
        raise HTTPException(status_code=400, detail="Habit has completions before the new start date")
    return update_habit(db, habit, data)


@router.delete("/habits/{habit_id}", status_code=204)
def remove_habit(habit_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)) -> Response:
    habit = _get_habit_or_404(db, habit_id, user)
    delete_habit(db, habit)
    logger.info("User %s deleted habit %s", user.id, habit_id)
    return Response(status_code=204)


@router.get("/habits/{habit_id}/completions", response_model=list[CompletionOut])
def list_completions(
    habit_id: int,
    start_date: Optional[date] = Query(default=None, alias="startDate"),
    end_date: Optional[date] = Query(default=None, alias="endDate"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[HabitCompletion]:
    habit = _get_habit_or_404(db, habit_id, user)
    today = today_local()
    start = start_date or today - timedelta(days=COMPLETIONS_DEFAULT_DAYS)
    end = end_date or today
    return get_completions(db, habit.id, start, end)


@router.post("/habits/{habit_id}/completions", response_model=CompletionOut, status_code=201)
def toggle_completion(
    habit_id: int,
    payload: Optional[CompletionIn] = None,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> HabitCompletion:
    habit = _get_habit_or_404(db, habit_id, user)
    payload = payload or CompletionIn()
    day = payload.date or today_local()
    completed = True if payload.completed is None else payload.completed

    if day < habit.start_date:
        raise HTTPException(status_code=400, detail="Completion date is before the habit start date")

    return record_completion(db, habit, day, completed)


@router.get("/completions/today", response_model=list[HabitDayOut])
def completions_today(user: User = Depends(get_current_user), db: Session = Depends(get_db)) -> list[dict]:
    habits = get_habits_by_user(db, user.id)
    return [
        {"habit": habit, "completion": completion}
        for habit, completion in get_completions_for_day(db, habits, today_local())
    ]
