from collections import defaultdict
from datetime import date, timedelta
from typing import Any, Callable, Dict, List, Optional

from sqlalchemy import and_, select
from sqlalchemy.orm import Session

from habitvault.models import Habit, HabitCompletion
from habitvault.services.dates import (
    iter_days,
    month_bounds,
    round_percent,
    sub_months,
    today_local,
    week_bounds,
    weekday_index,
    year_bounds,
)
from habitvault.services.timeframes import TIMEFRAMES, habit_timeframe

COMPLETION_RANGES: Dict[str, Callable[[date], tuple[date, date]]] = {
    "week": week_bounds,
    "month": month_bounds,
    "year": year_bounds,
}
DEFAULT_COMPLETION_RANGE = "month"

HEATMAP_PERIOD_MONTHS = {"3months": 3, "6months": 6, "1year": 12}
DEFAULT_HEATMAP_PERIOD = "6months"

TIMEFRAME_PERIODS: Dict[str, Callable[[date], date]] = {
    "1week": lambda d: d - timedelta(days=7),
    "2weeks": lambda d: d - timedelta(days=14),
    "1month": lambda d: sub_months(d, 1),
}
DEFAULT_TIMEFRAME_PERIOD = "2weeks"

TREND_DAYS = 7


def _user_habits(db: Session, user_id: int) -> List[Habit]:
    return list(
        db.scalars(
            select(Habit).where(Habit.user_id == user_id).order_by(Habit.created_at.desc(), Habit.id.desc())
        )
    )


def _completions_by_habit(
    db: Session, habit_ids: List[int], start: date, end: date
) -> Dict[int, List[HabitCompletion]]:
    result: Dict[int, List[HabitCompletion]] = defaultdict(list)
    if not habit_ids:
        return result
    rows = db.scalars(
        select(HabitCompletion)
        .where(
            and_(
                HabitCompletion.habit_id.in_(habit_ids),
                HabitCompletion.date >= start,
                HabitCompletion.date <= end,
            )
        )
        .order_by(HabitCompletion.date)
    )
    for row in rows:
        result[row.habit_id].append(row)
    return result


def _completed_on(completions: Dict[int, List[HabitCompletion]]) -> Dict[int, set[date]]:
    return {
        habit_id: {c.date for c in rows if c.completed}
        for habit_id, rows in completions.items()
    }


def scheduled_days(target_days: List[int], start: date, end: date) -> int:
    targets = set(target_days or [])
    return sum(1 for day in iter_days(start, end) if weekday_index(day) in targets)


def completion_window(time_range: Optional[str], today: date) -> tuple[date, date]:
    bounds = COMPLETION_RANGES.get(time_range or "", COMPLETION_RANGES[DEFAULT_COMPLETION_RANGE])
    return bounds(today)


def completion_rates(
    db: Session, user_id: int, time_range: Optional[str] = None, today: Optional[date] = None
) -> List[Dict[str, Any]]:
    today = today or today_local()
    start, end = completion_window(time_range, today)
    habits = _user_habits(db, user_id)
    done = _completed_on(_completions_by_habit(db, [h.id for h in habits], start, end))

    return [
        {
            "habit_id": habit.id,
            "habit_name": habit.name,
            "completion_rate": round_percent(
                len(done.get(habit.id, set())), scheduled_days(habit.target_days, start, end)
            ),
        }
        for habit in habits
    ]


def _empty_cell(day: date) -> Dict[str, Any]:
    cell: Dict[str, Any] = {"date": day, "count": 0, "rate": 0, "timeframe": None}
    for tf in TIMEFRAMES:
        cell[f"{tf}_count"] = 0
        cell[f"{tf}_rate"] = 0
        cell[f"has_{tf}"] = False
    return cell


def heatmap(
    db: Session,
    user_id: int,
    period: Optional[str] = None,
    timeframe: Optional[str] = None,
    today: Optional[date] = None,
) -> List[Dict[str, Any]]:
    """Calendar cells for dates that carry at least one completion row.

    Dates with no rows at all are left out rather than zero-filled. Each
    cell's rates are measured against the habits of each timeframe that had
    already started by that date.
    """
    today = today or today_local()
    months = HEATMAP_PERIOD_MONTHS.get(period or "", HEATMAP_PERIOD_MONTHS[DEFAULT_HEATMAP_PERIOD])
    start = sub_months(today, months)

    habits = _user_habits(db, user_id)
    if timeframe in TIMEFRAMES:
        habits = [h for h in habits if habit_timeframe(h) == timeframe]
    kinds = {h.id: habit_timeframe(h) for h in habits}
    completions = _completions_by_habit(db, list(kinds), start, today)

    cells: Dict[date, Dict[str, Any]] = {}
    for habit in habits:
        tf = kinds[habit.id]
        for completion in completions.get(habit.id, []):
            cell = cells.setdefault(completion.date, _empty_cell(completion.date))
            if completion.completed:
                cell["count"] += 1
                cell[f"{tf}_count"] += 1
                cell["timeframe"] = tf

    for day, cell in cells.items():
        started = {tf: 0 for tf in TIMEFRAMES}
        for habit in habits:
            if habit.start_date <= day:
                started[kinds[habit.id]] += 1

        cell["rate"] = round_percent(cell["count"], sum(started.values()))
        for tf in TIMEFRAMES:
            if started[tf] > 0:
                cell[f"{tf}_rate"] = round_percent(cell[f"{tf}_count"], started[tf])
                cell[f"has_{tf}"] = cell[f"{tf}_count"] > 0

    return [cells[day] for day in sorted(cells)]


def weekly_trend(db: Session, user_id: int, today: Optional[date] = None) -> List[Dict[str, Any]]:
    today = today or today_local()
    start = today - timedelta(days=TREND_DAYS - 1)
    habits = _user_habits(db, user_id)
    done = _completed_on(_completions_by_habit(db, [h.id for h in habits], start, today))

    result: List[Dict[str, Any]] = []
    for day in iter_days(start, today):
        scheduled = [h for h in habits if weekday_index(day) in set(h.target_days or [])]
        completed = sum(1 for h in scheduled if day in done.get(h.id, set()))
        result.append({"date": day, "completion_rate": round_percent(completed, len(scheduled))})
    return result


def timeframe_completion(
    db: Session, user_id: int, period: Optional[str] = None, today: Optional[date] = None
) -> List[Dict[str, Any]]:
    today = today or today_local()
    start = TIMEFRAME_PERIODS.get(period or "", TIMEFRAME_PERIODS[DEFAULT_TIMEFRAME_PERIOD])(today)
    habits = _user_habits(db, user_id)
    done = _completed_on(_completions_by_habit(db, [h.id for h in habits], start, today))

    grouped: Dict[str, List[Habit]] = {tf: [] for tf in TIMEFRAMES}
    for habit in habits:
        grouped[habit_timeframe(habit)].append(habit)

    result: List[Dict[str, Any]] = []
    for day in iter_days(start, today):
        entry: Dict[str, Any] = {"date": day}
        for tf, members in grouped.items():
            completed = sum(1 for h in members if day in done.get(h.id, set()))
            entry[tf] = round_percent(completed, len(members))
        result.append(entry)
    return result
