from datetime import date

import pytest
from sqlalchemy import func, select

from habitvault.crud import completions
from habitvault.models import HabitCompletion


def _rows(db, habit_id):
    return list(db.scalars(select(HabitCompletion).where(HabitCompletion.habit_id == habit_id)))


def test_upsert_updates_row_inserted_by_concurrent_writer(db, session_factory, make_habit, monkeypatch):
    habit = make_habit()
    day = date(2025, 3, 1)
    original_find = completions._find_completion
    calls = []

    def racing_find(session, habit_id, when):
        calls.append(when)
        if len(calls) == 1:
            # Another request commits the same (habit, day) before our insert.
            with session_factory() as other:
                other.add(HabitCompletion(habit_id=habit_id, date=when, completed=True))
                other.commit()
            return None
        return original_find(session, habit_id, when)

    monkeypatch.setattr(completions, "_find_completion", racing_find)

    row = completions.upsert_completion(db, habit.id, day, False)

    assert len(calls) == 2
    assert row.completed is False
    db.expire_all()
    rows = _rows(db, habit.id)
    assert len(rows) == 1
    assert rows[0].id == row.id
    assert rows[0].completed is False


def test_record_completion_rolls_back_when_streak_update_fails(db, make_habit, monkeypatch):
    habit = make_habit()

    def broken_recompute(*args, **kwargs):
        raise RuntimeError("streak store unavailable")

    monkeypatch.setattr(completions, "recompute_streak", broken_recompute)

    with pytest.raises(RuntimeError):
        completions.record_completion(db, habit, date(2025, 3, 1), today=date(2025, 3, 1))

    db.rollback()
    count = db.scalar(select(func.count()).select_from(HabitCompletion).where(HabitCompletion.habit_id == habit.id))
    assert count == 0


def test_record_completion_commits_row_and_streak(db, make_habit):
    habit = make_habit()
    day = date(2025, 3, 1)

    completions.record_completion(db, habit, day, today=day)

    db.expire_all()
    assert [r.date for r in _rows(db, habit.id)] == [day]
    assert habit.current_streak == 1
    assert habit.longest_streak == 1


def test_has_completions_before(db, make_habit, complete):
    habit = make_habit()
    complete(habit, date(2025, 1, 5), completed=False)

    assert completions.has_completions_before(db, habit.id, date(2025, 1, 6))
    assert not completions.has_completions_before(db, habit.id, date(2025, 1, 5))
