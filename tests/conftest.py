from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from api_main import app
from habitvault.api.deps import get_db
from habitvault.db import enable_sqlite_foreign_keys
from habitvault.models import Base, Habit, HabitCompletion, User


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine, future=True)


@pytest.fixture()
def db(session_factory):
    with session_factory() as session:
        yield session


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def user(db):
    row = User(username="alice", email="alice@example.com")
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


@pytest.fixture()
def auth(user):
    return {"X-User-Id": str(user.id)}


@pytest.fixture()
def make_habit(db, user):
    def _make(
        name: str = "Read",
        target_days=(0, 1, 2, 3, 4, 5, 6),
        start_date: date = date(2025, 1, 1),
        description=None,
        timeframe=None,
        owner: User = None,
    ) -> Habit:
        habit = Habit(
            user_id=(owner or user).id,
            name=name,
            description=description,
            target_days=list(target_days),
            start_date=start_date,
            timeframe=timeframe,
        )
        db.add(habit)
        db.commit()
        db.refresh(habit)
        return habit

    return _make


@pytest.fixture()
def complete(db):
    def _complete(habit: Habit, *days: date, completed: bool = True) -> None:
        for day in days:
            db.add(HabitCompletion(habit_id=habit.id, date=day, completed=completed))
        db.commit()

    return _complete
