from sqlalchemy import select
from sqlalchemy.orm import Session

from habitvault.models import UserSettings

DEFAULT_SETTINGS = {
    "dark_mode": False,
    "time_range": "month",
    "show_quotes": True,
    "reminder_time": "18:00",
    "reminder_enabled": False,
    "email_notifications": False,
    "compact_view": False,
}


def get_or_create_settings(db: Session, user_id: int) -> UserSettings:
    row = db.scalar(select(UserSettings).where(UserSettings.user_id == user_id))
    if row:
        return row

    row = UserSettings(user_id=user_id, **DEFAULT_SETTINGS)
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def update_settings(db: Session, user_id: int, data: dict) -> UserSettings:
    row = get_or_create_settings(db, user_id)
    for field, value in data.items():
        if field in DEFAULT_SETTINGS and value is not None:
            setattr(row, field, value)
    db.add(row)
    db.commit()
    db.refresh(row)
    return row
