from typing import Iterator, Optional

from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from habitvault.db import SessionLocal
from habitvault.models import User


def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_user(
    x_user_id: Optional[str] = Header(default=None),
    db: Session = Depends(get_db),
) -> User:
    # The session layer in front of the API forwards the authenticated id.
    if not x_user_id or not x_user_id.strip().isdigit():
        raise HTTPException(status_code=401, detail="Unauthorized")

    user = db.get(User, int(x_user_id.strip()))
    if not user:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user
