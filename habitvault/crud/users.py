from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from habitvault.models import User


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.get(User, user_id)


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.scalar(select(User).where(User.username == username))


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.scalar(select(User).where(User.email == email))


def create_user(
    db: Session,
    username: str,
    email: str,
    bio: Optional[str] = None,
    profile_image: Optional[str] = None,
) -> User:
    user = User(username=username, email=email, bio=bio, profile_image=profile_image)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def update_user(db: Session, user: User, data: dict) -> User:
    for field, value in data.items():
        setattr(user, field, value)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
