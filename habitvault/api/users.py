from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from habitvault.api.deps import get_current_user, get_db
from habitvault.crud import create_user, get_user_by_email, get_user_by_username, update_user
from habitvault.models import User
from habitvault.schemas import UserIn, UserOut

router = APIRouter(prefix="/api", tags=["users"])


@router.post("/users", response_model=UserOut, status_code=201)
def register_user(payload: UserIn, db: Session = Depends(get_db)) -> User:
    if get_user_by_username(db, payload.username):
        raise HTTPException(status_code=400, detail="Username already exists")
    if get_user_by_email(db, payload.email):
        raise HTTPException(status_code=400, detail="Email already in use")
    return create_user(db, payload.username, payload.email, payload.bio, payload.profile_image)


@router.get("/user", response_model=UserOut)
def current_user(user: User = Depends(get_current_user)) -> User:
    return user


@router.put("/user/profile", response_model=UserOut)
def update_profile(
    payload: UserIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> User:
    existing = get_user_by_email(db, payload.email)
    if existing and existing.id != user.id:
        raise HTTPException(status_code=400, detail="Email already in use by another account")
    existing = get_user_by_username(db, payload.username)
    if existing and existing.id != user.id:
        raise HTTPException(status_code=400, detail="Username already exists")

    return update_user(db, user, payload.model_dump())
