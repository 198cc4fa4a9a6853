from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from habitvault.api.deps import get_current_user, get_db
from habitvault.crud import get_or_create_settings, update_settings
from habitvault.models import User, UserSettings
from habitvault.schemas import SettingsIn, SettingsOut

router = APIRouter(prefix="/api", tags=["settings"])


@router.get("/settings", response_model=SettingsOut)
def read_settings(user: User = Depends(get_current_user), db: Session = Depends(get_db)) -> UserSettings:
    return get_or_create_settings(db, user.id)


@router.put("/settings", response_model=SettingsOut)
def write_settings(
    payload: SettingsIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> UserSettings:
    return update_settings(db, user.id, payload.model_dump(exclude_unset=True))
