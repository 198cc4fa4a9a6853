from datetime import datetime
from typing import Optional

from pydantic import Field

from habitvault.schemas.base import CamelModel

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class UserIn(CamelModel):
    username: str = Field(min_length=3, max_length=255)
    email: str = Field(pattern=EMAIL_PATTERN, max_length=255)
    bio: Optional[str] = None
    profile_image: Optional[str] = None


class UserOut(CamelModel):
    id: int
    username: str
    email: str
    bio: Optional[str] = None
    profile_image: Optional[str] = None
    created_at: Optional[datetime] = None
