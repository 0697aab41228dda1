from datetime import datetime
from typing import Optional
from uuid import UUID

from app.models.base import CamelModel


class UserRead(CamelModel):
    """Public profile. The password hash is never part of it."""
    id: UUID
    email: str
    first_name: str
    last_name: str
    birthday: str
    address: str
    profile_picture: str
    created_at: datetime
    updated_at: datetime


class UserProfileUpdate(CamelModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    birthday: Optional[str] = None
    address: Optional[str] = None
    profile_picture: Optional[str] = None


class ImageUploadResponse(CamelModel):
    image_url: str
