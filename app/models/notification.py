from datetime import datetime
from uuid import UUID

from app.models.base import CamelModel


class NotificationRead(CamelModel):
    id: UUID
    message: str
    read: bool
    created_at: datetime
