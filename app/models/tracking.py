from datetime import datetime
from uuid import UUID

from app.db.schema import LogisticsStatus
from app.models.base import CamelModel


class TrackingStatusUpdate(CamelModel):
    log_id: UUID
    status: LogisticsStatus


class TrackingLogRead(CamelModel):
    id: UUID
    log_id: UUID
    module: str
    status: LogisticsStatus
    updated_by: str
    updated_at: datetime
