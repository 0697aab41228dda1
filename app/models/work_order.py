from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import Field, field_validator

from app.db.schema import WorkOrderPriority, WorkOrderStatus
from app.models.base import CamelModel
from app.utils.dates import to_timestamp


class WorkOrderCreate(CamelModel):
    module: str = Field(min_length=1, max_length=100)
    created_by: str = Field(min_length=1, max_length=100)
    description: Optional[str] = None
    assigned_to: Optional[str] = None
    created_date: datetime
    due_date: datetime
    priority: WorkOrderPriority = WorkOrderPriority.MEDIUM
    quantity: int = Field(ge=0)
    status: Optional[WorkOrderStatus] = Field(
        default=None,
        description="Defaults to 'Pending' when omitted."
    )

    @field_validator("created_date", "due_date", mode="before")
    @classmethod
    def normalize_timestamps(cls, value):
        return to_timestamp(value)


class WorkOrderStatusUpdate(CamelModel):
    # Optional so a missing status reaches the service and is rejected there
    status: Optional[WorkOrderStatus] = None


class WorkOrderRead(CamelModel):
    id: UUID
    module: str
    created_by: str
    description: Optional[str] = None
    assigned_to: Optional[str] = None
    created_date: datetime
    due_date: datetime
    priority: WorkOrderPriority
    quantity: int
    status: WorkOrderStatus
    updated_at: Optional[datetime] = None
