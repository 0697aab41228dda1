from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import Field, StrictInt, field_validator

from app.db.schema import LogisticsStatus
from app.models.base import CamelModel
from app.utils.dates import to_timestamp


class ModuleRequestCreate(CamelModel):
    module: str = Field(min_length=1, max_length=100)
    requested_by: str = Field(min_length=1, max_length=100)
    description: Optional[str] = None
    recipient: str = Field(min_length=1, max_length=100)
    request_date: datetime
    quantity: StrictInt = Field(gt=0, description="Number of units, strictly positive.")

    @field_validator("request_date", mode="before")
    @classmethod
    def normalize_request_date(cls, value):
        return to_timestamp(value)


class ModuleRequestRead(CamelModel):
    id: UUID
    module: str
    requested_by: str
    description: Optional[str] = None
    recipient: str
    request_date: datetime
    quantity: int
    status: LogisticsStatus
