from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import Field, field_validator

from app.models.base import CamelModel
from app.utils.dates import to_timestamp


class ProductionRecordBase(CamelModel):
    """
    Source fields of a production record. Every field is optional at the
    schema level; ProductionService rejects records with any of them missing.
    """
    work_order_id: Optional[str] = Field(default=None, alias="workOrderID")
    date_requested: Optional[datetime] = None
    fulfilled_by: Optional[str] = None
    date_fulfilled: Optional[datetime] = None
    produced_qty: Optional[int] = Field(default=None, ge=0)

    @field_validator("date_requested", "date_fulfilled", mode="before")
    @classmethod
    def normalize_dates(cls, value):
        if value is None or value == "":
            return None
        return to_timestamp(value)

    @field_validator("work_order_id", "fulfilled_by", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ProductionRecordCreate(ProductionRecordBase):
    pass


class ProductionRecordUpdate(ProductionRecordBase):
    id: UUID


class ProductionRecordDelete(CamelModel):
    id: UUID


class ProductionRecordRead(CamelModel):
    id: UUID
    work_order_id: str = Field(alias="workOrderID")
    date_requested: datetime
    fulfilled_by: str
    date_fulfilled: datetime
    produced_qty: int
    order_fulfilled: bool
    order_on_time: bool
