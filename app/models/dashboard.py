from pydantic import BaseModel, Field

from app.models.base import CamelModel


class ChartPoint(BaseModel):
    """One slice/bar of a dashboard chart."""
    name: str
    value: int


class LateWorkOrders(BaseModel):
    late_work_orders: int = Field(serialization_alias="lateWorkOrders")


class ProductionVsOrdered(CamelModel):
    """Stacked bar per work order reference."""
    work_order_id: str
    produced_qty: int
    ordered_qty: int
