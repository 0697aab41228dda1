from typing import Optional
from datetime import datetime
import uuid
from sqlmodel import SQLModel, Field
from enum import Enum

from app.utils.dates import utc_now


class LogisticsStatus(str, Enum):
    PENDING = "Pending"
    IN_TRANSIT = "In Transit"
    COMPLETED = "Completed"


class WorkOrderStatus(str, Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class WorkOrderPriority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class TimestampMixin(SQLModel):
    """
    Standard audit timestamps for records that are edited after creation.
    """
    created_at: datetime = Field(
        default_factory=utc_now,
        description="UTC timestamp when this record was first persisted. Example: '2023-10-27 14:30:00'"
    )
    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column_kwargs={"onupdate": utc_now},
        description="UTC timestamp of the last modification. Updates automatically."
    )


class User(TimestampMixin, SQLModel, table=True):
    """
    A person who can sign in to the dashboard.
    The email address is the natural key used by every user-facing route.
    """
    __tablename__ = "user"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    email: str = Field(
        unique=True,
        index=True,
        description="Login email address. Example: 'alice@factory.example.com'"
    )
    hashed_password: str = Field(
        description="bcrypt hash of the password. Never returned by the API."
    )
    first_name: str = Field(default="")
    last_name: str = Field(default="")
    birthday: str = Field(default="", description="Free-form, as typed by the user.")
    address: str = Field(default="")
    profile_picture: str = Field(
        default="",
        description="Public URL of the uploaded profile picture."
    )


class UserSettings(SQLModel, table=True):
    """
    Per-user preference toggles. Exactly one row per user email (upserted).
    """
    __tablename__ = "settings"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    user_email: str = Field(
        unique=True,
        index=True,
        description="Email of the owning user."
    )
    push_notifications: bool = Field(default=False)
    dark_mode: bool = Field(default=False)
    email_notifications: bool = Field(default=False)
    auto_logout: bool = Field(default=False)


class ModuleRequest(SQLModel, table=True):
    """
    A request for a quantity of a manufacturing module (camera, battery, ...)
    to be delivered to a recipient factory.
    Every request owns exactly one TrackingLog, written in the same
    transaction.
    """
    __tablename__ = "logistics"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    module: str = Field(
        index=True,
        description="Module code. Example: 'CAM-001'"
    )
    requested_by: str = Field(description="Name of the requester. Example: 'Alice'")
    description: Optional[str] = Field(default=None)
    recipient: str = Field(
        index=True,
        description="Receiving factory. Example: 'Factory A'"
    )
    request_date: datetime
    quantity: int = Field(gt=0)
    status: LogisticsStatus = Field(default=LogisticsStatus.PENDING)


class TrackingLog(SQLModel, table=True):
    """
    Shipping progress of a module request.
    The status is stored independently from ModuleRequest.status and is only
    changed through the tracking update operation.
    """
    __tablename__ = "tracking"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    log_id: uuid.UUID = Field(
        foreign_key="logistics.id",
        unique=True,
        index=True,
        description="Identifier of the originating module request."
    )
    module: str
    status: LogisticsStatus = Field(default=LogisticsStatus.PENDING)
    updated_by: str
    updated_at: datetime = Field(default_factory=utc_now)


class WorkOrder(SQLModel, table=True):
    """
    An internal directive to produce a quantity of a phone model by a due date.
    """
    __tablename__ = "workorder"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    module: str
    created_by: str
    description: Optional[str] = Field(default=None)
    assigned_to: Optional[str] = Field(default=None)
    created_date: datetime
    due_date: datetime
    priority: WorkOrderPriority = Field(default=WorkOrderPriority.MEDIUM)
    quantity: int = Field(ge=0)
    status: WorkOrderStatus = Field(default=WorkOrderStatus.PENDING)
    updated_at: Optional[datetime] = Field(default=None)


class ProductionRecord(SQLModel, table=True):
    """
    Units actually produced against a work order.
    order_fulfilled and order_on_time are derived on every write, see
    app.services.derivation.
    """
    __tablename__ = "production"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    work_order_id: str = Field(
        index=True,
        description="Work order reference as typed by the reporter. Example: 'WO-1001'"
    )
    date_requested: datetime
    fulfilled_by: str
    date_fulfilled: datetime
    produced_qty: int
    order_fulfilled: bool = Field(default=False)
    order_on_time: bool = Field(default=False)


class Notification(SQLModel, table=True):
    """Append-only activity feed entry."""
    __tablename__ = "notifications"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    message: str
    read: bool = Field(default=False)
    created_at: datetime = Field(default_factory=utc_now, index=True)
