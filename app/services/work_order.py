from typing import List, Optional
from uuid import UUID
from loguru import logger
from sqlmodel import Session, select

from app.core.exceptions import NotFoundError, PersistenceError, ValidationError
from app.core.notifications import create_notification
from app.db.schema import WorkOrder, WorkOrderStatus
from app.models.work_order import WorkOrderCreate, WorkOrderRead
from app.utils.dates import utc_now


class WorkOrderService:
    def __init__(self, session: Session):
        self.session = session

    def _to_read(self, order: WorkOrder) -> WorkOrderRead:
        return WorkOrderRead(
            id=order.id,
            module=order.module,
            created_by=order.created_by,
            description=order.description,
            assigned_to=order.assigned_to,
            created_date=order.created_date,
            due_date=order.due_date,
            priority=order.priority,
            quantity=order.quantity,
            status=order.status,
            updated_at=order.updated_at
        )

    def submit_work_order(self, data: WorkOrderCreate) -> WorkOrder:
        # Dates arrive normalized to naive UTC by WorkOrderCreate.
        # due_date before created_date is accepted as-is.
        order = WorkOrder(
            module=data.module,
            created_by=data.created_by,
            description=data.description,
            assigned_to=data.assigned_to,
            created_date=data.created_date,
            due_date=data.due_date,
            priority=data.priority,
            quantity=data.quantity,
            status=data.status or WorkOrderStatus.PENDING
        )

        try:
            self.session.add(order)
            self.session.commit()
            self.session.refresh(order)
        except Exception:
            self.session.rollback()
            logger.exception("Work order insert failed")
            raise PersistenceError("Failed to submit work order")

        logger.info(f"Work order {order.id} created for {order.module}")

        create_notification(
            self.session, f"New work order created: {order.module}")
        return order

    def list_work_orders(self) -> List[WorkOrderRead]:
        results = self.session.exec(select(WorkOrder)).all()
        return [self._to_read(o) for o in results]

    def update_work_order_status(
        self, work_order_id: UUID, status: Optional[WorkOrderStatus]
    ) -> WorkOrder:
        if not status:
            raise ValidationError("Status is required")

        order = self.session.get(WorkOrder, work_order_id)
        if not order:
            logger.warning(f"Status update for unknown work order {work_order_id}")
            raise NotFoundError("Work order not found")

        order.status = status
        order.updated_at = utc_now()

        try:
            self.session.add(order)
            self.session.commit()
            self.session.refresh(order)
        except Exception:
            self.session.rollback()
            logger.exception(f"Work order {work_order_id} status update failed")
            raise PersistenceError("Failed to update work order status")

        create_notification(
            self.session,
            f"Work order status updated: {work_order_id} to {status.value}"
        )
        return order
