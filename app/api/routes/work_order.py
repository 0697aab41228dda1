from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, status

from app.core.dependencies import get_work_order_service
from app.models.base import MessageResponse
from app.models.work_order import WorkOrderCreate, WorkOrderRead, WorkOrderStatusUpdate
from app.services.work_order import WorkOrderService

router = APIRouter()


@router.post(
    "/workorder",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit Work Order",
    description="Creates a work order. Status defaults to 'Pending'."
)
def submit_work_order(
    data: WorkOrderCreate,
    service: WorkOrderService = Depends(get_work_order_service)
):
    service.submit_work_order(data)
    return MessageResponse(message="Work order submitted successfully")


@router.get(
    "/workorder",
    response_model=List[WorkOrderRead],
    status_code=status.HTTP_200_OK,
    summary="List Work Orders"
)
def list_work_orders(
    service: WorkOrderService = Depends(get_work_order_service)
):
    return service.list_work_orders()


@router.put(
    "/workorder/{work_order_id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Update Work Order Status"
)
def update_work_order_status(
    work_order_id: UUID,
    data: WorkOrderStatusUpdate,
    service: WorkOrderService = Depends(get_work_order_service)
):
    service.update_work_order_status(work_order_id, data.status)
    return MessageResponse(message="Work order status updated successfully")
