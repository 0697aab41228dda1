from typing import List
from fastapi import APIRouter, Depends, status

from app.core.dependencies import get_tracking_service
from app.models.base import MessageResponse
from app.models.tracking import TrackingLogRead, TrackingStatusUpdate
from app.services.tracking import TrackingService

router = APIRouter()


@router.get(
    "/tracking",
    response_model=List[TrackingLogRead],
    status_code=status.HTTP_200_OK,
    summary="List Tracking Logs"
)
def list_tracking_logs(
    service: TrackingService = Depends(get_tracking_service)
):
    return service.list_tracking_logs()


@router.put(
    "/tracking",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Update Tracking Status",
    description=(
        "Moves the tracking log of a module request to a new status. "
        "The module request's own status is not changed."
    )
)
def update_tracking_status(
    data: TrackingStatusUpdate,
    service: TrackingService = Depends(get_tracking_service)
):
    service.update_tracking_status(data.log_id, data.status)
    return MessageResponse(message="Tracking status updated successfully")
