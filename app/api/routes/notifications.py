from typing import List
from fastapi import APIRouter, Depends, Query, status

from app.core.dependencies import get_notification_service
from app.models.notification import NotificationRead
from app.services.notification import NotificationService

router = APIRouter()


@router.get(
    "",
    response_model=List[NotificationRead],
    status_code=status.HTTP_200_OK,
    summary="Recent Activity",
    description="Newest first."
)
def list_notifications(
    limit: int = Query(50, ge=1, le=500),
    service: NotificationService = Depends(get_notification_service)
):
    return service.list_notifications(limit)
