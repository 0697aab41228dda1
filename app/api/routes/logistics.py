from typing import List
from fastapi import APIRouter, Depends, status

from app.core.dependencies import get_logistics_service
from app.models.base import MessageResponse
from app.models.logistics import ModuleRequestCreate, ModuleRequestRead
from app.services.logistics import LogisticsService

router = APIRouter()


@router.post(
    "/logistics",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit Module Request",
    description="Creates a module request in 'Pending' state together with its tracking log."
)
def submit_module_request(
    data: ModuleRequestCreate,
    service: LogisticsService = Depends(get_logistics_service)
):
    service.submit_module_request(data)
    return MessageResponse(message="Logistics request submitted successfully")


@router.get(
    "/logistics",
    response_model=List[ModuleRequestRead],
    status_code=status.HTTP_200_OK,
    summary="List Module Requests"
)
def list_module_requests(
    service: LogisticsService = Depends(get_logistics_service)
):
    return service.list_module_requests()
