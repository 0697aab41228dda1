from typing import List
from fastapi import APIRouter, Depends, status

from app.core.dependencies import get_production_service
from app.models.base import MessageResponse
from app.models.production import (
    ProductionRecordCreate, ProductionRecordUpdate,
    ProductionRecordDelete, ProductionRecordRead
)
from app.services.production import ProductionService

router = APIRouter()


@router.post(
    "/production",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add Production Data",
    description="Records produced units. orderFulfilled and orderOnTime are derived server side."
)
def submit_production_record(
    data: ProductionRecordCreate,
    service: ProductionService = Depends(get_production_service)
):
    service.submit_production_record(data)
    return MessageResponse(message="Production data added successfully")


@router.get(
    "/production",
    response_model=List[ProductionRecordRead],
    status_code=status.HTTP_200_OK,
    summary="List Production Data"
)
def list_production_records(
    service: ProductionService = Depends(get_production_service)
):
    return service.list_production_records()


@router.put(
    "/production",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Update Production Data"
)
def update_production_record(
    data: ProductionRecordUpdate,
    service: ProductionService = Depends(get_production_service)
):
    service.update_production_record(data.id, data)
    return MessageResponse(message="Production data updated successfully")


@router.delete(
    "/production",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete Production Data",
    description="Deletes by id. Succeeds even when no record matches."
)
def delete_production_record(
    data: ProductionRecordDelete,
    service: ProductionService = Depends(get_production_service)
):
    service.delete_production_record(data.id)
    return MessageResponse(message="Production data deleted successfully")
