from typing import List, Literal
from fastapi import APIRouter, Depends, status

from app.core.dependencies import get_dashboard_service
from app.models.dashboard import ChartPoint, LateWorkOrders, ProductionVsOrdered
from app.services.dashboard import DashboardService

router = APIRouter()


@router.get(
    "/logistics-summary",
    response_model=List[ChartPoint],
    status_code=status.HTTP_200_OK,
    summary="Requests per Recipient"
)
def logistics_summary(
    service: DashboardService = Depends(get_dashboard_service)
):
    return service.logistics_summary()


@router.get(
    "/module-chart",
    response_model=List[ChartPoint],
    status_code=status.HTTP_200_OK,
    summary="Requests per Module",
    description="Sorted by count, most requested module first."
)
def module_chart(
    service: DashboardService = Depends(get_dashboard_service)
):
    return service.module_chart()


@router.get(
    "/fulfillment-rate",
    response_model=List[ChartPoint],
    status_code=status.HTTP_200_OK,
    summary="Pending vs Fulfilled Requests"
)
def fulfillment_rate(
    service: DashboardService = Depends(get_dashboard_service)
):
    return service.fulfillment_rate()


@router.get(
    "/module-trend",
    response_model=List[ChartPoint],
    status_code=status.HTTP_200_OK,
    summary="Requests over Time"
)
def module_trend(
    view: Literal["daily", "weekly", "monthly"] = "daily",
    service: DashboardService = Depends(get_dashboard_service)
):
    return service.module_trend(view)


@router.get(
    "/late-work-orders",
    response_model=LateWorkOrders,
    status_code=status.HTTP_200_OK,
    summary="Late Production Count"
)
def late_work_orders(
    service: DashboardService = Depends(get_dashboard_service)
):
    return service.late_work_orders()


@router.get(
    "/production-vs-ordered",
    response_model=List[ProductionVsOrdered],
    status_code=status.HTTP_200_OK,
    summary="Produced vs Ordered per Work Order"
)
def production_vs_ordered(
    service: DashboardService = Depends(get_dashboard_service)
):
    return service.production_vs_ordered()
