from fastapi import APIRouter, Depends, Response, status

from app.core.dependencies import get_report_service
from app.models.report import ReportRequest
from app.services.report import ReportService

router = APIRouter()


@router.post(
    "/reports",
    status_code=status.HTTP_200_OK,
    summary="Generate PDF Report",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}}
)
def generate_report(
    data: ReportRequest,
    service: ReportService = Depends(get_report_service)
):
    pdf = service.generate_report(data)
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": "attachment; filename=report.pdf"}
    )
