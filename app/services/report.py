from loguru import logger

from app.core.exceptions import ValidationError
from app.models.report import ReportRequest
from app.utils.pdf import ReportRenderer


class ReportService:
    def __init__(self, renderer: ReportRenderer):
        self.renderer = renderer

    def generate_report(self, data: ReportRequest) -> bytes:
        if (data.production_data is None
                or data.logistics_data is None
                or data.tracking_data is None):
            raise ValidationError("All data fields are required")

        pdf = self.renderer.render(
            production=data.production_data,
            logistics=data.logistics_data,
            tracking=data.tracking_data,
        )
        logger.info(f"Report generated ({len(pdf)} bytes)")
        return pdf
