from typing import List
from uuid import UUID
from loguru import logger
from sqlmodel import Session, select

from app.core.exceptions import NotFoundError, PersistenceError
from app.core.notifications import create_notification
from app.db.schema import TrackingLog, LogisticsStatus
from app.models.tracking import TrackingLogRead
from app.utils.dates import utc_now


class TrackingService:
    def __init__(self, session: Session):
        self.session = session

    def get_log(self, log_id: UUID) -> TrackingLog:
        log = self.session.exec(
            select(TrackingLog).where(TrackingLog.log_id == log_id)
        ).first()
        if not log:
            raise NotFoundError("Tracking log not found")
        return log

    def list_tracking_logs(self) -> List[TrackingLogRead]:
        results = self.session.exec(select(TrackingLog)).all()
        return [
            TrackingLogRead(
                id=log.id,
                log_id=log.log_id,
                module=log.module,
                status=log.status,
                updated_by=log.updated_by,
                updated_at=log.updated_at
            )
            for log in results
        ]

    def update_tracking_status(self, log_id: UUID, status: LogisticsStatus) -> TrackingLog:
        """
        Moves the tracking log of a module request to a new status.

        Only the log changes. The request keeps its own status, which
        describes the request itself rather than its shipment.
        """
        log = self.get_log(log_id)

        log.status = status
        log.updated_at = utc_now()

        try:
            self.session.add(log)
            self.session.commit()
            self.session.refresh(log)
        except Exception:
            self.session.rollback()
            logger.exception(f"Tracking update failed for {log_id}")
            raise PersistenceError("Failed to update tracking status")

        logger.info(f"Tracking log {log_id} moved to {status.value}")

        create_notification(
            self.session,
            f"Tracking status updated: {log_id} to {status.value}"
        )
        return log
