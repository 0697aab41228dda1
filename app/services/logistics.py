from typing import List
from loguru import logger
from sqlmodel import Session, select

from app.core.exceptions import PersistenceError, ValidationError
from app.core.notifications import create_notification
from app.db.schema import ModuleRequest, TrackingLog, LogisticsStatus
from app.models.logistics import ModuleRequestCreate, ModuleRequestRead
from app.utils.dates import utc_now


class LogisticsService:
    def __init__(self, session: Session):
        self.session = session

    def _to_read(self, request: ModuleRequest) -> ModuleRequestRead:
        return ModuleRequestRead(
            id=request.id,
            module=request.module,
            requested_by=request.requested_by,
            description=request.description,
            recipient=request.recipient,
            request_date=request.request_date,
            quantity=request.quantity,
            status=request.status
        )

    def _validate(self, data: ModuleRequestCreate):
        required = {
            "module": data.module,
            "requestedBy": data.requested_by,
            "recipient": data.recipient,
        }
        missing = [name for name, value in required.items()
                   if not value or not value.strip()]
        if missing:
            logger.warning(
                f"Module request rejected, missing fields: {missing}")
            raise ValidationError("All fields are required")

    def submit_module_request(self, data: ModuleRequestCreate) -> ModuleRequest:
        """
        Creates a module request together with its tracking log.

        Both rows are written in one transaction: the request is flushed to
        obtain its id, the log is added with the same status, then a single
        commit makes both visible. Any failure rolls back both.
        """
        self._validate(data)

        try:
            # --- START ATOMIC TRANSACTION ---

            # A. Module request
            request = ModuleRequest(
                module=data.module,
                requested_by=data.requested_by,
                description=data.description,
                recipient=data.recipient,
                request_date=data.request_date,
                quantity=data.quantity,
                status=LogisticsStatus.PENDING
            )
            self.session.add(request)
            self.session.flush()

            # B. Tracking log keyed by the request id
            tracking = TrackingLog(
                log_id=request.id,
                module=request.module,
                status=request.status,
                updated_by=request.requested_by,
                updated_at=utc_now()
            )
            self.session.add(tracking)

            # --- COMMIT ---
            self.session.commit()
            self.session.refresh(request)

        except Exception:
            self.session.rollback()
            logger.exception("Module request submission failed")
            raise PersistenceError("Failed to submit request")

        logger.info(
            f"Module request {request.id} created for {request.recipient}")

        create_notification(
            self.session,
            f"New logistics request: {request.module} by {request.requested_by}"
        )
        return request

    def list_module_requests(self) -> List[ModuleRequestRead]:
        results = self.session.exec(select(ModuleRequest)).all()
        return [self._to_read(r) for r in results]
