from typing import List
from uuid import UUID
from loguru import logger
from sqlmodel import Session, select

from app.core.exceptions import NotFoundError, PersistenceError, ValidationError
from app.core.notifications import create_notification
from app.db.schema import ProductionRecord
from app.models.production import ProductionRecordBase, ProductionRecordRead
from app.services.derivation import derive_production_fields


class ProductionService:
    REQUIRED_FIELDS = {
        "work_order_id": "workOrderID",
        "date_requested": "dateRequested",
        "fulfilled_by": "fulfilledBy",
        "date_fulfilled": "dateFulfilled",
        "produced_qty": "producedQty",
    }

    def __init__(self, session: Session):
        self.session = session

    def _to_read(self, record: ProductionRecord) -> ProductionRecordRead:
        return ProductionRecordRead(
            id=record.id,
            work_order_id=record.work_order_id,
            date_requested=record.date_requested,
            fulfilled_by=record.fulfilled_by,
            date_fulfilled=record.date_fulfilled,
            produced_qty=record.produced_qty,
            order_fulfilled=record.order_fulfilled,
            order_on_time=record.order_on_time
        )

    def _validate(self, data: ProductionRecordBase):
        # A zero quantity counts as missing, like an empty form field
        missing = [
            alias for field, alias in self.REQUIRED_FIELDS.items()
            if not getattr(data, field)
        ]
        if missing:
            logger.warning(
                f"Production record rejected, missing fields: {missing}")
            raise ValidationError("All fields are required")

    def _column_values(self, data: ProductionRecordBase) -> dict:
        """Source fields plus freshly derived flags, ready to persist."""
        derived = derive_production_fields(
            produced_qty=data.produced_qty,
            date_requested=data.date_requested,
            date_fulfilled=data.date_fulfilled,
        )
        return {
            "work_order_id": data.work_order_id,
            "date_requested": data.date_requested,
            "fulfilled_by": data.fulfilled_by,
            "date_fulfilled": data.date_fulfilled,
            "produced_qty": data.produced_qty,
            "order_fulfilled": derived.order_fulfilled,
            "order_on_time": derived.order_on_time,
        }

    def _save(self, record: ProductionRecord, failure_message: str):
        try:
            self.session.add(record)
            self.session.commit()
            self.session.refresh(record)
        except Exception:
            self.session.rollback()
            logger.exception(failure_message)
            raise PersistenceError(failure_message)

    def submit_production_record(self, data: ProductionRecordBase) -> ProductionRecord:
        self._validate(data)

        record = ProductionRecord(**self._column_values(data))
        self._save(record, "Failed to add production data")

        logger.info(
            f"Production record {record.id} added for {record.work_order_id} "
            f"(fulfilled={record.order_fulfilled}, on_time={record.order_on_time})"
        )

        create_notification(
            self.session, f"New production data added: {record.work_order_id}")
        return record

    def list_production_records(self) -> List[ProductionRecordRead]:
        results = self.session.exec(select(ProductionRecord)).all()
        return [self._to_read(r) for r in results]

    def update_production_record(
        self, record_id: UUID, data: ProductionRecordBase
    ) -> ProductionRecord:
        self._validate(data)

        record = self.session.get(ProductionRecord, record_id)
        if not record:
            raise NotFoundError("Production record not found")

        for field, value in self._column_values(data).items():
            setattr(record, field, value)
        self._save(record, "Failed to update production data")

        create_notification(
            self.session, f"Production data updated: {record.work_order_id}")
        return record

    def delete_production_record(self, record_id: UUID) -> None:
        """Deletes by id. An unknown id is a successful no-op."""
        record = self.session.get(ProductionRecord, record_id)

        if record:
            try:
                self.session.delete(record)
                self.session.commit()
            except Exception:
                self.session.rollback()
                logger.exception(f"Production record {record_id} delete failed")
                raise PersistenceError("Failed to delete production data")
        else:
            logger.info(f"Delete of unknown production record {record_id} ignored")

        create_notification(
            self.session, f"Production data deleted: {record_id}")
