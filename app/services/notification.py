from typing import List
from sqlmodel import Session, select

from app.db.schema import Notification
from app.models.notification import NotificationRead


class NotificationService:
    def __init__(self, session: Session):
        self.session = session

    def list_notifications(self, limit: int = 50) -> List[NotificationRead]:
        results = self.session.exec(
            select(Notification)
            .order_by(Notification.created_at.desc())
            .limit(limit)
        ).all()
        return [
            NotificationRead(
                id=n.id,
                message=n.message,
                read=n.read,
                created_at=n.created_at
            )
            for n in results
        ]
