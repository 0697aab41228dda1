from loguru import logger
from sqlmodel import Session

from app.core.exceptions import PersistenceError
from app.db.schema import Notification
from app.utils.dates import utc_now


def create_notification(session: Session, message: str) -> Notification:
    """
    Appends an entry to the activity feed and commits it.

    Runs after the triggering write has been committed, so a failure here
    surfaces as an error without undoing that write.
    """
    notification = Notification(message=message, created_at=utc_now())
    try:
        session.add(notification)
        session.commit()
        session.refresh(notification)
    except Exception:
        session.rollback()
        logger.exception(f"Notification write failed: {message}")
        raise PersistenceError("Failed to record notification")
    return notification
