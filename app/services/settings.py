from loguru import logger
from sqlmodel import Session, select

from app.core.exceptions import NotFoundError, PersistenceError
from app.db.schema import UserSettings
from app.models.settings import UserSettingsRead, UserSettingsUpdate


class SettingsService:
    def __init__(self, session: Session):
        self.session = session

    def _find(self, email: str):
        return self.session.exec(
            select(UserSettings).where(UserSettings.user_email == email)
        ).first()

    def _to_read(self, row: UserSettings) -> UserSettingsRead:
        return UserSettingsRead(
            user=row.user_email,
            push_notifications=row.push_notifications,
            dark_mode=row.dark_mode,
            email_notifications=row.email_notifications,
            auto_logout=row.auto_logout
        )

    def get_settings(self, email: str) -> UserSettingsRead:
        row = self._find(email)
        if not row:
            raise NotFoundError("Settings not found")
        return self._to_read(row)

    def save_settings(self, email: str, data: UserSettingsUpdate) -> UserSettingsRead:
        """Upsert: creates the user's settings row or overwrites every toggle."""
        row = self._find(email) or UserSettings(user_email=email)

        row.push_notifications = data.push_notifications
        row.dark_mode = data.dark_mode
        row.email_notifications = data.email_notifications
        row.auto_logout = data.auto_logout

        try:
            self.session.add(row)
            self.session.commit()
            self.session.refresh(row)
        except Exception:
            self.session.rollback()
            logger.exception(f"Saving settings for {email} failed")
            raise PersistenceError("Failed to save settings")

        return self._to_read(row)
