from app.models.base import CamelModel


class UserSettingsBase(CamelModel):
    push_notifications: bool = False
    dark_mode: bool = False
    email_notifications: bool = False
    auto_logout: bool = False


class UserSettingsUpdate(UserSettingsBase):
    pass


class UserSettingsRead(UserSettingsBase):
    user: str
