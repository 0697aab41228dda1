from fastapi import APIRouter, Depends, status

from app.core.dependencies import get_current_user, get_settings_service
from app.db.schema import User
from app.models.base import MessageResponse
from app.models.settings import UserSettingsRead, UserSettingsUpdate
from app.services.settings import SettingsService

router = APIRouter()


@router.get(
    "",
    response_model=UserSettingsRead,
    status_code=status.HTTP_200_OK,
    summary="Get My Settings"
)
def get_settings(
    current_user: User = Depends(get_current_user),
    service: SettingsService = Depends(get_settings_service)
):
    return service.get_settings(current_user.email)


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Save My Settings",
    description="Creates the settings on first save, overwrites them afterwards."
)
def save_settings(
    data: UserSettingsUpdate,
    current_user: User = Depends(get_current_user),
    service: SettingsService = Depends(get_settings_service)
):
    service.save_settings(current_user.email, data)
    return MessageResponse(message="Settings saved successfully!")
