from typing import Optional
from fastapi import APIRouter, Depends, File, UploadFile, status

from app.core.dependencies import get_user_service
from app.core.exceptions import ValidationError
from app.models.base import MessageResponse
from app.models.user import UserRead, UserProfileUpdate, ImageUploadResponse
from app.services.user import UserService
from app.utils.file_storage import save_upload_file

router = APIRouter()


@router.get(
    "/user/{email}",
    response_model=UserRead,
    status_code=status.HTTP_200_OK,
    summary="Get User Profile"
)
def get_user_profile(
    email: str,
    service: UserService = Depends(get_user_service)
):
    return service.to_read(service.get_user(email))


@router.put(
    "/user/{email}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Update User Profile"
)
def update_user_profile(
    email: str,
    data: UserProfileUpdate,
    service: UserService = Depends(get_user_service)
):
    service.update_profile(email, data)
    return MessageResponse(message="User profile updated successfully")


@router.post(
    "/upload",
    response_model=ImageUploadResponse,
    status_code=status.HTTP_200_OK,
    summary="Upload Profile Picture",
    description="Stores the image and returns its public URL for a later profile update."
)
def upload_profile_picture(
    profile_picture: Optional[UploadFile] = File(None, alias="profilePicture")
):
    if profile_picture is None or not profile_picture.filename:
        raise ValidationError("No file uploaded")
    return ImageUploadResponse(image_url=save_upload_file(profile_picture))
