from fastapi import APIRouter, Depends, status
from loguru import logger

from app.core.dependencies import get_user_service, get_mailer
from app.models.auth import (
    RegisterRequest, LoginRequest, LoginResponse,
    ForgotPasswordRequest, ResetPasswordRequest
)
from app.models.base import MessageResponse
from app.services.user import UserService
from app.utils.mailer import Mailer

router = APIRouter()


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new User"
)
def register(
    data: RegisterRequest,
    service: UserService = Depends(get_user_service)
):
    service.register(data.email, data.password)
    return MessageResponse(message="User registered successfully!")


@router.post(
    "/login",
    response_model=LoginResponse,
    status_code=status.HTTP_200_OK,
    summary="Signin to get a token",
    description="Token lifetime is one day, or thirty days with 'remember'."
)
def login(
    data: LoginRequest,
    service: UserService = Depends(get_user_service)
):
    user = service.authenticate_user(data.email, data.password)
    token = service.generate_login_token(user, remember=data.remember)

    logger.info(f"User logged in: {user.email}")

    return LoginResponse(message="Login successful!", token=token)


@router.post(
    "/forgot-password",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Request Password Reset Link"
)
def forgot_password(
    data: ForgotPasswordRequest,
    service: UserService = Depends(get_user_service),
    mailer: Mailer = Depends(get_mailer)
):
    service.request_password_reset(data.email, mailer)
    return MessageResponse(message="Password reset link sent to your email.")


@router.post(
    "/reset-password",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Reset Password with Token"
)
def reset_password(
    data: ResetPasswordRequest,
    service: UserService = Depends(get_user_service)
):
    service.reset_password(data.token, data.password)
    return MessageResponse(message="Password reset successful!")
