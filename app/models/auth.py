from pydantic import BaseModel, EmailStr, Field, StringConstraints
from typing_extensions import Annotated


class RegisterRequest(BaseModel):
    email: Annotated[EmailStr, StringConstraints(to_lower=True)] = Field(
        max_length=255
    )
    password: str = Field(min_length=1, max_length=128)


class LoginRequest(BaseModel):
    email: Annotated[EmailStr, StringConstraints(to_lower=True)]
    password: str
    remember: bool = False


class LoginResponse(BaseModel):
    message: str
    token: str


class ForgotPasswordRequest(BaseModel):
    email: Annotated[EmailStr, StringConstraints(to_lower=True)]


class ResetPasswordRequest(BaseModel):
    token: str = Field(min_length=1)
    password: str = Field(min_length=1, max_length=128)


class TokenData(BaseModel):
    email: str
