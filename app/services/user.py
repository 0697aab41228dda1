from typing import Optional
from datetime import timedelta

import jwt
from loguru import logger
from sqlmodel import Session, select

from app.core.config import settings
from app.core.exceptions import (
    AuthenticationError, NotFoundError, PersistenceError, ValidationError
)
from app.core.notifications import create_notification
from app.db.schema import User
from app.models.auth import TokenData
from app.models.user import UserProfileUpdate, UserRead
from app.utils.dates import utc_now
from app.utils.mailer import Mailer
from .password import get_password_hash, verify_password


class UserService:
    ALGORITHM = "HS256"

    def __init__(self, session: Session):
        self.session = session

    def _create_jwt(self, subject: str, expires_delta: timedelta, type: str) -> str:
        """Helper to sign JWTs with specific types."""
        to_encode = {
            "sub": str(subject),
            "exp": utc_now() + expires_delta,
            "type": type
        }
        return jwt.encode(to_encode, settings.secret_key, algorithm=self.ALGORITHM)

    def _decode_jwt(self, token: str, expected_type: str) -> Optional[TokenData]:
        try:
            payload = jwt.decode(token, settings.secret_key,
                                 algorithms=[self.ALGORITHM])
        except jwt.PyJWTError:
            return None

        email = payload.get("sub")
        if not email or payload.get("type") != expected_type:
            return None
        return TokenData(email=email)

    def _save(self, user: User, failure_message: str):
        try:
            self.session.add(user)
            self.session.commit()
            self.session.refresh(user)
        except Exception:
            self.session.rollback()
            logger.exception(failure_message)
            raise PersistenceError(failure_message)

    def to_read(self, user: User) -> UserRead:
        return UserRead(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            birthday=user.birthday,
            address=user.address,
            profile_picture=user.profile_picture,
            created_at=user.created_at,
            updated_at=user.updated_at
        )

    def get_user_by_email(self, email: str) -> Optional[User]:
        statement = select(User).where(User.email == email.lower())
        return self.session.exec(statement).first()

    def get_user(self, email: str) -> User:
        user = self.get_user_by_email(email)
        if not user:
            raise NotFoundError("User not found")
        return user

    # ==========================================================================
    # REGISTRATION & LOGIN
    # ==========================================================================

    def register(self, email: str, password: str) -> User:
        if self.get_user_by_email(email):
            logger.warning(f"Registration rejected, email exists: {email}")
            raise ValidationError("User already exists")

        user = User(
            email=email.lower(),
            hashed_password=get_password_hash(password)
        )
        self._save(user, "Registration failed")

        logger.info(f"Registration successful for {user.email}")

        create_notification(self.session, f"New user registered: {user.email}")
        return user

    def authenticate_user(self, email: str, password: str) -> User:
        """Verify email and password hash."""
        user = self.get_user(email)
        if not verify_password(password, user.hashed_password):
            raise AuthenticationError("Invalid credentials")
        return user

    def generate_login_token(self, user: User, remember: bool = False) -> str:
        minutes = (settings.remember_token_expire_minutes if remember
                   else settings.login_token_expire_minutes)
        return self._create_jwt(
            subject=user.email,
            expires_delta=timedelta(minutes=minutes),
            type="access"
        )

    def verify_access_token(self, token: str) -> Optional[TokenData]:
        return self._decode_jwt(token, "access")

    # ==========================================================================
    # PROFILE
    # ==========================================================================

    def update_profile(self, email: str, data: UserProfileUpdate) -> User:
        user = self.get_user(email)

        # Only the fields present in the body are changed
        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(user, field, value if value is not None else "")
        user.updated_at = utc_now()

        self._save(user, "Failed to update user profile")

        create_notification(self.session, f"User profile updated: {user.email}")
        return user

    # ==========================================================================
    # PASSWORD RESET
    # ==========================================================================

    def request_password_reset(self, email: str, mailer: Mailer) -> str:
        """
        Mails a one-hour reset link to the user. Returns the token so callers
        (and tests) can correlate it.
        """
        user = self.get_user(email)

        reset_token = self._create_jwt(
            subject=user.email,
            expires_delta=timedelta(minutes=settings.reset_token_expire_minutes),
            type="reset"
        )
        link = f"{settings.frontend_url}/reset-password?token={reset_token}"

        mailer.send(
            to=user.email,
            subject="Password Reset",
            html=(
                "<p>You requested a password reset. "
                "Click the link below to reset your password:</p>"
                f'<a href="{link}">Reset Password</a>'
            )
        )
        logger.info(f"Password reset link sent to {user.email}")
        return reset_token

    def reset_password(self, token: str, password: str) -> User:
        token_data = self._decode_jwt(token, "reset")
        if not token_data:
            raise ValidationError("Invalid or expired reset token")

        user = self.get_user(token_data.email)
        user.hashed_password = get_password_hash(password)
        user.updated_at = utc_now()

        self._save(user, "Failed to reset password")
        logger.info(f"Password reset for {user.email}")
        return user
