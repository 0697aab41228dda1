from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlmodel import Session

from app.db.core import get_session
from app.db.schema import User
from app.services.dashboard import DashboardService
from app.services.logistics import LogisticsService
from app.services.notification import NotificationService
from app.services.production import ProductionService
from app.services.report import ReportService
from app.services.settings import SettingsService
from app.services.tracking import TrackingService
from app.services.user import UserService
from app.services.work_order import WorkOrderService
from app.utils.mailer import Mailer, mailer
from app.utils.pdf import ReportRenderer, report_renderer

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/login")


def get_user_service(session: Session = Depends(get_session)) -> UserService:
    """Creates a UserService instance using the active DB session."""
    return UserService(session)


def get_logistics_service(session: Session = Depends(get_session)) -> LogisticsService:
    return LogisticsService(session)


def get_tracking_service(session: Session = Depends(get_session)) -> TrackingService:
    return TrackingService(session)


def get_work_order_service(session: Session = Depends(get_session)) -> WorkOrderService:
    return WorkOrderService(session)


def get_production_service(session: Session = Depends(get_session)) -> ProductionService:
    return ProductionService(session)


def get_dashboard_service(session: Session = Depends(get_session)) -> DashboardService:
    return DashboardService(session)


def get_settings_service(session: Session = Depends(get_session)) -> SettingsService:
    return SettingsService(session)


def get_notification_service(session: Session = Depends(get_session)) -> NotificationService:
    return NotificationService(session)


def get_mailer() -> Mailer:
    """Process-wide SMTP transport."""
    return mailer


def get_report_renderer() -> ReportRenderer:
    return report_renderer


def get_report_service(
    renderer: ReportRenderer = Depends(get_report_renderer)
) -> ReportService:
    return ReportService(renderer)


def get_current_user(
    token: str = Depends(oauth2_scheme),
    service: UserService = Depends(get_user_service)
) -> User:
    """
    Validates the JWT token and retrieves the user.
    This is the gatekeeper for protected routes.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    token_data = service.verify_access_token(token)
    if not token_data:
        raise credentials_exception

    user = service.get_user_by_email(token_data.email)
    if user is None:
        raise credentials_exception

    return user
