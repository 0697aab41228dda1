"""
Error taxonomy shared by every service.

Services raise these instead of HTTP errors; ``app.main`` registers a single
handler that turns them into ``{"detail": message}`` responses using the
``status_code`` carried by each class.
"""
from fastapi import status


class FactoryOpsError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(FactoryOpsError):
    """A required field is missing or malformed."""
    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(FactoryOpsError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(FactoryOpsError):
    """The referenced record does not exist."""
    status_code = status.HTTP_404_NOT_FOUND


class PersistenceError(FactoryOpsError):
    """The store rejected or failed to acknowledge a write."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class UpstreamError(FactoryOpsError):
    """
    Mail or PDF collaborator failure. Writes committed before the failure
    are kept.
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
