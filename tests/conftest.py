"""
Pytest fixtures for the factory operations API.

Every test gets a fresh in-memory SQLite database; the app's session,
mailer and PDF renderer dependencies are overridden per test.
"""
import os
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="factory-ops-tests-")

# Settings are read at import time, configure them before importing the app
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["STATIC_DIR"] = os.path.join(_TMP_DIR, "static")
os.environ["LOG_FILE"] = os.path.join(_TMP_DIR, "test.log")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from app.main import app
from app.db.core import get_session
from app.core.dependencies import get_mailer
from app.core.exceptions import UpstreamError


class FakeMailer:
    """Records outgoing mail instead of talking to SMTP."""

    def __init__(self):
        self.sent = []
        self.fail = False

    def send(self, to: str, subject: str, html: str) -> None:
        if self.fail:
            raise UpstreamError("Failed to send email")
        self.sent.append({"to": to, "subject": subject, "html": html})


@pytest.fixture(name="engine")
def engine_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="mailer")
def mailer_fixture():
    return FakeMailer()


@pytest.fixture(name="client")
def client_fixture(session, mailer):
    def get_session_override():
        yield session

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_mailer] = lambda: mailer

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def module_request_payload():
    return {
        "module": "CAM-001",
        "requestedBy": "Alice",
        "description": "Rear camera modules for the X1 line",
        "recipient": "Factory A",
        "requestDate": "2023-10-01",
        "quantity": 100,
    }


@pytest.fixture
def work_order_payload():
    return {
        "module": "Phone X1",
        "createdBy": "Alice",
        "description": "First batch",
        "assignedTo": "Line 1",
        "createdDate": "2023-10-01",
        "dueDate": "2023-10-15T12:00:00Z",
        "priority": "High",
        "quantity": 500,
    }


@pytest.fixture
def production_payload():
    return {
        "workOrderID": "WO-1001",
        "dateRequested": "2023-10-05",
        "fulfilledBy": "Line 1",
        "dateFulfilled": "2023-10-03",
        "producedQty": 150,
    }
