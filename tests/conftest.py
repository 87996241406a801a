"""
Pytest configuration and shared fixtures for the booking API tests.
"""

import os

# Must be set before barberapp.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key-for-testing-only"
os.environ["ADMIN_USERNAME"] = "barbeiro"
os.environ["ADMIN_PASSWORD"] = "123456"
os.environ.pop("ADMIN_PASSWORD_HASH", None)
os.environ["NOTIFICATION_URL"] = ""

from datetime import date, timedelta  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import SQLModel, Session, create_engine  # noqa: E402

from barberapp.main import app  # noqa: E402
from barberapp.db import get_session  # noqa: E402
from barberapp.models import Appointment, Banner, Service, TimeSlot  # noqa: E402
from barberapp.schemas import AppointmentStatus  # noqa: E402
from barberapp.data import DEFAULT_TIME_SLOTS  # noqa: E402


def next_weekday(weekday: int) -> date:
    """First date after today falling on the given weekday (0=Mon, 6=Sun)."""
    day = date.today() + timedelta(days=1)
    while day.weekday() != weekday:
        day += timedelta(days=1)
    return day


@pytest.fixture
def session():
    """Fresh in-memory database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(session):
    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture(scope="session")
def admin_token():
    """Log in once with the configured barber account."""
    with TestClient(app) as login_client:
        response = login_client.post(
            "/auth/login", data={"username": "barbeiro", "password": "123456"}
        )
    assert response.status_code == 200
    return response.json()["access_token"]


@pytest.fixture
def admin_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def booking_date():
    return next_weekday(0)


@pytest.fixture
def sample_service(session):
    service = Service(name="Corte + Barba", description="Completo", price=45.0, duration_minutes=45)
    session.add(service)
    session.commit()
    session.refresh(service)
    return service


@pytest.fixture
def default_slots(session):
    slots = [TimeSlot(time=t) for t in DEFAULT_TIME_SLOTS]
    session.add_all(slots)
    session.commit()
    return slots


@pytest.fixture
def make_appointment(session, sample_service, booking_date):
    """Insert an appointment row directly, bypassing the booking route."""

    def _make(time="09:00", phone="11987654321", status=AppointmentStatus.pending, day=None, service=None):
        appt = Appointment(
            name="João Silva",
            phone=phone,
            date=day or booking_date,
            time=time,
            service_id=(service or sample_service).id,
            status=status,
        )
        session.add(appt)
        session.commit()
        session.refresh(appt)
        return appt

    return _make


@pytest.fixture
def make_banner(session):
    def _make(title="Promoção Especial", **kwargs):
        banner = Banner(title=title, **kwargs)
        session.add(banner)
        session.commit()
        session.refresh(banner)
        return banner

    return _make
