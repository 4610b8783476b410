from datetime import datetime

import pytest
from sqlalchemy.pool import StaticPool

import salon.models  # noqa: F401
from salon.database import Base, build_engine, build_session_factory
from salon.models.appointment import AppointmentStatus
from salon.schemas.appointment import AppointmentResponse
from salon.schemas.service import ServiceResponse
from salon.services.appointment_service import AppointmentService
from tests.fakes import FakeClock, InMemoryAppointmentRepository

# A Wednesday
NOW = datetime(2026, 10, 21, 10, 0)

CORTE = ServiceResponse(id=1, name="Corte", price=50.0, duration_minutes=30)
ESCOVA = ServiceResponse(id=2, name="Escova", price=40.0, duration_minutes=45)
COLORACAO = ServiceResponse(id=3, name="Coloração", price=100.0, duration_minutes=120)


def make_appointment(**overrides) -> AppointmentResponse:
    data = {
        "id": None,
        "user_id": 1,
        "services": [CORTE],
        "date": NOW,
        "status": AppointmentStatus.PENDING,
        "created_at": datetime(2026, 10, 1, 9, 0),
        "updated_at": datetime(2026, 10, 1, 9, 0),
    }
    data.update(overrides)
    return AppointmentResponse(**data)


@pytest.fixture
def clock():
    return FakeClock(NOW)


@pytest.fixture
def repo():
    return InMemoryAppointmentRepository()


@pytest.fixture
def service(repo, clock):
    return AppointmentService(repo, clock=clock)


@pytest.fixture
async def engine():
    engine = build_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session
