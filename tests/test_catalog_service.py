"""Tests for the service catalog."""

import pytest

from salon.exceptions import ConflictError, NotFoundError, ValidationError
from salon.models.user import User
from salon.repositories import SQLAppointmentRepository, ServiceRepository
from salon.schemas.appointment import AppointmentResponse
from salon.schemas.service import ServiceCreate, ServiceUpdate
from salon.services.catalog_service import DEFAULT_SERVICES, CatalogService
from tests.conftest import NOW


@pytest.fixture
def catalog(db):
    return CatalogService(ServiceRepository(db))


async def test_create_and_get(catalog):
    created = await catalog.create_service(
        ServiceCreate(name="Corte", price=50.0, duration_minutes=30)
    )

    fetched = await catalog.get_service(created.id)
    assert fetched.name == "Corte"
    assert fetched.price == 50.0


@pytest.mark.parametrize(
    "data, message",
    [
        ({"name": " ", "price": 10.0, "duration_minutes": 30}, "name is required"),
        ({"name": "Corte", "price": -1.0, "duration_minutes": 30}, "cannot be negative"),
        ({"name": "Corte", "price": 10.0, "duration_minutes": 0}, "greater than 0"),
    ],
)
async def test_invalid_services_are_rejected(catalog, data, message):
    with pytest.raises(ValidationError, match=message):
        await catalog.create_service(ServiceCreate(**data))


async def test_free_service_is_allowed(catalog):
    created = await catalog.create_service(
        ServiceCreate(name="Consulta", price=0.0, duration_minutes=15)
    )

    assert created.price == 0.0


async def test_update_rereads_stored_service(catalog):
    created = await catalog.create_service(
        ServiceCreate(name="Corte", price=50.0, duration_minutes=30)
    )

    updated = await catalog.update_service(
        created.id, ServiceUpdate(name="Corte Masculino", price=45.0, duration_minutes=25)
    )

    assert updated.id == created.id
    assert updated.name == "Corte Masculino"
    assert updated.duration_minutes == 25


async def test_update_missing_service(catalog):
    with pytest.raises(NotFoundError):
        await catalog.update_service(
            404, ServiceUpdate(name="Corte", price=45.0, duration_minutes=25)
        )


async def test_resolve_keeps_order_and_repeats(catalog):
    corte = await catalog.create_service(ServiceCreate(name="Corte", price=50.0, duration_minutes=30))
    escova = await catalog.create_service(ServiceCreate(name="Escova", price=40.0, duration_minutes=45))

    resolved = await catalog.resolve([escova.id, corte.id, escova.id])

    assert [s.name for s in resolved] == ["Escova", "Corte", "Escova"]


async def test_resolve_unknown_service(catalog):
    with pytest.raises(NotFoundError):
        await catalog.resolve([404])


async def test_delete_unbooked_service(catalog):
    created = await catalog.create_service(ServiceCreate(name="Corte", price=50.0, duration_minutes=30))

    await catalog.delete_service(created.id)

    assert await catalog.list_services() == []


async def test_delete_booked_service_is_refused(catalog, db):
    created = await catalog.create_service(ServiceCreate(name="Corte", price=50.0, duration_minutes=30))
    user = User(email="ana@example.com", password_hash="x", name="Ana", phone="1")
    db.add(user)
    await db.flush()
    await SQLAppointmentRepository(db).create(
        AppointmentResponse(user_id=user.id, services=await catalog.resolve([created.id]), date=NOW)
    )

    with pytest.raises(ConflictError):
        await catalog.delete_service(created.id)


async def test_seed_defaults_only_once(catalog):
    assert await catalog.seed_defaults() == len(DEFAULT_SERVICES)
    assert await catalog.seed_defaults() == 0

    names = [s.name for s in await catalog.list_services()]
    assert names[0] == "Corte de Cabelo"
    assert len(names) == len(DEFAULT_SERVICES)
