"""Service catalog routes - public listing plus admin management."""

from fastapi import APIRouter, Response

from salon.api.deps import AdminUser, Catalog
from salon.schemas.service import ServiceCreate, ServiceResponse, ServiceUpdate

router = APIRouter()
admin_router = APIRouter()


@router.get("/", response_model=list[ServiceResponse])
async def list_services(catalog: Catalog):
    """List all available services."""
    return await catalog.list_services()


@router.get("/{service_id}", response_model=ServiceResponse)
async def get_service(service_id: int, catalog: Catalog):
    """Get a service by ID."""
    return await catalog.get_service(service_id)


@admin_router.post("/", response_model=ServiceResponse, status_code=201)
async def create_service(service_data: ServiceCreate, catalog: Catalog, admin: AdminUser):
    """Create a new service."""
    return await catalog.create_service(service_data)


@admin_router.put("/{service_id}", response_model=ServiceResponse)
async def update_service(
    service_id: int, service_data: ServiceUpdate, catalog: Catalog, admin: AdminUser
):
    """Replace a service."""
    return await catalog.update_service(service_id, service_data)


@admin_router.delete("/{service_id}", status_code=204)
async def delete_service(service_id: int, catalog: Catalog, admin: AdminUser):
    """Delete a service that no appointment references."""
    await catalog.delete_service(service_id)
    return Response(status_code=204)
