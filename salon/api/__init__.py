from fastapi import APIRouter
from salon.api.routes import admin, appointments, auth, services

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["Auth"])
api_router.include_router(services.router, prefix="/services", tags=["Services"])
api_router.include_router(appointments.router, prefix="/appointments", tags=["Appointments"])
api_router.include_router(admin.router, prefix="/admin", tags=["Admin"])
api_router.include_router(services.admin_router, prefix="/admin/services", tags=["Admin"])
