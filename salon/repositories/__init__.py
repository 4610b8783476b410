"""Repositories package - Persistence layer."""

from salon.repositories.appointment_repository import AppointmentRepository, SQLAppointmentRepository
from salon.repositories.service_repository import ServiceRepository
from salon.repositories.user_repository import UserRepository

__all__ = ["AppointmentRepository", "SQLAppointmentRepository", "ServiceRepository", "UserRepository"]
