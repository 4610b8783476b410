from datetime import datetime
from enum import Enum
from sqlalchemy import String, DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship
from salon.database import Base
from salon.models.service import Service
from salon.utils import utcnow


class AppointmentStatus(str, Enum):
    """Appointment status enum."""
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    DONE = "DONE"
    CANCELED = "CANCELED"


class AppointmentServiceLink(Base):
    """One booked service inside an appointment, ordered by position."""

    __tablename__ = "appointment_services"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    appointment_id: Mapped[int] = mapped_column(
        ForeignKey("appointments.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    service_id: Mapped[int] = mapped_column(
        ForeignKey("services.id"),
        nullable=False,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)

    service: Mapped[Service] = relationship("Service")


class Appointment(Base):
    """Appointment model."""

    __tablename__ = "appointments"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    date: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        index=True,
    )
    status: Mapped[str] = mapped_column(
        String(20),
        default=AppointmentStatus.PENDING.value,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utcnow,
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="appointments")
    service_links: Mapped[list[AppointmentServiceLink]] = relationship(
        AppointmentServiceLink,
        order_by=AppointmentServiceLink.position,
        cascade="all, delete-orphan",
    )

    @property
    def services(self) -> list[Service]:
        return [link.service for link in self.service_links]

    def __repr__(self) -> str:
        return f"<Appointment {self.id} {self.date} ({self.status})>"
