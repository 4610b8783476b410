from sqlalchemy import String, Float, Integer
from sqlalchemy.orm import Mapped, mapped_column
from salon.database import Base


class Service(Base):
    """Catalog service model (haircut, coloring...)."""

    __tablename__ = "services"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    duration_minutes: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<Service {self.name} ({self.price})>"
