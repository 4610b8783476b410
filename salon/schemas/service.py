from pydantic import BaseModel, Field


class ServiceBase(BaseModel):
    """Base catalog service schema."""
    name: str = Field(..., max_length=100, description="Service name")
    price: float = Field(..., description="Price charged for the service")
    duration_minutes: int = Field(..., description="Duration in minutes")


class ServiceCreate(ServiceBase):
    """Schema for creating a catalog service."""
    pass


class ServiceUpdate(ServiceBase):
    """Schema for replacing a catalog service."""
    pass


class ServiceResponse(ServiceBase):
    """Schema for catalog service response."""
    id: int

    class Config:
        from_attributes = True
