from pydantic import BaseModel
from uuid import UUID
from decimal import Decimal
from autoservice.models.service import ServiceCategory, ServiceVehicleType

class ServiceResponse(BaseModel):
    id: UUID
    name: str
    description: str
    base_price: Decimal
    estimated_duration_minutes: int
    category: ServiceCategory
    vehicle_type: ServiceVehicleType

    class Config:
        from_attributes = True

class SeedResult(BaseModel):
    inserted: int
