from pydantic import BaseModel, Field, model_validator
from typing import Optional
from datetime import datetime
from uuid import UUID
from decimal import Decimal
from autoservice.models.appointment import AppointmentStatus, VehicleType
from autoservice.schemas.service import ServiceResponse

class AppointmentCreate(BaseModel):
    service_id: UUID
    vehicle_type: VehicleType
    vehicle_model: str = Field(..., min_length=1, max_length=100)
    vehicle_plate: str = Field(..., min_length=1, max_length=20)
    scheduled_date: datetime
    pickup_required: bool = False
    pickup_address: Optional[str] = None
    dropoff_required: bool = False
    dropoff_address: Optional[str] = None
    notes: Optional[str] = None

    @model_validator(mode="after")
    def check_addresses(self):
        if self.pickup_required and not self.pickup_address:
            raise ValueError("pickup_address is required when pickup_required is set")
        if self.dropoff_required and not self.dropoff_address:
            raise ValueError("dropoff_address is required when dropoff_required is set")
        return self

class AppointmentCreated(BaseModel):
    id: UUID

class AppointmentStatusUpdate(BaseModel):
    status: AppointmentStatus

class AppointmentResponse(BaseModel):
    id: UUID
    user_id: UUID
    service_id: UUID
    vehicle_type: VehicleType
    vehicle_model: str
    vehicle_plate: str
    scheduled_date: datetime
    pickup_required: bool
    pickup_address: Optional[str]
    dropoff_required: bool
    dropoff_address: Optional[str]
    status: AppointmentStatus
    notes: Optional[str]
    total_price: Decimal
    created_at: datetime
    service: Optional[ServiceResponse] = None

    class Config:
        from_attributes = True
