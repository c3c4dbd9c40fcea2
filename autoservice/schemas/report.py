from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from uuid import UUID
from decimal import Decimal
from autoservice.schemas.appointment import AppointmentResponse

class PartReplaced(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    cost: Decimal = Field(..., ge=0, decimal_places=2)
    quantity: int = Field(1, ge=1)

class ServiceReportCreate(BaseModel):
    # Totals are always computed server-side; a submitted total is ignored
    appointment_id: UUID
    services_performed: List[str]
    parts_replaced: List[PartReplaced] = []
    labor_cost: Decimal = Field(..., ge=0, decimal_places=2)
    next_service_due: Optional[datetime] = None
    recommendations: Optional[str] = None
    mechanic_notes: Optional[str] = None

class ReportPartResponse(BaseModel):
    name: str
    cost: Decimal
    quantity: int

    class Config:
        from_attributes = True

class ServiceReportCreated(BaseModel):
    id: UUID

class ServiceReportResponse(BaseModel):
    id: UUID
    appointment_id: UUID
    user_id: UUID
    service_date: datetime
    services_performed: List[str]
    parts_replaced: List[ReportPartResponse]
    labor_cost: Decimal
    total_cost: Decimal
    next_service_due: Optional[datetime]
    recommendations: Optional[str]
    mechanic_notes: Optional[str]
    ai_generated_report: Optional[str]
    generated_at: Optional[datetime]
    created_at: datetime

    class Config:
        from_attributes = True

class ServiceReportDetail(ServiceReportResponse):
    """Report joined with its appointment (which carries the service)"""
    appointment: Optional[AppointmentResponse] = None
