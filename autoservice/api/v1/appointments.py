from fastapi import APIRouter, Depends, status
from typing import List, Optional
from uuid import UUID
from autoservice.dependencies import get_appointment_service, get_current_user_id
from autoservice.schemas.appointment import (
    AppointmentCreate, AppointmentCreated, AppointmentStatusUpdate, AppointmentResponse
)
from autoservice.services.appointment_service import AppointmentService

router = APIRouter(prefix="/appointments", tags=["Appointments"])

@router.post("/", response_model=AppointmentCreated, status_code=status.HTTP_201_CREATED)
async def create_appointment(
    appointment_data: AppointmentCreate,
    user_id: Optional[UUID] = Depends(get_current_user_id),
    appointments: AppointmentService = Depends(get_appointment_service)
):
    """Book a service appointment"""
    appointment_id = await appointments.create_appointment(
        user_id=user_id,
        **appointment_data.model_dump()
    )
    return AppointmentCreated(id=appointment_id)

@router.get("/", response_model=List[AppointmentResponse])
async def list_my_appointments(
    user_id: Optional[UUID] = Depends(get_current_user_id),
    appointments: AppointmentService = Depends(get_appointment_service)
):
    """Get the caller's appointments, newest first (empty when anonymous)"""
    return await appointments.list_user_appointments(user_id)

@router.get("/{appointment_id}", response_model=AppointmentResponse)
async def get_appointment(
    appointment_id: UUID,
    user_id: Optional[UUID] = Depends(get_current_user_id),
    appointments: AppointmentService = Depends(get_appointment_service)
):
    return await appointments.get_owned_appointment(user_id, appointment_id)

@router.put("/{appointment_id}/status")
async def update_appointment_status(
    appointment_id: UUID,
    status_update: AppointmentStatusUpdate,
    user_id: Optional[UUID] = Depends(get_current_user_id),
    appointments: AppointmentService = Depends(get_appointment_service)
):
    """Change an appointment's status"""
    await appointments.update_appointment_status(user_id, appointment_id, status_update.status)
    return {"message": "Status updated successfully"}
