from fastapi import APIRouter, Depends, status
from typing import List, Optional
from uuid import UUID
from autoservice.dependencies import get_current_user_id, get_report_service
from autoservice.exceptions import Unauthenticated
from autoservice.schemas.report import (
    ServiceReportCreate, ServiceReportCreated, ServiceReportResponse, ServiceReportDetail
)
from autoservice.services.report_service import ReportService

router = APIRouter(prefix="/reports", tags=["Service Reports"])

@router.post("/", response_model=ServiceReportCreated, status_code=status.HTTP_201_CREATED)
async def create_service_report(
    report_data: ServiceReportCreate,
    user_id: Optional[UUID] = Depends(get_current_user_id),
    reports: ReportService = Depends(get_report_service)
):
    """Record a manual service report; completes the appointment"""
    if user_id is None:
        raise Unauthenticated()

    report_id = await reports.create_service_report(
        user_id=user_id,
        appointment_id=report_data.appointment_id,
        services_performed=report_data.services_performed,
        parts_replaced=[part.model_dump() for part in report_data.parts_replaced],
        labor_cost=report_data.labor_cost,
        next_service_due=report_data.next_service_due,
        recommendations=report_data.recommendations,
        mechanic_notes=report_data.mechanic_notes
    )
    return ServiceReportCreated(id=report_id)

@router.post("/generate/{appointment_id}", response_model=ServiceReportCreated)
async def generate_ai_service_report(
    appointment_id: UUID,
    user_id: Optional[UUID] = Depends(get_current_user_id),
    reports: ReportService = Depends(get_report_service)
):
    """Generate an AI-written report for the caller's appointment"""
    report_id = await reports.generate_ai_service_report(user_id, appointment_id)
    return ServiceReportCreated(id=report_id)

@router.get("/", response_model=List[ServiceReportDetail])
async def list_my_reports(
    user_id: Optional[UUID] = Depends(get_current_user_id),
    reports: ReportService = Depends(get_report_service)
):
    """Get the caller's reports with appointment and service, newest first"""
    return await reports.get_user_reports(user_id)

@router.get("/appointment/{appointment_id}", response_model=Optional[ServiceReportResponse])
async def get_report_by_appointment(
    appointment_id: UUID,
    user_id: Optional[UUID] = Depends(get_current_user_id),
    reports: ReportService = Depends(get_report_service)
):
    """Report for an appointment, or null"""
    return await reports.get_report_by_appointment(user_id, appointment_id)
