import logging
from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Sequence
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError
from sqlalchemy import select
from autoservice.config import settings
from autoservice.exceptions import ConfigurationError, NotFound, ReportAlreadyExists
from autoservice.models import Appointment, AppointmentStatus, Service, ServiceReport, ReportPart
from autoservice.services.ai_provider import (
    AIProviderConfig, GeneratorFactory, openai_generator_factory,
)
from autoservice.services.appointment_service import AppointmentService
from autoservice.services.reminder_service import ReminderService
from autoservice.services.report_classifier import classify_service
from autoservice.utils.dates import utcnow, as_utc, shift_days, format_service_date
from autoservice.utils.money import to_money, calculate_total_cost

logger = logging.getLogger(__name__)

AI_RECOMMENDATIONS = "See AI-generated report for detailed recommendations"
AI_MECHANIC_NOTES = "Report generated using AI assistance"

def build_report_prompt(appointment: Appointment, service_name: Optional[str]) -> str:
    """Prompt asking the provider for a prose service report"""
    service_name = service_name or "General Service"

    lines = [
        "Generate a detailed vehicle service report for the following appointment:",
        "",
        f"Service Type: {service_name}",
        f"Vehicle Type: {appointment.vehicle_type.value}",
        f"Vehicle Model: {appointment.vehicle_model}",
        f"Vehicle Plate: {appointment.vehicle_plate}",
        f"Service Date: {format_service_date(appointment.scheduled_date)}",
    ]
    if appointment.notes:
        lines.append(f"Customer Notes: {appointment.notes}")
    if appointment.pickup_required:
        lines.append(f"Pickup Address: {appointment.pickup_address}")
    if appointment.dropoff_required:
        lines.append(f"Drop-off Address: {appointment.dropoff_address}")

    lines += [
        "",
        "Please generate a realistic and detailed service report that includes:",
        "1. Services Performed (list 3-5 items specific to the service type)",
        "2. Parts Replaced (if applicable, with realistic costs)",
        "3. Labor Cost (reasonable estimate)",
        "4. Vehicle Condition Assessment",
        "5. Recommendations for future maintenance",
        "6. Next Service Due Date (estimated)",
        "7. Mechanic Notes",
        "",
        "Format the report in a professional manner with clear sections and specific details. "
        "Make it realistic and relevant to the service type.",
        "",
        "Important: Do NOT use tables or any kind of tabular or column format.",
    ]
    return "\n".join(lines)

class ReportService:
    def __init__(
        self,
        db: AsyncSession,
        ai_config: Optional[AIProviderConfig] = None,
        generator_factory: GeneratorFactory = openai_generator_factory,
        next_service_interval_days: Optional[int] = None
    ):
        self.db = db
        self.ai_config = ai_config or AIProviderConfig.from_settings()
        self.generator_factory = generator_factory
        self.next_service_interval_days = (
            settings.NEXT_SERVICE_INTERVAL_DAYS
            if next_service_interval_days is None
            else next_service_interval_days
        )
        self.appointments = AppointmentService(db)
        self.reminders = ReminderService(db)

    # ---- Reads ----
    async def get_report_by_appointment(
        self,
        user_id: Optional[UUID],
        appointment_id: UUID
    ) -> Optional[ServiceReport]:
        """Caller's report for an appointment, or None (also for other users' reports)"""
        if user_id is None:
            return None

        result = await self.db.execute(
            select(ServiceReport).where(
                ServiceReport.appointment_id == appointment_id,
                ServiceReport.user_id == user_id
            )
        )
        return result.scalars().first()

    async def get_user_reports(self, user_id: Optional[UUID]) -> List[ServiceReport]:
        """Caller's reports with appointment and service, newest first"""
        if user_id is None:
            return []

        result = await self.db.execute(
            select(ServiceReport)
            .where(ServiceReport.user_id == user_id)
            .order_by(ServiceReport.created_at.desc())
        )
        return list(result.scalars().all())

    # ---- Manual path ----
    async def create_service_report(
        self,
        user_id: Optional[UUID],
        appointment_id: UUID,
        services_performed: Sequence[str],
        parts_replaced: Sequence[dict],
        labor_cost: Decimal,
        next_service_due: Optional[datetime] = None,
        recommendations: Optional[str] = None,
        mechanic_notes: Optional[str] = None
    ) -> UUID:
        """
        Record work done for an appointment

        ``parts_replaced`` items carry ``name``, ``cost`` and ``quantity``.
        The total is always recomputed here. Passing ``user_id=None`` skips
        the ownership check (staff tooling); otherwise the appointment must
        belong to the caller. The appointment is marked completed and, when
        ``next_service_due`` is given, an upcoming service reminder is
        scheduled. Everything is written in one commit.
        """
        if user_id is None:
            appointment = await self.db.get(Appointment, appointment_id)
            if not appointment:
                raise NotFound("Appointment not found")
        else:
            appointment = await self.appointments.get_owned_appointment(user_id, appointment_id)

        report = self._build_report(
            appointment,
            services_performed=services_performed,
            parts=[(p["name"], p["cost"], p["quantity"]) for p in parts_replaced],
            labor_cost=labor_cost,
            next_service_due=next_service_due,
            recommendations=recommendations,
            mechanic_notes=mechanic_notes
        )
        if next_service_due is not None:
            self.reminders.schedule_upcoming_service(
                user_id=appointment.user_id,
                due_at=next_service_due,
                appointment_id=appointment.id
            )

        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise ReportAlreadyExists("A report already exists for this appointment") from e

        logger.info(f"Service report {report.id} created for appointment {appointment.id}")
        return report.id

    # ---- AI path ----
    async def generate_ai_service_report(self, user_id: Optional[UUID], appointment_id: UUID) -> UUID:
        """
        Produce (or enrich) the appointment's report with an AI narrative

        Billing fields come from ``classify_service`` and never from the
        narrative. Calling again once a report has AI content returns the
        same id without touching it. Nothing is written unless the provider
        call succeeds.
        """
        appointment = await self.appointments.get_owned_appointment(user_id, appointment_id)

        existing = await self.get_report_by_appointment(user_id, appointment_id)
        if existing and existing.ai_generated_report:
            return existing.id

        if not self.ai_config.api_key:
            raise ConfigurationError(
                "AI report provider is not configured. Set OPENAI_API_KEY in the environment."
            )

        service = await self.db.get(Service, appointment.service_id)
        service_name = service.name if service else ""

        prompt = build_report_prompt(appointment, service_name)
        generator = self.generator_factory(self.ai_config)
        report_text = await generator.generate_content(prompt)

        breakdown = classify_service(service_name)
        next_service_due = shift_days(as_utc(appointment.scheduled_date), self.next_service_interval_days)

        if existing:
            existing.ai_generated_report = report_text
            existing.generated_at = utcnow()
            await self.db.commit()
            logger.info(f"Added AI narrative to report {existing.id}")
            return existing.id

        report = self._build_report(
            appointment,
            services_performed=breakdown.services_performed,
            parts=[(part.name, part.cost, part.quantity) for part in breakdown.parts_replaced],
            labor_cost=breakdown.labor_cost,
            next_service_due=next_service_due,
            recommendations=AI_RECOMMENDATIONS,
            mechanic_notes=AI_MECHANIC_NOTES,
            ai_generated_report=report_text,
            generated_at=utcnow()
        )
        self.reminders.schedule_upcoming_service(
            user_id=appointment.user_id,
            due_at=next_service_due,
            appointment_id=appointment.id
        )

        try:
            await self.db.commit()
        except IntegrityError:
            # A concurrent request created the report first; keep theirs
            await self.db.rollback()
            winner = await self.get_report_by_appointment(user_id, appointment_id)
            if winner is None:
                raise
            logger.info(f"Report for appointment {appointment_id} already created concurrently")
            return winner.id

        logger.info(f"AI service report {report.id} created for appointment {appointment.id}")
        return report.id

    def _build_report(
        self,
        appointment: Appointment,
        services_performed: Sequence[str],
        parts: Sequence[tuple],
        labor_cost: Decimal,
        next_service_due: Optional[datetime],
        recommendations: Optional[str],
        mechanic_notes: Optional[str],
        ai_generated_report: Optional[str] = None,
        generated_at: Optional[datetime] = None
    ) -> ServiceReport:
        """Add a report for ``appointment`` to the session and mark the appointment completed"""
        report = ServiceReport(
            appointment_id=appointment.id,
            user_id=appointment.user_id,
            service_date=utcnow(),
            services_performed=list(services_performed),
            parts_replaced=[
                ReportPart(position=index, name=name, cost=to_money(cost), quantity=quantity)
                for index, (name, cost, quantity) in enumerate(parts)
            ],
            labor_cost=to_money(labor_cost),
            total_cost=calculate_total_cost(
                ((cost, quantity) for _, cost, quantity in parts),
                labor_cost
            ),
            next_service_due=next_service_due,
            recommendations=recommendations,
            mechanic_notes=mechanic_notes,
            ai_generated_report=ai_generated_report,
            generated_at=generated_at
        )
        self.db.add(report)
        appointment.status = AppointmentStatus.COMPLETED
        return report
