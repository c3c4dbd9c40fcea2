import logging
from datetime import datetime
from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from autoservice.exceptions import NotFound, Unauthenticated
from autoservice.models import Appointment, AppointmentStatus, Service, VehicleType
from autoservice.services.reminder_service import ReminderService
from autoservice.services.status_policy import TransitionPolicy, get_transition_policy

logger = logging.getLogger(__name__)

class AppointmentService:
    def __init__(
        self,
        db: AsyncSession,
        transition_policy: Optional[TransitionPolicy] = None,
        reminders: Optional[ReminderService] = None
    ):
        self.db = db
        self.transition_policy = transition_policy or get_transition_policy()
        self.reminders = reminders or ReminderService(db)

    async def create_appointment(
        self,
        user_id: Optional[UUID],
        service_id: UUID,
        vehicle_type: VehicleType,
        vehicle_model: str,
        vehicle_plate: str,
        scheduled_date: datetime,
        pickup_required: bool = False,
        pickup_address: Optional[str] = None,
        dropoff_required: bool = False,
        dropoff_address: Optional[str] = None,
        notes: Optional[str] = None
    ) -> UUID:
        """
        Book a service for the caller's vehicle

        The price is taken from the service's base price and never
        recomputed. An appointment reminder is committed together with the
        booking. Double bookings of the same slot are allowed.
        """
        if user_id is None:
            raise Unauthenticated()

        service = await self.db.get(Service, service_id)
        if not service:
            raise NotFound("Service not found")

        appointment = Appointment(
            user_id=user_id,
            service_id=service.id,
            vehicle_type=vehicle_type,
            vehicle_model=vehicle_model,
            vehicle_plate=vehicle_plate,
            scheduled_date=scheduled_date,
            pickup_required=pickup_required,
            pickup_address=pickup_address if pickup_required else None,
            dropoff_required=dropoff_required,
            dropoff_address=dropoff_address if dropoff_required else None,
            status=AppointmentStatus.SCHEDULED,
            notes=notes,
            total_price=service.base_price
        )
        self.db.add(appointment)
        # Assigns the primary key before the reminder references it
        await self.db.flush()

        self.reminders.schedule_appointment_reminder(
            user_id=user_id,
            appointment_id=appointment.id,
            service_name=service.name,
            scheduled_date=scheduled_date
        )

        await self.db.commit()
        logger.info(f"Appointment {appointment.id} booked for service {service.name}")
        return appointment.id

    async def list_user_appointments(self, user_id: Optional[UUID]) -> List[Appointment]:
        """Caller's appointments with their service, newest first"""
        if user_id is None:
            return []

        result = await self.db.execute(
            select(Appointment)
            .where(Appointment.user_id == user_id)
            .order_by(Appointment.created_at.desc())
        )
        return list(result.scalars().all())

    async def get_owned_appointment(self, user_id: Optional[UUID], appointment_id: UUID) -> Appointment:
        """
        Load an appointment owned by the caller

        Missing and foreign appointments raise the same NotFound so callers
        cannot probe for other users' ids.
        """
        if user_id is None:
            raise Unauthenticated()

        appointment = await self.db.get(Appointment, appointment_id)
        if not appointment or appointment.user_id != user_id:
            raise NotFound("Appointment not found")
        return appointment

    async def update_appointment_status(
        self,
        user_id: Optional[UUID],
        appointment_id: UUID,
        new_status: AppointmentStatus
    ) -> Appointment:
        appointment = await self.get_owned_appointment(user_id, appointment_id)

        self.transition_policy.check(appointment.status, new_status)

        appointment.status = new_status
        await self.db.commit()
        logger.info(f"Appointment {appointment_id} moved to {new_status.value}")
        return appointment
