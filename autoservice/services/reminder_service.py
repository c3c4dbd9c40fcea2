from datetime import datetime, timedelta
from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from autoservice.config import settings
from autoservice.models import Reminder, ReminderType

NEXT_SERVICE_MESSAGE = "Your vehicle is due for its next service"

class ReminderService:
    """
    Registry of scheduled notifications

    Scheduling methods only add rows to the session; the calling workflow
    owns the commit so a reminder is written together with the change that
    caused it. Delivery is handled outside this application.
    """

    def __init__(self, db: AsyncSession, lead_hours: Optional[int] = None):
        self.db = db
        self.lead_hours = settings.REMINDER_LEAD_HOURS if lead_hours is None else lead_hours

    def schedule_appointment_reminder(
        self,
        user_id: UUID,
        appointment_id: UUID,
        service_name: str,
        scheduled_date: datetime
    ) -> Reminder:
        # Not validated against the current time: bookings made less than
        # a day ahead get a reminder in the past.
        reminder = Reminder(
            user_id=user_id,
            appointment_id=appointment_id,
            type=ReminderType.APPOINTMENT_REMINDER,
            message=f"Your {service_name} appointment is scheduled for tomorrow",
            scheduled_for=scheduled_date - timedelta(hours=self.lead_hours),
            sent=False
        )
        self.db.add(reminder)
        return reminder

    def schedule_upcoming_service(
        self,
        user_id: UUID,
        due_at: datetime,
        appointment_id: Optional[UUID] = None
    ) -> Reminder:
        reminder = Reminder(
            user_id=user_id,
            appointment_id=appointment_id,
            type=ReminderType.UPCOMING_SERVICE,
            message=NEXT_SERVICE_MESSAGE,
            scheduled_for=due_at,
            sent=False
        )
        self.db.add(reminder)
        return reminder

    async def list_user_reminders(self, user_id: Optional[UUID]) -> List[Reminder]:
        """Caller's reminders, soonest first. Empty when unauthenticated."""
        if user_id is None:
            return []

        result = await self.db.execute(
            select(Reminder)
            .where(Reminder.user_id == user_id)
            .order_by(Reminder.scheduled_for.asc())
        )
        return list(result.scalars().all())

    async def list_pending_reminders(self, before: datetime, limit: int = 100) -> List[Reminder]:
        """Unsent reminders that are due at or before ``before``"""
        result = await self.db.execute(
            select(Reminder)
            .where(Reminder.sent == False, Reminder.scheduled_for <= before)
            .order_by(Reminder.scheduled_for.asc())
            .limit(limit)
        )
        return list(result.scalars().all())
