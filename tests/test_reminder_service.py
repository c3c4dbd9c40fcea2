from datetime import datetime, timedelta, timezone

from autoservice.models import ReminderType
from autoservice.services.reminder_service import ReminderService


async def test_lead_time_is_configurable(db, user_id, book):
    appointment_id = await book(user_id)
    when = datetime(2030, 6, 1, 8, tzinfo=timezone.utc)

    reminder = ReminderService(db, lead_hours=48).schedule_appointment_reminder(
        user_id, appointment_id, "Full Service", when,
    )

    assert reminder.scheduled_for == when - timedelta(hours=48)
    assert reminder.message == "Your Full Service appointment is scheduled for tomorrow"


async def test_list_user_reminders_soonest_first(session_maker, user_id, other_user_id, book):
    later = await book(user_id, days_ahead=10)
    sooner = await book(user_id, days_ahead=3)
    await book(other_user_id, days_ahead=1)

    async with session_maker() as session:
        reminders = await ReminderService(session).list_user_reminders(user_id)

    assert [r.appointment_id for r in reminders] == [sooner, later]
    assert all(r.type == ReminderType.APPOINTMENT_REMINDER for r in reminders)


async def test_list_user_reminders_anonymous(db, user_id, book):
    await book(user_id)

    assert await ReminderService(db).list_user_reminders(None) == []


async def test_pending_reminders_are_due_and_unsent(session_maker, user_id, book):
    due_soon = await book(user_id, days_ahead=1)
    await book(user_id, days_ahead=30)

    async with session_maker() as session:
        service = ReminderService(session)
        pending = await service.list_pending_reminders(datetime.now(timezone.utc) + timedelta(hours=1))
        assert [r.appointment_id for r in pending] == [due_soon]

        pending[0].sent = True
        await session.commit()

    async with session_maker() as session:
        pending = await ReminderService(session).list_pending_reminders(
            datetime.now(timezone.utc) + timedelta(hours=1)
        )
    assert pending == []
