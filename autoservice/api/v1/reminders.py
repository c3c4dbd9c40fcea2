from fastapi import APIRouter, Depends
from typing import List, Optional
from uuid import UUID
from autoservice.dependencies import get_current_user_id, get_reminder_service
from autoservice.schemas.reminder import ReminderResponse
from autoservice.services.reminder_service import ReminderService

router = APIRouter(prefix="/reminders", tags=["Reminders"])

@router.get("/", response_model=List[ReminderResponse])
async def list_my_reminders(
    user_id: Optional[UUID] = Depends(get_current_user_id),
    reminders: ReminderService = Depends(get_reminder_service)
):
    """Get the caller's scheduled reminders, soonest first"""
    return await reminders.list_user_reminders(user_id)
