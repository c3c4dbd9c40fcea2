from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from uuid import UUID
from autoservice.models.reminder import ReminderType

class ReminderResponse(BaseModel):
    id: UUID
    user_id: UUID
    appointment_id: Optional[UUID]
    type: ReminderType
    message: str
    scheduled_for: datetime
    sent: bool

    class Config:
        from_attributes = True
