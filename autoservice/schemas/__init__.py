from autoservice.schemas.user import (
    UserCreate, UserLogin, UserResponse, TokenResponse,
)
from autoservice.schemas.service import ServiceResponse, SeedResult
from autoservice.schemas.appointment import (
    AppointmentCreate, AppointmentCreated, AppointmentStatusUpdate, AppointmentResponse,
)
from autoservice.schemas.report import (
    PartReplaced, ServiceReportCreate, ServiceReportCreated,
    ReportPartResponse, ServiceReportResponse, ServiceReportDetail,
)
from autoservice.schemas.reminder import ReminderResponse

__all__ = [
    "UserCreate", "UserLogin", "UserResponse", "TokenResponse",
    "ServiceResponse", "SeedResult",
    "AppointmentCreate", "AppointmentCreated", "AppointmentStatusUpdate", "AppointmentResponse",
    "PartReplaced", "ServiceReportCreate", "ServiceReportCreated",
    "ReportPartResponse", "ServiceReportResponse", "ServiceReportDetail",
    "ReminderResponse",
]
