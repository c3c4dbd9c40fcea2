from autoservice.models.user import User
from autoservice.models.service import Service, ServiceCategory, ServiceVehicleType
from autoservice.models.appointment import Appointment, AppointmentStatus, VehicleType
from autoservice.models.report import ServiceReport, ReportPart
from autoservice.models.reminder import Reminder, ReminderType

__all__ = [
    "User",
    "Service", "ServiceCategory", "ServiceVehicleType",
    "Appointment", "AppointmentStatus", "VehicleType",
    "ServiceReport", "ReportPart",
    "Reminder", "ReminderType",
]
