from autoservice.services.auth_service import AuthService
from autoservice.services.catalog_service import CatalogService
from autoservice.services.reminder_service import ReminderService
from autoservice.services.appointment_service import AppointmentService
from autoservice.services.report_service import ReportService

__all__ = [
    "AuthService",
    "CatalogService",
    "ReminderService",
    "AppointmentService",
    "ReportService",
]
