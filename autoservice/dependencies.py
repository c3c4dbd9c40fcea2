from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from autoservice.database import get_db
from autoservice.models import User
from autoservice.services.ai_provider import AIProviderConfig, GeneratorFactory, openai_generator_factory
from autoservice.services.auth_service import AuthService
from autoservice.services.appointment_service import AppointmentService
from autoservice.services.catalog_service import CatalogService
from autoservice.services.reminder_service import ReminderService
from autoservice.services.report_service import ReportService
from typing import Optional
from uuid import UUID

security = HTTPBearer(auto_error=False)

# Read once at import; the report generator never looks at the environment itself
AI_PROVIDER_CONFIG = AIProviderConfig.from_settings()

async def get_current_user_optional(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db)
) -> Optional[User]:
    """Get current user if a valid token is provided, otherwise None"""
    if not credentials:
        return None

    return await AuthService.get_current_user(db, credentials.credentials)

async def get_current_user(
    current_user: Optional[User] = Depends(get_current_user_optional)
) -> User:
    """Get current authenticated user from JWT token"""
    if not current_user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return current_user

async def get_current_user_id(
    current_user: Optional[User] = Depends(get_current_user_optional)
) -> Optional[UUID]:
    """Verified caller id, or None for anonymous callers"""
    return current_user.id if current_user else None

def get_ai_config() -> AIProviderConfig:
    return AI_PROVIDER_CONFIG

def get_generator_factory() -> GeneratorFactory:
    return openai_generator_factory

async def get_catalog_service(db: AsyncSession = Depends(get_db)) -> CatalogService:
    return CatalogService(db)

async def get_appointment_service(db: AsyncSession = Depends(get_db)) -> AppointmentService:
    return AppointmentService(db)

async def get_reminder_service(db: AsyncSession = Depends(get_db)) -> ReminderService:
    return ReminderService(db)

async def get_report_service(
    db: AsyncSession = Depends(get_db),
    ai_config: AIProviderConfig = Depends(get_ai_config),
    generator_factory: GeneratorFactory = Depends(get_generator_factory)
) -> ReportService:
    return ReportService(db, ai_config=ai_config, generator_factory=generator_factory)
