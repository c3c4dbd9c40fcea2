from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    # Application
    APP_NAME: str = "AutoService Platform"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    API_V1_PREFIX: str = "/api/v1"
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]

    # Database
    DATABASE_URL: str

    # Security
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # OpenAI (service report narratives)
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4o-mini"
    AI_TIMEOUT_SECONDS: float = 30.0

    # Business Logic
    REMINDER_LEAD_HOURS: int = 24
    NEXT_SERVICE_INTERVAL_DAYS: int = 90
    STRICT_STATUS_TRANSITIONS: bool = False
    SEED_SERVICES_ON_STARTUP: bool = True

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
