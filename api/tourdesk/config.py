"""
Application Configuration - Environment Variables & Settings
"""
from pydantic_settings import BaseSettings
from pydantic import Field, computed_field
from typing import List
from functools import lru_cache


class ConfigurationError(Exception):
    """Raised when the service cannot start with the current settings"""


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables
    """
    # Application
    DEBUG: bool = Field(default=False)
    SERVICE_NAME: str = Field(default="tourdesk-admin")

    # Remote tourism REST service
    REMOTE_API_BASE_URL: str = Field(default="https://jbheartfelt-api.onrender.com")
    REMOTE_API_TIMEOUT: float = Field(default=30.0)  # seconds, client-wide

    # Identity provider (sign-in is delegated; only the public key lives here)
    IDENTITY_PROVIDER_PUBLISHABLE_KEY: str = Field(default="")

    # Collection cache: "memory" (process-local) or "redis"
    CACHE_BACKEND: str = Field(default="memory")
    REDIS_URL: str = Field(default="redis://localhost:6379/0")
    CACHE_TTL_COLLECTIONS: int = Field(default=3600)  # 1 hour

    # Dashboard analytics
    MONTHLY_TARGET_FALLBACK: int = Field(default=30)
    DEMOGRAPHICS_TOP_N: int = Field(default=3)
    RECENT_BOOKINGS_LIMIT: int = Field(default=6)

    # Notifications (toast surface)
    NOTIFICATION_BUFFER_SIZE: int = Field(default=50)

    # CORS - stored as comma-separated string
    ALLOWED_ORIGINS_STR: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        alias="ALLOWED_ORIGINS"
    )

    @computed_field
    @property
    def ALLOWED_ORIGINS(self) -> List[str]:
        """Parse comma-separated origins into list"""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS_STR.split(',') if origin.strip()]

    def require_identity_key(self) -> str:
        """Return the identity provider key, failing hard when it is missing"""
        key = self.IDENTITY_PROVIDER_PUBLISHABLE_KEY.strip()
        if not key:
            raise ConfigurationError("Missing IDENTITY_PROVIDER_PUBLISHABLE_KEY")
        return key

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance
    """
    return Settings()


# Global settings instance
settings = get_settings()
