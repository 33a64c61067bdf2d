import secrets

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be configured via .env file or environment variables.
    """

    # Database
    DATABASE_URL: str = "sqlite:///./accountboard.db"
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20

    # JWT Authentication
    SECRET_KEY: str = Field(default_factory=lambda: secrets.token_urlsafe(32))
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7

    # Password hashing (bcrypt work factor)
    BCRYPT_ROUNDS: int = Field(default=10, ge=10, le=31)

    # Application
    APP_NAME: str = "AccountBoard API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: str = ""
    CORS_ALLOW_CREDENTIALS: bool = True

    # API client
    API_HOST: str = "localhost"
    API_DEV_BASE_URL: str = "http://localhost:3001/api"
    API_PROD_BASE_URL: str = "https://accountboard-backend.onrender.com/api"
    API_TIMEOUT: float = 30.0
    API_TOKEN_FILE: str = "~/.accountboard/storage.json"

    # Demo tenant created by the provisioner
    DEMO_COMPANY_NAME: str = "Demo Company"
    DEMO_EMAIL: str = "admin@demo.com"
    DEMO_PASSWORD: str = "admin123"
    DEMO_CURRENCY: str = "TRY"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS_ORIGINS from comma-separated string"""
        if not self.CORS_ORIGINS:
            return []
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def secret_key_is_ephemeral(self) -> bool:
        """True when SECRET_KEY was generated for this process instead of configured"""
        return "SECRET_KEY" not in self.model_fields_set


# Global settings instance
settings = Settings()
