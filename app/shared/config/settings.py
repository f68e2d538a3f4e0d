# 📄 File: app/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# The main configuration center that reads all settings from environment variables
# and hands them to the rest of the Clubbera app in one organized object.
#
# 🧪 Purpose (Technical Summary):
# Pydantic-based settings management with environment variable loading,
# validation, and type safety for all application configuration parameters.
# Built once per process via get_settings() and injected into components.
#
# 🔗 Dependencies:
# - pydantic-settings for configuration management
# - python-dotenv for .env file loading
# - typing for type hints
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - Database connection modules
# - Security, email, storage and OAuth adapters
# - All modules requiring configuration

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses Pydantic for validation and type safety. Settings are loaded
    from environment variables with fallback to .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================

    APP_NAME: str = Field(default="Clubbera API", description="Application name")
    APP_VERSION: str = Field(default="1.0.0", description="Application version")
    APP_DESCRIPTION: str = Field(
        default="Clubs, memberships, events and discussions",
        description="Application description"
    )
    ENVIRONMENT: str = Field(default="development", description="Runtime environment")
    DEBUG: bool = Field(default=False, description="Debug mode flag")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="json", description="Log output format (json or text)")

    # =========================================================================
    # SERVER CONFIGURATION
    # =========================================================================

    HOST: str = Field(default="0.0.0.0", description="Server host")
    PORT: int = Field(default=8000, description="Server port")
    RELOAD: bool = Field(default=False, description="Auto-reload on changes")
    WORKERS: int = Field(default=1, description="Number of worker processes")

    # =========================================================================
    # DATABASE CONFIGURATION
    # =========================================================================

    DATABASE_URL: Optional[str] = Field(None, description="Async SQLAlchemy database URL")
    DB_HOST: str = Field(default="localhost", description="Database host")
    DB_PORT: int = Field(default=5432, description="Database port")
    DB_NAME: str = Field(default="clubbera", description="Database name")
    DB_USER: str = Field(default="postgres", description="Database user")
    DB_PASSWORD: str = Field(default="", description="Database password")

    # Connection Pool Settings
    DB_POOL_SIZE: int = Field(default=10, description="Database pool size")
    DB_MAX_OVERFLOW: int = Field(default=20, description="Database pool overflow")
    DB_POOL_TIMEOUT: int = Field(default=30, description="Database pool timeout")
    DB_POOL_RECYCLE: int = Field(default=3600, description="Database pool recycle time")
    DB_ECHO: bool = Field(default=False, description="Echo SQL statements")
    DB_CREATE_TABLES: bool = Field(
        default=False,
        description="Create missing tables at startup instead of relying on migrations"
    )

    # =========================================================================
    # SECURITY SETTINGS
    # =========================================================================

    JWT_SECRET_KEY: str = Field(..., description="Session and reset token secret")
    JWT_ALGORITHM: str = Field(default="HS256", description="JWT algorithm")
    EMAIL_CONFIRM_SECRET_KEY: str = Field(..., description="Email confirmation token secret")
    EMAIL_TOKEN_EXPIRE_MINUTES: int = Field(
        default=60,
        description="Email confirmation token expiry"
    )
    PASSWORD_RESET_EXPIRE_MINUTES: int = Field(
        default=60,
        description="Password reset token expiry"
    )
    BCRYPT_ROUNDS: int = Field(default=12, description="BCrypt hash rounds")
    PASSWORD_MIN_LENGTH: int = Field(default=8, description="Minimum password length")

    # CORS Settings
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000,http://localhost:8080",
        description="CORS allowed origins"
    )
    CORS_ALLOW_CREDENTIALS: bool = Field(default=True, description="CORS allow credentials")

    # =========================================================================
    # RATE LIMITING
    # =========================================================================

    RATE_LIMIT_ENABLED: bool = Field(default=True, description="Enable request rate limiting")
    AUTH_RATE_LIMIT: str = Field(default="10/minute", description="Limit for auth endpoints")
    DEFAULT_RATE_LIMIT: str = Field(default="120/minute", description="Default per-client limit")

    # =========================================================================
    # SUPABASE STORAGE
    # =========================================================================

    SUPABASE_URL: Optional[str] = Field(None, description="Supabase project URL")
    SUPABASE_SERVICE_KEY: Optional[str] = Field(None, description="Supabase service role key")
    SUPABASE_STORAGE_BUCKET: str = Field(
        default="clubbera-media",
        description="Supabase storage bucket"
    )
    MAX_IMAGE_SIZE_MB: int = Field(default=10, description="Maximum upload image size")

    # =========================================================================
    # EMAIL (SMTP)
    # =========================================================================

    SMTP_HOST: str = Field(default="localhost", description="SMTP server host")
    SMTP_PORT: int = Field(default=587, description="SMTP server port")
    SMTP_USERNAME: Optional[str] = Field(None, description="SMTP username")
    SMTP_PASSWORD: Optional[str] = Field(None, description="SMTP password")
    SMTP_USE_TLS: bool = Field(default=True, description="Use STARTTLS")
    SMTP_TIMEOUT: int = Field(default=10, description="SMTP timeout in seconds")
    EMAIL_FROM: str = Field(
        default="noreply@clubbera.com",
        description="Default from email"
    )
    COMPANY_NAME: str = Field(default="Clubbera", description="Name used in email copy")
    FRONTEND_URL: str = Field(
        default="http://localhost:3000",
        description="Base URL used in email links"
    )

    # =========================================================================
    # OAUTH
    # =========================================================================

    GOOGLE_CLIENT_ID: Optional[str] = Field(None, description="Google OAuth client id")
    GOOGLE_CLIENT_SECRET: Optional[str] = Field(None, description="Google OAuth client secret")
    GOOGLE_REDIRECT_URI: str = Field(
        default="postmessage",
        description="Google OAuth redirect URI"
    )

    # =========================================================================
    # PAGINATION & SEARCH
    # =========================================================================

    DEFAULT_PAGE_SIZE: int = Field(default=10, description="Default page size")
    MAX_PAGE_SIZE: int = Field(default=50, description="Maximum page size")
    DEFAULT_SEARCH_DISTANCE_MILES: float = Field(
        default=10.0,
        description="Default geo search radius in miles"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        allowed = {"development", "staging", "production", "test"}
        if v not in allowed:
            raise ValueError(f"ENVIRONMENT must be one of {sorted(allowed)}")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(allowed)}")
        return v.upper()

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v not in {"json", "text"}:
            raise ValueError("LOG_FORMAT must be 'json' or 'text'")
        return v

    @field_validator("JWT_ALGORITHM")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        allowed = {"HS256", "HS384", "HS512"}
        if v not in allowed:
            raise ValueError(f"JWT_ALGORITHM must be one of {sorted(allowed)}")
        return v

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        if not 4 <= v <= 31:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 31")
        return v

    @model_validator(mode="after")
    def validate_secrets(self) -> "Settings":
        for name in ("JWT_SECRET_KEY", "EMAIL_CONFIRM_SECRET_KEY"):
            value = getattr(self, name)
            if not value:
                raise ValueError(f"{name} must not be empty")
            if self.ENVIRONMENT == "production" and len(value) < 32:
                raise ValueError(f"{name} must be at least 32 characters in production")
        return self

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================

    @property
    def database_url(self) -> str:
        """Get the async database URL, building a Postgres DSN when none is given."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    @property
    def is_testing(self) -> bool:
        return self.ENVIRONMENT == "test"

    @property
    def storage_configured(self) -> bool:
        return bool(self.SUPABASE_URL and self.SUPABASE_SERVICE_KEY)

    @property
    def max_image_size_bytes(self) -> int:
        return self.MAX_IMAGE_SIZE_MB * 1024 * 1024


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    The settings object is constructed once per process and then shared
    by reference with every component that needs it.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
