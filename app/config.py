"""Application configuration."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_parse_none_str="null",
    )

    # Application
    app_name: str = Field(default="Clinic Scheduling API", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")
    api_v1_prefix: str = Field(default="/api/v1", alias="API_V1_PREFIX")

    # Server
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8000, alias="PORT")
    reload: bool = Field(default=False, alias="RELOAD")

    # CORS
    cors_origins_str: str = Field(
        default="http://localhost:3000",
        alias="CORS_ORIGINS",
    )
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")

    @property
    def cors_origins(self) -> list[str]:
        """Get CORS origins as a list."""
        if isinstance(self.cors_origins_str, str):
            return [origin.strip() for origin in self.cors_origins_str.split(",") if origin.strip()]
        return [self.cors_origins_str]

    # Clinic
    clinic_timezone: str | None = Field(
        default=None,
        alias="CLINIC_TIMEZONE",
        description="IANA timezone the clinic calendar is kept in; the default clinic's when null",
    )
    default_clinic_id: str = Field(default="clinic-001", alias="DEFAULT_CLINIC_ID")

    # Appointment generation
    generator_seed: int | None = Field(
        default=None,
        alias="GENERATOR_SEED",
        description="Seed for the synthetic appointment set; unseeded when null",
    )
    generation_window_days: int = Field(default=14, ge=1, alias="GENERATION_WINDOW_DAYS")
    min_appointments_per_day: int = Field(default=2, ge=0, alias="MIN_APPOINTMENTS_PER_DAY")
    max_appointments_per_day: int = Field(default=4, ge=0, alias="MAX_APPOINTMENTS_PER_DAY")
    appointment_duration_minutes: int = Field(
        default=30, ge=1, alias="APPOINTMENT_DURATION_MINUTES"
    )
    upcoming_window_days: int = Field(default=7, ge=1, alias="UPCOMING_WINDOW_DAYS")

    @model_validator(mode="after")
    def validate_appointments_per_day(self) -> "Settings":
        """Validate the per-day appointment range."""
        if self.min_appointments_per_day > self.max_appointments_per_day:
            raise ValueError("MIN_APPOINTMENTS_PER_DAY must not exceed MAX_APPOINTMENTS_PER_DAY")
        return self

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="json", alias="LOG_FORMAT")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()  # type: ignore[call-arg]


# Global settings instance
settings = get_settings()
