from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

from common.core.constants import Environment


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Environment Profile
    environment: Environment = Environment.LOCAL

    # App Settings
    app_name: str = "plan-resolution-engine"
    log_level: str = "INFO"

    # OpenTelemetry
    otel_service_name: str = "plan-resolution-engine"
    otel_service_version: str = "0.1.0"
    telemetry_export_enabled: bool = False

    # Axiom
    axiom_token: Optional[str] = None
    axiom_dataset: Optional[str] = None

    @property
    def telemetry_export_configured(self) -> bool:
        """Export spans and logs only when explicitly enabled and credentialed."""
        return bool(
            self.telemetry_export_enabled and self.axiom_token and self.axiom_dataset
        )


settings = Settings()
