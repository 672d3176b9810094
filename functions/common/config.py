from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Handler settings loaded from the Lambda environment."""

    model_config = SettingsConfigDict(case_sensitive=False)

    # Service
    service_name: str = Field(default="local", validation_alias="AWS_LAMBDA_FUNCTION_NAME")
    app_env: str = "production"

    # Logging
    log_level: str = "info"


def get_settings() -> Settings:
    return Settings()
