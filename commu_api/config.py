from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging_config import LoggingConfig, get_logger
from .models import SERVICE_NAME


class ConfigError(ValueError):
    """Raised when startup configuration is invalid"""


class ServiceSettings(BaseSettings):
    """Listener and logging settings, read from COMMU_API_* environment variables or .env"""

    model_config = SettingsConfigDict(
        env_prefix="COMMU_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    host: str = Field(default="0.0.0.0", min_length=1)
    port: int = Field(default=8080, ge=1, le=65535)
    log_dir: str = Field(default="logs", min_length=1)

    @field_validator("host", "log_dir")
    @classmethod
    def _validate_non_blank(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value


def load_settings(**overrides) -> ServiceSettings:
    """Load settings from the environment; keyword overrides take precedence"""
    try:
        return ServiceSettings(**overrides)
    except ValidationError as error:
        raise ConfigError(f"Invalid commu-api configuration: {error}") from error


class AppConfig:
    def __init__(self, host: str = None, port: int = None, logs_dir: str = None):
        overrides = {"host": host, "port": port, "log_dir": logs_dir}
        self.settings = load_settings(**{key: value for key, value in overrides.items() if value is not None})

        self.service_name = SERVICE_NAME
        self.version = "0.1.0"
        self.host = self.settings.host
        self.port = self.settings.port

        self.logging_config = LoggingConfig(self.settings.log_dir)

        self.logging_config.setup_logging()
        self.logger = get_logger(__name__)

_app_config = None

def get_app_config() -> AppConfig:
    global _app_config
    if _app_config is None:
        _app_config = AppConfig()
    return _app_config
