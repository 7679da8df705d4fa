from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DOTENV_PATH = ".env"


class EnvlineSettings(BaseSettings):
    """
    Central settings for envline.
    - Read from process environment variables only (never from the dotenv file it manages).
    - `dotenv_path` is the fixed well-known file used by `load()` and `set_string()`.
    """

    model_config = SettingsConfigDict(env_file=None, extra="ignore", populate_by_name=True)

    # ---- dotenv ----
    dotenv_path: str = Field(default=DEFAULT_DOTENV_PATH, validation_alias="ENVLINE_ENV_FILE")
    dotenv_override: bool = Field(default=True, validation_alias="ENVLINE_OVERRIDE")

    # ---- logging ----
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_dir: str = Field(default="", validation_alias="LOG_DIR")
    log_file: str = Field(default="envline.log", validation_alias="LOG_FILE")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, validation_alias="LOG_MAX_BYTES")
    log_backup_count: int = Field(default=5, validation_alias="LOG_BACKUP_COUNT")
    log_console_output: bool = Field(default=True, validation_alias="LOG_CONSOLE_OUTPUT")

    # ---- API ----
    api_host: str = Field(default="127.0.0.1", validation_alias="API_HOST")
    api_port: int = Field(default=8000, validation_alias="API_PORT")
    cors_origins: str = Field(default="", validation_alias="CORS_ORIGINS")
    api_write_enabled: bool = Field(default=False, validation_alias="API_WRITE_ENABLED")

    def resolve_dotenv_path(self) -> str:
        p = (self.dotenv_path or "").strip()
        return p or DEFAULT_DOTENV_PATH


def load_settings() -> EnvlineSettings:
    return EnvlineSettings()
