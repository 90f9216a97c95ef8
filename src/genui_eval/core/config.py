"""Configuration Management."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Evaluation settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="GENUI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Payload loading
    max_payload_size: int = Field(default=512 * 1024, gt=0, description="Max payload size (bytes)")
    max_json_depth: int = Field(default=64, gt=0, description="Max payload nesting depth")
    repair_json: bool = Field(default=True, description="Repair malformed model output")

    # Evaluation
    runs_per_prompt: int = Field(default=1, gt=0, description="Generations per prompt and model")
    max_concurrency: int = Field(
        default=0, ge=0, description="Max in-flight generations (0 = unbounded)"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
