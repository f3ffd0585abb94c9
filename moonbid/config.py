"""Engine configuration using Pydantic settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from moonbid.models.enums import GameMode


class Settings(BaseSettings):
    """Engine settings loaded from environment variables (``MOONBID_*``)."""

    model_config = SettingsConfigDict(
        env_prefix="MOONBID_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Game Configuration
    default_game_mode: GameMode = Field(
        default=GameMode.STANDARD, description="Mode used when none is given"
    )
    starting_lunar_energy: int = Field(default=10, ge=0, description="Initial lunar energy pool")

    # Logging
    log_level: str = Field(default="INFO", description="Log level for moonbid loggers")

    # Event log
    record_events: bool = Field(default=True, description="Record game events for replay")


# Global settings instance
settings = Settings()
