"""regionqt configuration."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from REGIONQT_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="REGIONQT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "info"

    # Threads used for the root quadrants during build (1 = serial)
    build_workers: int = 1

    # Default color for subdivision overlays (RGBA)
    overlay_color: tuple[int, int, int, int] = (255, 0, 0, 255)

    @field_validator("build_workers")
    @classmethod
    def check_build_workers(cls, v: int) -> int:
        """Require at least one worker."""
        if v < 1:
            raise ValueError("build_workers must be at least 1")
        return v

    @field_validator("overlay_color")
    @classmethod
    def check_overlay_color(cls, v: tuple[int, int, int, int]) -> tuple[int, int, int, int]:
        """Keep every channel in the 0-255 range."""
        if any(not 0 <= c <= 255 for c in v):
            raise ValueError(f"overlay_color channels must be 0-255, got {v}")
        return v


settings = Settings()
