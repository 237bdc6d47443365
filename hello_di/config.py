"""
Logging settings for the greeting entry points.
Values come from HELLO_DI_* environment variables or a .env file via pydantic-settings.
"""

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="HELLO_DI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Logging ──────────────────────────────────────────────────────────────
    # Records go to stderr; stdout only ever carries the greeting.
    log_level: str = "INFO"
    log_format: str = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"

    # ── Helpers ───────────────────────────────────────────────────────────────
    def get_log_level(self) -> int:
        """Return the numeric logging level, falling back to INFO for unknown names."""
        level = logging.getLevelName(self.log_level.strip().upper())
        return level if isinstance(level, int) else logging.INFO


settings = Settings()
