"""
Runtime configuration and logging setup.
Values can be overridden with SFMOVIES_* environment variables or a .env file.
"""

import sys  # stderr sink for loguru

from loguru import logger  # console logger
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	APP_NAME: str = "SF Movies API"
	DATASET_URL: str = "https://data.sfgov.org/resource/yitu-d5am.json"
	UPSTREAM_TIMEOUT_S: float = 30.0  # applies to connect, read, write and pool waits
	LOG_LEVEL: str = "INFO"

	model_config = SettingsConfigDict(env_prefix="SFMOVIES_", env_file=".env", extra="ignore")


settings = Settings()


def configure_logging(level: str = "INFO") -> None:
	"""Replace loguru's default sink with a stderr sink at the given level."""
	logger.remove()  # drop the default handler so the level applies
	logger.add(sys.stderr, level=level.upper())
