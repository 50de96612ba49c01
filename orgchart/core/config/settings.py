# (c) Copyright Datacraft, 2026
"""Application settings configuration."""
from functools import lru_cache
from pathlib import Path

from pydantic import PostgresDsn, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	db_url: PostgresDsn = "postgresql://postgres:postgres@db:5432/orgchart"
	# Connect to DB via SSL
	db_ssl: bool = False
	db_echo: bool = False
	# e.g. "REPEATABLE READ" or "SERIALIZABLE"; None keeps the driver default
	db_isolation_level: str | None = None
	log_config: Path | None = Path("/app/log_config.yaml")
	api_prefix: str = '/api/v1'

	# CORS
	cors_origins: list[str] = ["*"]

	@computed_field
	@property
	def async_db_url(self) -> str:
		url = str(self.db_url)
		if "postgresql+psycopg://" in url:
			return url.replace("postgresql+psycopg://", "postgresql+asyncpg://", 1)
		elif "postgresql://" in url:
			return url.replace("postgresql://", "postgresql+asyncpg://", 1)
		return url

	model_config = SettingsConfigDict(env_prefix='orgchart_')


@lru_cache
def get_settings() -> Settings:
	return Settings()
