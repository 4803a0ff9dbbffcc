from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
  model_config = SettingsConfigDict(env_file=".env", extra="ignore")

  database_url: str = "postgresql+asyncpg://gantt:gantt@db:5432/gantt"
  app_version: str = "v2026-10-19"
  build_sha: str = "dev"
  api_docs_enabled: bool = True

  cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"

  # Remote Sync target for OrderSyncClient
  api_base_url: str = "http://localhost:8000"
  sync_timeout_seconds: float = 20.0

  order_gap: float = 1000.0
  log_level: str = "INFO"

  def cors_origin_list(self) -> list[str]:
    return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()
