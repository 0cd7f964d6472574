"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    collider_gen_env: str = "development"
    collider_gen_log_level: str = "info"

    # Thread pool size for multi-region synthesis (0 = executor default)
    collider_gen_max_workers: int = 0

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def max_workers(self) -> int | None:
        return self.collider_gen_max_workers or None


settings = Settings()
