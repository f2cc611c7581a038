from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    env: str = "development"
    api_v1_prefix: str = "/api/v1"
    allowed_origins: str = "http://localhost:3000,http://127.0.0.1:3000"
    log_level: str = "INFO"

    openai_api_key: str | None = None
    openai_model: str = "gpt-4.1-mini"
    openai_transcription_model: str = "gpt-4o-mini-transcribe"
    openai_timeout_seconds: float = 120.0

    notification_ttl_seconds: float = 6.0
    max_upload_mb: int = 25
    seed_demo_lessons: bool = True

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", case_sensitive=False)

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    @property
    def cors_origin_regex(self) -> str | None:
        # In development, allow localhost plus common LAN/private-network origins
        # so the classroom front-end can be opened from another device on the network.
        if self.env.lower() == "development":
            return (
                r"^https?://("
                r"localhost|127\.0\.0\.1|0\.0\.0\.0|\[::1\]|"
                r"10\.\d{1,3}\.\d{1,3}\.\d{1,3}|"
                r"192\.168\.\d{1,3}\.\d{1,3}|"
                r"172\.(1[6-9]|2\d|3[01])\.\d{1,3}\.\d{1,3}|"
                r"[a-zA-Z0-9-]+(?:\.[a-zA-Z0-9-]+)*\.local"
                r")(:\d+)?$"
            )
        return None

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024


settings = Settings()
