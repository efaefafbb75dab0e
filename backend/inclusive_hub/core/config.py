"""Application configuration loaded from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PLACEHOLDER_API_KEY = "your_kolosal_api_key_here"


class Settings(BaseSettings):
    """Typed settings exposed via dependency injection throughout the app."""

    # Read .env with BOM tolerance; case-sensitive keys
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8-sig",
        case_sensitive=True,
        extra="ignore",
    )

    APP_NAME: str = "Inclusive Marketing Hub API"
    ENV: str = "dev"  # dev | staging | prod
    DEBUG: bool = False

    HOST: str = "127.0.0.1"
    PORT: int = 3001

    # CORS
    CORS_ALLOWED_ORIGINS: list[str] = Field(default_factory=list)

    # Kolosal bias/copy service. Live mode needs both values.
    KOLOSAL_API_URL: str | None = Field(default=None, description="Kolosal API base URL")
    KOLOSAL_API_KEY: str | None = Field(default=None, description="Kolosal bearer token")
    KOLOSAL_BIAS_TIMEOUT_SEC: float = 10.0
    KOLOSAL_COPY_TIMEOUT_SEC: float = 15.0
    # Outbound calls run in worker threads; this caps how many run at once.
    UPSTREAM_MAX_CONCURRENCY: int = 8

    # Mock data
    MOCK_SEED: int | None = 42069
    INITIAL_PERSONAS: int = 50

    # Pagination
    DEFAULT_PAGE_SIZE: int = 12
    MAX_PAGE_SIZE: int = 100

    # Request bodies above this size are rejected before parsing.
    MAX_BODY_BYTES: int = 1024 * 1024  # 1 MiB

    @property
    def kolosal_api_key_configured(self) -> bool:
        """True when a real (non-placeholder) API key is present."""
        return bool(self.KOLOSAL_API_KEY) and self.KOLOSAL_API_KEY != PLACEHOLDER_API_KEY

    @property
    def kolosal_configured(self) -> bool:
        return self.kolosal_api_key_configured and bool(self.KOLOSAL_API_URL)

    @property
    def mode(self) -> str:
        return "live" if self.kolosal_configured else "mock"


settings = Settings()
