"""
Application configuration settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=[".env", "../.env"], case_sensitive=False, extra="ignore"
    )

    # Application
    app_name: str = Field("Deck Studio API", alias="APP_NAME")

    # Environment
    environment: str = Field("development", alias="ENVIRONMENT")
    debug: bool = Field(False, alias="DEBUG")

    # Server
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(8000, alias="PORT")

    # Database
    database_url: str = Field(
        "sqlite+aiosqlite:///./deckstudio.db", alias="DATABASE_URL"
    )
    debug_sql: bool = Field(False, alias="DATABASE_ECHO")

    # File storage
    upload_root: str = Field("uploads", alias="UPLOAD_ROOT")
    template_max_bytes: int = Field(10 * 1024 * 1024, alias="TEMPLATE_MAX_BYTES")

    # Listing
    page_size: int = Field(10, alias="PAGE_SIZE")
    exact_pagination: bool = Field(False, alias="EXACT_PAGINATION")

    # Access control (no authentication; see infra/auth)
    access_policy: str = Field("open", alias="ACCESS_POLICY")

    # OpenAI image generation
    openai_api_key: str = Field("dummy-key-for-test", alias="OPENAI_API_KEY")
    openai_image_size: str = Field("1024x1024", alias="OPENAI_IMAGE_SIZE")

    # File hosting
    file_hosting_url: str = Field(
        "https://uploads.example.com/api/files", alias="FILE_HOSTING_URL"
    )
    file_hosting_api_key: str = Field("", alias="FILE_HOSTING_API_KEY")
    http_timeout_seconds: float = Field(30.0, alias="HTTP_TIMEOUT_SECONDS")

    # CORS
    cors_origins: str = Field("*", alias="CORS_ORIGINS")

    # Logging
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_format: str = Field("json", alias="LOG_FORMAT")

    def get_cors_origins(self) -> list[str]:
        """Parse CORS origins from string."""
        if self.cors_origins == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",")]


_settings = None


def get_settings() -> Settings:
    """Get settings instance (useful for dependency injection)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
