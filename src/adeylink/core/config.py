"""Configuration management for AdeyLink."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="ADEYLINK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Backend
    project_id: str = Field("", description="Supabase project ID")
    public_anon_key: str = Field("", description="Public anon key for unauthenticated reads")
    function_name: str = Field("make-server-75c53d23", description="Edge function serving the API")
    api_base_url: Optional[str] = Field(None, description="Override for the full API base URL")

    # Auth session bootstrap (CLI only)
    access_token: str = Field("", description="User access token")
    user_id: str = Field("", description="Signed-in user ID")

    # HTTP
    request_timeout: float = Field(10.0, description="Per-request timeout in seconds")
    max_retries: int = Field(3, description="Maximum attempts for idempotent reads")
    retry_delay: float = Field(1.0, description="Base retry delay in seconds")
    retry_backoff: float = Field(2.0, description="Retry backoff multiplier")

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    @property
    def effective_base_url(self) -> str:
        """Get the API base URL, derived from the project ID unless overridden."""
        if self.api_base_url:
            return self.api_base_url.rstrip("/")
        return f"https://{self.project_id}.supabase.co/functions/v1/{self.function_name}"


# Global settings instance
settings = Settings()
