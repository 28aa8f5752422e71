"""
Application Configuration
Pydantic Settings for environment-based configuration
"""

from typing import Literal
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings from environment variables
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "image-reporter"
    app_version: str = "0.1.0"
    environment: Literal["development", "staging", "production"] = "development"

    # Control plane
    platform_url: str = Field(
        default="https://g.codefresh.io",
        description="Control-plane base URL used when CF_PLATFORM_URL is not given",
    )
    graphql_path: str = "/2.0/api/graphql"
    graphql_timeout: float = 30.0  # seconds

    # Runtimes at or above this version accept the report data in headers
    header_encoding_min_version: str = "0.0.553"

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_json: bool = False  # Structured JSON logging

    def graphql_endpoint(self, platform_host: str | None = None) -> str:
        """GraphQL endpoint for the given control-plane host"""
        return f"{platform_host or self.platform_url}{self.graphql_path}"


# Global settings instance
settings = Settings()
