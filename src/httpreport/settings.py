"""Application settings using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="HTTPREPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Default print hint
    print_request_header: bool = True
    print_request_body: bool = True
    print_response_header: bool = True
    print_response_content: bool = True
    format_response_content: bool = True
    response_content_max_length: int = 10000

    # Module name prefix that marks an interactive shell process
    shell_marker: str = "IPython"


# Global settings instance
settings = Settings()
