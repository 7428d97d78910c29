"""Configuration management for Platewise using Pydantic."""

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Supabase Configuration
    supabase_url: str = Field(..., description="Supabase project URL")
    supabase_anon_key: str = Field(..., description="Supabase anon (public) key")
    request_timeout: float = Field(
        default=10.0, description="Timeout in seconds for data service requests"
    )
    review_images_bucket: str = Field(
        default="review_images", description="Storage bucket holding review images"
    )

    # Server Configuration
    server_host: str = Field(default="0.0.0.0", description="Server host")
    server_port: int = Field(default=8080, description="Server port")

    # Home Page Configuration
    featured_restaurant_limit: int = Field(
        default=6, gt=0, description="Number of featured restaurants to show"
    )
    latest_review_limit: int = Field(
        default=3, gt=0, description="Number of latest reviews to show"
    )
    toast_limit: int = Field(
        default=1, gt=0, description="Maximum number of visible toasts"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")

    def model_post_init(self, __context) -> None:
        """Normalize configuration after initialization."""
        self.supabase_url = self.supabase_url.rstrip("/")
        if not self.supabase_url.startswith("https://"):
            logger.warning(
                f"SUPABASE_URL is not using https: {self.supabase_url}"
            )


# Global config instance
config: Config | None = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global config
    if config is None:
        config = Config()
    return config


def setup_logging(cfg: Config | None = None) -> None:
    """Configure logging for the application."""
    if cfg is None:
        cfg = get_config()

    log_level = getattr(logging, cfg.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Reduce noise from external libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
