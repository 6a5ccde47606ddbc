from pydantic_settings import SettingsConfigDict, BaseSettings
from typing import List

from linkinfo.core.enums import ContentKind, NonSuccessPolicy


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server settings
    server_host: str = "0.0.0.0"
    server_port: int = 8000
    server_reload: bool = False

    # CORS settings
    cors_origins: List[str] = ["http://localhost:5173"]

    # Logging
    log_level: str = "INFO"
    log_dir: str = "logs"
    log_to_file: bool = True

    # Fetching settings
    fetch_timeout: float = 10.0
    fetch_user_agent: str = "Mozilla/5.0 (compatible; LinkInfo/1.0)"
    fetch_follow_redirects: bool = True
    fetch_max_redirects: int = 20
    block_private_hosts: bool = True

    # Extraction settings
    default_content_kind: ContentKind = ContentKind.WEBSITE
    non_success_policy: NonSuccessPolicy = NonSuccessPolicy.DEGRADE

    model_config = SettingsConfigDict(
        env_file=".env",  # Load from .env file if it exists
        case_sensitive=False,
        extra="ignore"  # Ignore extra fields in env file
    )


# Create a single instance of settings
settings = Settings()
