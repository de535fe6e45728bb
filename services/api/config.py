import os
import logging
from pydantic_settings import BaseSettings
from typing import Optional, Tuple

from shared.ai.client import DEFAULT_TIMEOUT_SECONDS, MODEL_NAME, OPENAI_KEY_ENV_VARS, resolve_openai_api_key
from shared.tracker import DEFAULT_DB_PATH

logger = logging.getLogger(__name__)


def get_port_from_env() -> int:
    """
    Get port from environment.

    Hosting platforms set PORT directly (not API_PORT), so we check both.
    Priority: PORT > API_PORT > default 8080
    """
    port_str = os.environ.get("PORT") or os.environ.get("API_PORT") or "8080"
    try:
        return int(port_str)
    except ValueError:
        return 8080


def get_openai_api_key() -> Tuple[Optional[str], Optional[str]]:
    """
    Get OpenAI API key from environment variables.

    Checks in order: API_OPENAI_API_KEY, OPENAI_API_KEY, AI_INTEGRATIONS_OPENAI_API_KEY

    Returns:
        Tuple of (api_key, source_env_var_name) or (None, None) if not found
    """
    return resolve_openai_api_key()


class APIConfig(BaseSettings):
    """Configuration for the API service."""

    # Server configuration
    host: str = "0.0.0.0"
    port: int = 8080
    debug: bool = False

    # CORS configuration
    cors_origins: str = "*"

    # Generation API
    openai_model: str = MODEL_NAME
    openai_base_url: Optional[str] = None
    request_timeout: float = DEFAULT_TIMEOUT_SECONDS

    # Rate-limit backoff (0 retries = fail on the first 429)
    max_rate_limit_retries: int = 0
    rate_limit_backoff_seconds: float = 2.0

    # Application tracker
    database_path: str = DEFAULT_DB_PATH

    class Config:
        env_prefix = "API_"
        env_file = ".env"
        extra = "ignore"

    @property
    def openai_key_loaded(self) -> bool:
        """Check if OpenAI API key is available."""
        key, _ = get_openai_api_key()
        return key is not None

    @property
    def openai_env_source(self) -> Optional[str]:
        """Get the env var name that provided the OpenAI key."""
        _, source = get_openai_api_key()
        return source

    @property
    def resolved_base_url(self) -> Optional[str]:
        """Explicit base URL, else the integration-provided one."""
        return self.openai_base_url or os.environ.get("AI_INTEGRATIONS_OPENAI_BASE_URL")


def get_config() -> APIConfig:
    """Get API configuration from environment."""
    config = APIConfig()
    config_dict = config.model_dump()
    config_dict["port"] = get_port_from_env()
    return APIConfig(**config_dict)


def log_openai_key_status():
    """Log OpenAI API key status at startup (does NOT log the key itself)."""
    key, source = get_openai_api_key()
    if key:
        # Show first 4 and last 4 chars only
        masked = f"{key[:4]}...{key[-4:]}" if len(key) > 8 else "***"
        logger.info(f"OpenAI API key FOUND from {source} (masked: {masked})")
    else:
        logger.warning(f"OpenAI API key NOT FOUND - checked: {', '.join(OPENAI_KEY_ENV_VARS)}")
