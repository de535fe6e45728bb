from .app import app, create_app
from .config import APIConfig, get_config
from .dependencies import get_generation_client, get_retry_policy, get_application_store

__all__ = [
    "app",
    "create_app",
    "APIConfig",
    "get_config",
    "get_generation_client",
    "get_retry_policy",
    "get_application_store",
]
