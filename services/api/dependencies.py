"""
FastAPI dependency providers.

Routes receive the generation client, retry policy and tracker store through
these functions; tests swap them out with `app.dependency_overrides`.
"""
import logging
from functools import lru_cache

from shared.ai import BaseGenerationClient, OpenAIGenerationClient, RetryPolicy
from shared.tracker import ApplicationStore
from .config import get_config, get_openai_api_key

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_generation_client() -> BaseGenerationClient:
    config = get_config()
    api_key, _ = get_openai_api_key()
    logger.info(f"Generation client: model={config.openai_model}, timeout={config.request_timeout}s")
    return OpenAIGenerationClient(
        api_key=api_key,
        model=config.openai_model,
        base_url=config.resolved_base_url,
        timeout=config.request_timeout,
    )


def get_retry_policy() -> RetryPolicy:
    config = get_config()
    return RetryPolicy(
        max_rate_limit_retries=config.max_rate_limit_retries,
        backoff_seconds=config.rate_limit_backoff_seconds,
    )


@lru_cache(maxsize=1)
def get_application_store() -> ApplicationStore:
    config = get_config()
    logger.info(f"Application tracker database: {config.database_path}")
    return ApplicationStore(config.database_path)
