"""
Named registry of provider API clients.
Providers are registered on startup and looked up by name.
"""

import logging
from typing import Optional

from pydantic import BaseModel, Field

from creative_coach.config import settings
from creative_coach.services.api_client import ApiClient

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


class ApiConfig(BaseModel):
    base_url: str
    headers: dict[str, str] = Field(default_factory=lambda: dict(JSON_HEADERS))
    timeout: float = 30.0
    retries: int = 3


_registry: dict[str, ApiClient] = {}


def register_api(name: str, config: ApiConfig) -> ApiClient:
    """Create a client for `name` from `config`, replacing any previous one."""
    client = ApiClient(
        base_url=config.base_url,
        headers=config.headers,
        timeout=config.timeout,
        retries=config.retries,
        name=name,
    )
    _registry[name] = client
    logger.debug(f"📝 Registered API '{name}' -> {config.base_url}")
    return client


def get_api(name: str) -> ApiClient:
    """Look up a registered client by name."""
    if name not in _registry:
        known = ", ".join(sorted(_registry)) or "none"
        raise KeyError(f"API '{name}' is not registered (registered: {known})")
    return _registry[name]


def list_apis() -> list[str]:
    return sorted(_registry)


def clear_registry() -> None:
    _registry.clear()


def default_api_configs(overrides: Optional[dict[str, ApiConfig]] = None) -> dict[str, ApiConfig]:
    """Provider configs built from settings."""
    configs = {
        "openai": ApiConfig(
            base_url=settings.openai_base_url,
            timeout=settings.openai_timeout,
            retries=settings.openai_retries,
        ),
        "openai-images": ApiConfig(
            base_url=settings.openai_image_base_url,
            timeout=settings.openai_image_timeout,
            retries=settings.openai_image_retries,
        ),
        "claude": ApiConfig(
            base_url=settings.claude_base_url,
            timeout=settings.claude_timeout,
            retries=settings.claude_retries,
        ),
        "gemini": ApiConfig(
            base_url=settings.gemini_base_url,
            timeout=settings.gemini_timeout,
            retries=settings.gemini_retries,
        ),
        "fal": ApiConfig(
            base_url=settings.fal_base_url,
            timeout=settings.fal_timeout,
            retries=settings.fal_retries,
        ),
        "firefly": ApiConfig(
            base_url=settings.firefly_base_url,
            timeout=settings.firefly_timeout,
            retries=settings.firefly_retries,
        ),
        "stock": ApiConfig(
            base_url=settings.stock_base_url,
            headers={},
            timeout=settings.stock_timeout,
            retries=settings.stock_retries,
        ),
        "audio": ApiConfig(
            base_url=settings.audio_base_url,
            headers={"Content-Type": "application/json", "Accept": "application/json"},
            timeout=settings.audio_timeout,
            retries=settings.audio_retries,
        ),
    }
    if overrides:
        configs.update(overrides)
    return configs


def get_or_register_api(name: str) -> ApiClient:
    """Return the registered client, registering it from settings on first use."""
    if name not in _registry:
        configs = default_api_configs()
        if name not in configs:
            raise KeyError(f"No default configuration for API '{name}'")
        register_api(name, configs[name])
    return _registry[name]


def register_default_apis() -> list[str]:
    """Register every provider from settings. Called on startup."""
    for name, config in default_api_configs().items():
        register_api(name, config)
    logger.info(f"✅ Registered {len(_registry)} provider APIs: {', '.join(list_apis())}")
    return list_apis()
