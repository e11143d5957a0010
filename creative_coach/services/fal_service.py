"""
Fal AI wrapper for image generation.
"""

import logging
from typing import Any, Optional

from creative_coach.config import settings
from creative_coach.services.api_client import ApiClient, ProviderResponseError
from creative_coach.services.api_registry import get_or_register_api

logger = logging.getLogger(__name__)

IMAGEN3_FAST_MODEL = "fal-ai/imagen3/fast"

# Lazy singleton instance
_fal_service_instance = None


def get_fal_service() -> "FalService":
    global _fal_service_instance

    if _fal_service_instance is None:
        logger.info("🎨 Initializing FalService (first use)...")
        _fal_service_instance = FalService()
        logger.info("✅ FalService ready")

    return _fal_service_instance


class FalService:
    def __init__(self, client: Optional[ApiClient] = None):
        self.client = client or get_or_register_api("fal")
        self.endpoint = settings.fal_endpoint
        self.default_model = settings.fal_model
        self.api_key = settings.fal_key

    def _headers(self) -> dict[str, str]:
        if self.api_key:
            return {"Authorization": f"Key {self.api_key}"}
        return {}

    async def generate_image(self, prompt: str, model: Optional[str] = None, **options: Any) -> dict:
        """
        Generate an image with Fal AI.

        Args:
            prompt: Text prompt (required)
            model: Fal model id, defaults to the configured model
            **options: Model-specific parameters (image_url, duration, subject, ...)

        Returns:
            {"data": {"images": [{url, content_type, file_name, file_size}], "seed": int},
             "requestId": str}
        """
        if not prompt:
            raise ValueError("Prompt is required for image generation")

        request_body = {"model": model or self.default_model, "prompt": prompt, **options}

        response = await self.client.post(self.endpoint, json=request_body, headers=self._headers())
        logger.debug(f"   Raw Fal API response: {str(response)[:200]}")

        data = response.get("data") if isinstance(response, dict) else None
        if not isinstance(data, dict) or "images" not in data:
            logger.error(f"❌ Invalid Fal API response format: {str(response)[:200]}")
            raise ProviderResponseError("Invalid response format from Fal API", provider="fal")

        return response

    async def generate_image_with_imagen3(self, prompt: str, **options: Any) -> dict:
        return await self.generate_image(prompt, model=IMAGEN3_FAST_MODEL, **options)

    async def check_api_availability(self) -> bool:
        """Ping the API with a minimal prompt. Never raises."""
        try:
            await self.generate_image("test", model=self.default_model)
            return True
        except Exception as e:
            logger.warning(f"⚠️  Fal AI API not available: {e}")
            return False
