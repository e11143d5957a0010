"""
Gemini wrapper for the completions proxy.
"""

import logging
from typing import Any, Optional

from creative_coach.config import settings
from creative_coach.services.api_client import ApiClient, ProviderResponseError
from creative_coach.services.api_registry import get_or_register_api

logger = logging.getLogger(__name__)

# Lazy singleton instance
_gemini_service_instance = None


def get_gemini_service() -> "GeminiService":
    """
    Get or create singleton GeminiService instance (lazy initialization).

    Returns:
        GeminiService: Singleton instance
    """
    global _gemini_service_instance

    if _gemini_service_instance is None:
        logger.info("🤖 Initializing GeminiService (first use)...")
        logger.info(f"   Model: {settings.gemini_model}")
        _gemini_service_instance = GeminiService()
        logger.info("✅ GeminiService ready (will reuse for future requests)")

    return _gemini_service_instance


def create_text_content(text: str) -> dict:
    """Create a text part for Gemini messages."""
    return {"text": text}


def create_image_content(mime_type: str, base64_data: str) -> dict:
    """Create an inline (base64) image part for Gemini messages."""
    return {"inlineData": {"mimeType": mime_type, "data": base64_data}}


class GeminiService:
    def __init__(self, client: Optional[ApiClient] = None):
        self.client = client or get_or_register_api("gemini")
        self.endpoint = settings.gemini_endpoint
        self.model = settings.gemini_model
        self.temperature = settings.gemini_temperature
        self.max_retries = settings.gemini_retries

    async def create_completion(self, request: dict[str, Any]) -> dict[str, Any]:
        """Fill in model, maxRetries and temperature, then send the request."""
        full_request = {
            "model": self.model,
            "maxRetries": self.max_retries,
            "temperature": self.temperature,
            **{key: value for key, value in request.items() if value is not None},
        }
        return await self.client.post(self.endpoint, json=full_request)

    async def send_message(self, contents: list[dict], **options) -> list[dict]:
        """
        Send Gemini-style contents and return the first candidate's parts.

        Args:
            contents: [{"role": "user|system|assistant", "parts": [{"text": ...}]}]

        Raises:
            ProviderResponseError: If no candidates are returned
        """
        response = await self.create_completion({"contents": contents, **options})

        candidates = response.get("candidates") if isinstance(response, dict) else None
        if not candidates:
            raise ProviderResponseError("No response generated from Gemini API", provider="gemini")

        return candidates[0].get("content", {}).get("parts", [])

    async def send_text_message(
        self,
        user_message: str,
        system_prompt: Optional[str] = None,
        **options,
    ) -> str:
        """Send a single user message (with optional system prompt) and join the text parts."""
        contents = []
        if system_prompt:
            contents.append({"role": "system", "parts": [create_text_content(system_prompt)]})
        contents.append({"role": "user", "parts": [create_text_content(user_message)]})

        parts = await self.send_message(contents, **options)
        return "".join(part.get("text") or "" for part in parts if "text" in part)
