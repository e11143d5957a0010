"""
OpenAI wrapper for the Azure-backed completions and image generation proxies.
"""

import base64
import logging
from typing import Optional, Union

from creative_coach.config import settings
from creative_coach.services.api_client import ApiClient, ProviderResponseError
from creative_coach.services.api_registry import get_or_register_api

logger = logging.getLogger(__name__)

DEPLOYMENTS = ("o4-mini", "gpt-4o", "gpt-4o-mini")
IMAGE_SIZES = ("1024x1024", "1024x1536", "1536x1024", "auto")

# Lazy singleton instance
_openai_service_instance = None


def get_openai_service() -> "OpenAIService":
    """
    Get or create singleton OpenAIService instance (lazy initialization).

    Returns:
        OpenAIService: Singleton instance
    """
    global _openai_service_instance

    if _openai_service_instance is None:
        logger.info("🤖 Initializing OpenAIService (first use)...")
        logger.info(f"   Deployment: {settings.openai_deployment}")
        _openai_service_instance = OpenAIService()
        logger.info("✅ OpenAIService ready (will reuse for future requests)")

    return _openai_service_instance


def create_text_content(text: str) -> dict:
    return {"type": "text", "text": text}


def create_image_content(data_url: str) -> dict:
    return {"type": "image_url", "image_url": {"url": data_url}}


def prepare_image_for_openai(content: bytes, mime_type: str) -> str:
    """
    Encode raw image bytes as a data URL accepted by the vision models.

    Raises:
        ValueError: If the mime type is not an image type
    """
    if not mime_type or not mime_type.startswith("image/"):
        raise ValueError("Only image files are supported")
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def build_user_message(text: str = "", image_data_url: Optional[str] = None) -> dict:
    """User message with text, an image, or both (image first)."""
    text = text.strip()
    if not text and not image_data_url:
        raise ValueError("A message needs text or an image")
    if not image_data_url:
        return {"role": "user", "content": text}

    content: list[dict] = [create_image_content(image_data_url)]
    if text:
        content.append(create_text_content(text))
    return {"role": "user", "content": content}


class OpenAIService:
    def __init__(
        self,
        client: Optional[ApiClient] = None,
        image_client: Optional[ApiClient] = None,
    ):
        self.client = client or get_or_register_api("openai")
        self.image_client = image_client or get_or_register_api("openai-images")
        self.endpoint = settings.openai_completions_endpoint
        self.deployment = settings.openai_deployment
        self.api_version = settings.openai_api_version

    async def create_completion(
        self,
        messages: list[dict],
        deployment: Optional[str] = None,
        api_version: Optional[str] = None,
    ) -> dict:
        payload = {
            "messages": messages,
            "deployment": deployment or self.deployment,
            "apiVersion": api_version or self.api_version,
        }
        logger.debug(f"   OpenAI request: deployment={payload['deployment']}, messages={len(messages)}")
        return await self.client.post(self.endpoint, json=payload)

    async def send_message(
        self,
        messages: list[dict],
        deployment: Optional[str] = None,
        api_version: Optional[str] = None,
    ) -> dict:
        """
        Send a chat conversation and return the assistant message.

        Returns:
            {"role": "assistant", "content": "..."}

        Raises:
            ProviderResponseError: If no choices are returned
        """
        result = await self.create_completion(messages, deployment, api_version)

        choices = result.get("choices") if isinstance(result, dict) else None
        if not choices:
            raise ProviderResponseError("No choices returned from OpenAI API", provider="openai")

        message = choices[0].get("message") or {}
        return {"role": message.get("role", "assistant"), "content": message.get("content", "")}

    async def generate_image(
        self,
        prompt: str,
        size: str = "1024x1024",
        n: int = 1,
        deployment: Optional[str] = None,
        api_version: Optional[str] = None,
    ) -> list[dict[str, Union[str, None]]]:
        """Generate images with the gpt-image deployment. Returns the `data` items."""
        if not prompt or not prompt.strip():
            raise ValueError("Prompt is required for image generation")
        if size not in IMAGE_SIZES:
            raise ValueError(f"Unsupported image size '{size}'. Use one of: {', '.join(IMAGE_SIZES)}")

        payload = {
            "prompt": prompt,
            "size": size,
            "n": n,
            "deployment": deployment or settings.openai_image_deployment,
            "apiVersion": api_version or settings.openai_image_api_version,
        }
        result = await self.image_client.post(settings.openai_image_endpoint, json=payload)

        data = result.get("data") if isinstance(result, dict) else None
        if not data:
            raise ProviderResponseError("No images returned from OpenAI image API", provider="openai")
        return data
