"""
Claude wrapper for the Bedrock proxy.
Used by the learning assistant for app prediction and path generation.
"""

import logging
import time
from typing import Any, Optional

from creative_coach.config import settings
from creative_coach.services.api_client import ApiClient, ProviderResponseError
from creative_coach.services.api_registry import get_or_register_api

logger = logging.getLogger(__name__)

# Lazy singleton instance
_claude_service_instance = None


def get_claude_service() -> "ClaudeService":
    """
    Get or create singleton ClaudeService instance (lazy initialization).

    Returns:
        ClaudeService: Singleton instance
    """
    global _claude_service_instance

    if _claude_service_instance is None:
        logger.info("🤖 Initializing ClaudeService (first use)...")
        logger.info(f"   Model: {settings.claude_model}")
        _claude_service_instance = ClaudeService()
        logger.info("✅ ClaudeService ready (will reuse for future requests)")

    return _claude_service_instance


class ClaudeService:
    def __init__(self, client: Optional[ApiClient] = None):
        self.client = client or get_or_register_api("claude")
        self.endpoint = settings.claude_endpoint
        self.model = settings.claude_model
        self.max_tokens = settings.claude_max_tokens

    async def create_completion(self, request: dict[str, Any]) -> dict[str, Any]:
        """Send a raw completion request to the Claude proxy."""
        return await self.client.post(self.endpoint, json=request)

    async def send_message(self, messages: list[dict], **options) -> list[dict]:
        """
        Send messages to Claude and return the response content blocks.

        Args:
            messages: [{"role": "user|assistant", "content": "..."}]
            **options: Extra request fields (system, temperature, max_tokens, ...)

        Returns:
            List of content blocks, e.g. [{"type": "text", "text": "..."}]
        """
        start_time = time.time()
        request = {
            "model": options.pop("model", None) or self.model,
            "messages": messages,
            "max_tokens": options.pop("max_tokens", None) or self.max_tokens,
            **options,
        }

        logger.debug(f"   Claude request: messages={len(messages)}, max_tokens={request['max_tokens']}")
        response = await self.create_completion(request)

        if not isinstance(response, dict) or "content" not in response:
            raise ProviderResponseError("No content returned from Claude API", provider="claude")

        duration = time.time() - start_time
        logger.debug(f"✅ Claude response in {duration:.2f}s")
        return response["content"]

    async def send_text_message(
        self,
        user_message: str,
        system_prompt: Optional[str] = None,
        **options,
    ) -> str:
        """Send a single user message and return the concatenated text reply."""
        messages = [{"role": "user", "content": user_message}]
        if system_prompt:
            options["system"] = system_prompt

        content = await self.send_message(messages, **options)
        return "".join(block.get("text", "") for block in content if block.get("type") == "text")
