"""
Adobe Stock search wrapper.
"""

import logging
from typing import Any, Optional

from creative_coach.config import settings
from creative_coach.services.api_client import ApiClient, ProviderResponseError
from creative_coach.services.api_registry import get_or_register_api

logger = logging.getLogger(__name__)

SEARCH_FILES_PATH = "/Rest/Media/1/Search/Files"

DEFAULT_RESULT_COLUMNS = (
    "nb_results",
    "id",
    "title",
    "thumbnail_url",
    "width",
    "height",
    "creator_name",
)

CONTENT_TYPES = ("photo", "illustration", "vector", "video", "template", "3d")

# Lazy singleton instance
_stock_service_instance = None


def get_stock_service() -> "StockService":
    global _stock_service_instance

    if _stock_service_instance is None:
        logger.info("📷 Initializing StockService (first use)...")
        _stock_service_instance = StockService()
        logger.info("✅ StockService ready")

    return _stock_service_instance


def content_type_filters(content_type: str) -> dict[str, int]:
    """Filters for a content type selection; 'all' means no filter."""
    if content_type == "all":
        return {}
    if content_type not in CONTENT_TYPES:
        raise ValueError(f"Unknown content type '{content_type}'")
    return {f"content_type:{content_type}": 1}


def to_stock_images(response: dict) -> list[dict]:
    """Map Stock `files` into display records with defaults for missing fields."""
    return [
        {
            "id": file.get("id"),
            "title": file.get("title") or "Untitled",
            "thumbnail_url": file.get("thumbnail_url") or "",
            "width": file.get("width") or 0,
            "height": file.get("height") or 0,
            "creator_name": file.get("creator_name") or "Unknown",
        }
        for file in response.get("files", [])
    ]


class StockService:
    def __init__(self, client: Optional[ApiClient] = None):
        self.client = client or get_or_register_api("stock")
        self.product = settings.stock_product

    async def search_stock(self, client_id: str, params: dict[str, Any]) -> dict:
        """
        Raw search against the Stock Search/Files endpoint.

        Args:
            client_id: Adobe API key (x-api-key)
            params: Already-flattened query params (search_parameters[...], result_columns[])
        """
        if not client_id:
            raise ValueError("An Adobe Stock client id is required")

        headers = {"x-api-key": client_id, "x-product": self.product}
        response = await self.client.get(SEARCH_FILES_PATH, params=params, headers=headers)
        if not isinstance(response, dict):
            raise ProviderResponseError("Invalid response format from Adobe Stock API", provider="stock")
        return response

    async def quick_search(
        self,
        client_id: str,
        query: str,
        limit: int = 20,
        filters: Optional[dict[str, int]] = None,
        offset: int = 0,
    ) -> dict:
        """Keyword search with filters, e.g. {"content_type:photo": 1}."""
        if not query or not query.strip():
            raise ValueError("A search query is required")

        if filters is None:
            filters = {"content_type:photo": 1}

        params: dict[str, Any] = {
            "search_parameters[words]": query.strip(),
            "search_parameters[limit]": limit,
            "search_parameters[offset]": offset,
            "result_columns[]": list(DEFAULT_RESULT_COLUMNS),
        }
        for key, value in filters.items():
            params[f"search_parameters[filters][{key}]"] = value

        response = await self.search_stock(client_id, params)
        logger.info(f"🔍 Stock search '{query}': {response.get('nb_results', 0)} result(s)")
        return response
