"""
Maps service exceptions onto HTTP errors for the pass-through routes.
"""

import logging

from fastapi import HTTPException

from creative_coach.services.api_client import ProviderError

logger = logging.getLogger(__name__)


def to_http_exception(error: Exception, action: str) -> HTTPException:
    """
    Convert a service exception into an HTTPException.

    Args:
        error: Exception raised by a service call
        action: Short description used in logs and the 500 detail

    Returns:
        HTTPException: 400 for invalid input, 502 for provider failures, 500 otherwise
    """
    if isinstance(error, HTTPException):
        return error
    if isinstance(error, ValueError):
        logger.warning(f"⚠️  Invalid request for {action}: {error}")
        return HTTPException(status_code=400, detail=str(error))
    if isinstance(error, ProviderError):
        logger.error(f"❌ {action} failed at {error.provider or 'provider'}: {error}")
        return HTTPException(status_code=502, detail=str(error))

    logger.error(f"❌ Unexpected error during {action}: {error}", exc_info=True)
    return HTTPException(status_code=500, detail=f"Failed to {action}: {error}")
