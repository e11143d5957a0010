"""
Application startup initialization.
Call this on app startup to initialize services.
"""

import logging

from creative_coach.services.api_registry import register_default_apis

logger = logging.getLogger(__name__)


async def startup_services():
    """
    Initialize all services on application startup.
    Call this from FastAPI startup event.
    """
    logger.info("🚀 Initializing application services...")

    # Register provider clients so the first request doesn't pay for it
    try:
        names = register_default_apis()
        logger.info(f"✅ Provider registry ready ({len(names)} APIs)")
    except Exception as e:
        logger.warning(f"⚠️  Provider registration failed: {e}")
        logger.info("   Providers will be registered on first use")

    logger.info("✅ Startup services initialized")


async def shutdown_services():
    """
    Cleanup services on application shutdown.
    Call this from FastAPI shutdown event.
    """
    try:
        logger.info("🛑 Shutting down application services...")
        # Wizard sessions and caches are in memory only
        logger.info("✅ Services shut down")
    except Exception as e:
        # Ignore cancellation errors during shutdown (normal when stopping with Ctrl+C)
        if "CancelledError" not in str(type(e).__name__):
            logger.warning(f"⚠️  Error during shutdown: {e}")
