import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from creative_coach.api.chat import router as chat_router
from creative_coach.api.learning import router as learning_router
from creative_coach.api.media import router as media_router
from creative_coach.api.routes import router
from creative_coach.api.scrape import router as scrape_router
from creative_coach.api.wizard import router as wizard_router
from creative_coach.config import settings
from creative_coach.core.startup import shutdown_services, startup_services

# Configure logging from settings
logging.basicConfig(level=settings.log_level)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    # Startup: Code that runs when the app starts
    logging.info("=" * 60)
    logging.info(f"🚀 {settings.app_name} starting up...")
    logging.info("=" * 60)

    # App Settings
    logging.info("📋 App Configuration:")
    logging.info(f"  Environment: {settings.environment}")
    logging.info(f"  Debug mode: {settings.debug}")
    logging.info(f"  Log level: {settings.log_level}")

    # Server Settings
    logging.info("🌐 Server Configuration:")
    logging.info(f"  Host: {settings.host}")
    logging.info(f"  Port: {settings.port}")
    logging.info(f"  CORS Origins: {settings.cors_origins}")

    # LLM Settings
    logging.info("🤖 LLM Configuration:")
    logging.info(f"  OpenAI proxy: {settings.openai_base_url} ({settings.openai_deployment})")
    logging.info(f"  Claude proxy: {settings.claude_base_url}")
    logging.info(f"  Gemini proxy: {settings.gemini_base_url} ({settings.gemini_model})")
    logging.info(f"  Learning fast mode: {settings.learning_fast_mode}")

    # Media Settings
    logging.info("🎨 Media Configuration:")
    logging.info(f"  Fal key: {'✓ Configured' if settings.fal_key else '✗ Not set'}")
    logging.info(f"  Stock client id: {'✓ Configured' if settings.stock_client_id else '✗ Not set'}")
    logging.info(f"  Firefly: {settings.firefly_base_url} (IMS token supplied per request)")
    logging.info(f"  Audio: {settings.audio_base_url}")

    # Initialize services (provider registry)
    try:
        await startup_services()
    except Exception as e:
        logging.warning(f"⚠️  Service initialization warning: {e}")

    logging.info("=" * 60)
    logging.info("✅ Startup complete - Ready to accept requests")
    logging.info("=" * 60)

    yield  # App runs here

    # Shutdown: Code that runs when the app shuts down
    try:
        logging.info("=" * 60)
        logging.info("🛑 App is shutting down...")
        logging.info("=" * 60)

        await shutdown_services()
    except Exception as e:
        # Ignore cancellation errors during shutdown (normal when stopping with Ctrl+C)
        if "CancelledError" not in str(type(e).__name__) and "KeyboardInterrupt" not in str(
            type(e).__name__
        ):
            logging.error(f"Error during shutdown: {e}", exc_info=True)


app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)

# Add CORS middleware - configured from settings
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix="/api")
app.include_router(scrape_router, prefix="/api")
app.include_router(wizard_router, prefix="/api/wizard", tags=["wizard"])
app.include_router(learning_router, prefix="/api/learning", tags=["learning"])
app.include_router(chat_router, prefix="/api/chat", tags=["chat"])
app.include_router(media_router, prefix="/api/media", tags=["media"])


if __name__ == "__main__":
    uvicorn.run("creative_coach.main:app", host=settings.host, port=settings.port, reload=settings.debug)
