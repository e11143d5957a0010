from pydantic_settings import BaseSettings
from typing import Optional, Union
from functools import lru_cache
from pathlib import Path
from pydantic import field_validator

# Get the project root directory (one level up from creative_coach/)
PROJECT_ROOT = Path(__file__).parent.parent

# Export these for app-wide use
__all__ = ["Settings", "settings", "get_settings"]

class Settings(BaseSettings):
    # App Settings
    app_name: str = "Creative Coach - Adobe Learning Paths"
    debug: Union[bool, str] = True

    @field_validator('debug', mode='before')
    @classmethod
    def parse_debug(cls, v):
        """Parse debug from various formats"""
        if isinstance(v, bool):
            return v
        if isinstance(v, str):
            v_lower = v.lower().strip()
            if v_lower in ('true', '1', 'yes', 'on'):
                return True
            if v_lower in ('false', '0', 'no', 'off'):
                return False
            # If it's something else (like 'WARN'), default to True for development
            return True
        return bool(v)

    # Server Settings
    host: str = "127.0.0.1"
    port: int = 8000

    # CORS Settings - Allowed frontend URLs
    cors_origins: Union[str, list[str]] = ["*"]

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from comma-separated string or list"""
        if isinstance(v, str):
            if v.strip() == "*":
                return ["*"]
            return [origin.strip() for origin in v.split(',') if origin.strip()]
        return v

    # Environment (development or production)
    environment: str = "development"

    # OpenAI (chat completions proxy)
    openai_base_url: str = "https://zs1smmmclh.execute-api.us-east-1.amazonaws.com"
    openai_completions_endpoint: str = "/completions"
    openai_deployment: str = "o4-mini"
    openai_api_version: str = "2024-12-01-preview"
    openai_timeout: float = 30.0
    openai_retries: int = 3

    # OpenAI (image generation proxy)
    openai_image_base_url: str = "https://t436qa2399.execute-api.us-east-1.amazonaws.com"
    openai_image_endpoint: str = "/images/generations"
    openai_image_deployment: str = "gpt-image-1"
    openai_image_api_version: str = "2025-04-01-preview"
    openai_image_timeout: float = 30.0
    openai_image_retries: int = 3

    # Claude (Bedrock proxy)
    claude_base_url: str = "https://h42svy5s89.execute-api.us-east-1.amazonaws.com"
    claude_endpoint: str = "/claude"
    claude_model: str = (
        "arn:aws:bedrock:us-east-1:329556597816:inference-profile/"
        "us.anthropic.claude-3-7-sonnet-20250219-v1:0"
    )
    claude_max_tokens: int = 1024
    claude_timeout: float = 60.0  # Complex generation tasks need the longer timeout
    claude_retries: int = 3

    # Gemini (completions proxy)
    gemini_base_url: str = "https://w4t743mxub.execute-api.us-east-1.amazonaws.com"
    gemini_endpoint: str = "/completions"
    gemini_model: str = "gemini-1.5-flash"
    gemini_max_tokens: int = 1024
    gemini_temperature: float = 0.7
    gemini_timeout: float = 30.0
    gemini_retries: int = 3

    # Fal AI (image generation proxy)
    fal_base_url: str = "https://k63rd722e3.execute-api.us-east-1.amazonaws.com"
    fal_endpoint: str = "/fal"
    fal_model: str = "fal-ai/imagen3/fast"
    fal_key: Optional[str] = None  # Maps to FAL_KEY
    fal_timeout: float = 60.0
    fal_retries: int = 2

    # Adobe Firefly (IMS token + client id supplied per request)
    firefly_base_url: str = "https://firefly-api.adobe.io"
    firefly_timeout: float = 60.0
    firefly_retries: int = 3
    firefly_poll_interval: float = 1.0

    # Adobe Stock
    stock_base_url: str = "https://stock.adobe.io"
    stock_client_id: Optional[str] = None  # Maps to STOCK_CLIENT_ID
    stock_product: str = "CreativeCoach/1.0.0"
    stock_timeout: float = 30.0
    stock_retries: int = 3

    # Audio / music generation service
    audio_base_url: str = "https://pluto-prod-fraser-firefly-music-0-8000.colligo.dev"
    audio_timeout: float = 120.0  # Music generation is slow
    audio_retries: int = 3

    # Learning assistant
    learning_fast_mode: bool = False  # off: modules get real resources

    # Scraper relay
    scraper_user_agent: str = "Mozilla/5.0 (compatible; Adobe-Learning-Scraper)"
    scraper_timeout: float = 15.0
    scraper_max_results: int = 2

    # Wizard pacing (seconds)
    wizard_step_delay_seconds: float = 0.0
    wizard_revision_delay_seconds: float = 0.0

    # Logging
    log_level: str = "INFO"

    class Config:
        # Look for .env in project root
        env_file = str(PROJECT_ROOT / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Ignore extra fields in .env that aren't defined

@lru_cache()
def get_settings() -> Settings:
    """
    Create and cache a single Settings instance (Singleton pattern).
    Returns the same instance on subsequent calls.
    """
    return Settings()

# Create a global settings instance for convenience
settings = get_settings()
