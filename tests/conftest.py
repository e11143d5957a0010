"""
Pytest configuration and shared fixtures
"""
import httpx
import pytest
from fastapi.testclient import TestClient


@pytest.fixture(autouse=True)
def reset_singletons(monkeypatch):
    """Reset lazy singletons and the provider registry before each test"""
    import creative_coach.services.adobe_scraper
    import creative_coach.services.api_registry
    import creative_coach.services.audio_service
    import creative_coach.services.claude_service
    import creative_coach.services.fal_service
    import creative_coach.services.firefly_service
    import creative_coach.services.gemini_service
    import creative_coach.services.learning_assistant
    import creative_coach.services.openai_service
    import creative_coach.services.stock_service
    import creative_coach.services.tutorial_service
    import creative_coach.services.wizard

    monkeypatch.setattr(creative_coach.services.claude_service, "_claude_service_instance", None)
    monkeypatch.setattr(creative_coach.services.openai_service, "_openai_service_instance", None)
    monkeypatch.setattr(creative_coach.services.gemini_service, "_gemini_service_instance", None)
    monkeypatch.setattr(creative_coach.services.fal_service, "_fal_service_instance", None)
    monkeypatch.setattr(creative_coach.services.firefly_service, "_firefly_service_instance", None)
    monkeypatch.setattr(creative_coach.services.stock_service, "_stock_service_instance", None)
    monkeypatch.setattr(creative_coach.services.audio_service, "_audio_service_instance", None)
    monkeypatch.setattr(creative_coach.services.tutorial_service, "_tutorial_service_instance", None)
    monkeypatch.setattr(creative_coach.services.learning_assistant, "_learning_assistant_instance", None)
    monkeypatch.setattr(creative_coach.services.adobe_scraper, "_adobe_scraper_instance", None)
    monkeypatch.setattr(creative_coach.services.wizard, "_wizard_store_instance", None)

    creative_coach.services.api_registry.clear_registry()
    yield
    creative_coach.services.api_registry.clear_registry()


@pytest.fixture
def client():
    """FastAPI test client with all routers"""
    # Create a fresh app instance for each test
    from fastapi import FastAPI
    from creative_coach.api.chat import router as chat_router
    from creative_coach.api.learning import router as learning_router
    from creative_coach.api.media import router as media_router
    from creative_coach.api.routes import router
    from creative_coach.api.scrape import router as scrape_router
    from creative_coach.api.wizard import router as wizard_router
    from creative_coach.config import settings

    test_app = FastAPI(title=settings.app_name, debug=settings.debug)
    test_app.include_router(router, prefix="/api")
    test_app.include_router(scrape_router, prefix="/api")
    test_app.include_router(wizard_router, prefix="/api/wizard", tags=["wizard"])
    test_app.include_router(learning_router, prefix="/api/learning", tags=["learning"])
    test_app.include_router(chat_router, prefix="/api/chat", tags=["chat"])
    test_app.include_router(media_router, prefix="/api/media", tags=["media"])

    return TestClient(test_app)


class FakeAsyncClient:
    """Stands in for httpx.AsyncClient; answers every request through the recorder's handler."""

    def __init__(self, recorder, **kwargs):
        self.recorder = recorder
        self.kwargs = kwargs

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False

    async def request(self, method, url, **kwargs):
        self.recorder.calls.append({"method": method, "url": str(url), **kwargs})
        result = self.recorder.handler(method, str(url), kwargs)
        if isinstance(result, Exception):
            raise result

        status_code, body = result
        request = httpx.Request(method, str(url))
        if isinstance(body, (dict, list)):
            return httpx.Response(status_code, json=body, request=request)
        if isinstance(body, bytes):
            return httpx.Response(status_code, content=body, request=request)
        return httpx.Response(status_code, text=body or "", request=request)

    async def get(self, url, **kwargs):
        return await self.request("GET", url, **kwargs)

    async def post(self, url, **kwargs):
        return await self.request("POST", url, **kwargs)


class HttpRecorder:
    def __init__(self):
        self.calls = []
        self.handler = lambda method, url, kwargs: (200, {})

    def respond(self, *results):
        """Answer successive requests with the given (status, body) tuples or exceptions; the last one repeats."""
        queue = list(results)

        def handler(method, url, kwargs):
            return queue.pop(0) if len(queue) > 1 else queue[0]

        self.handler = handler


@pytest.fixture
def fake_httpx(monkeypatch):
    """Replace httpx.AsyncClient with a recorder-backed fake"""
    recorder = HttpRecorder()
    monkeypatch.setattr(httpx, "AsyncClient", lambda *args, **kwargs: FakeAsyncClient(recorder, **kwargs))
    return recorder
