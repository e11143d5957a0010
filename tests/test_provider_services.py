"""
Tests for the provider wrappers (OpenAI, Claude, Gemini, Fal, Firefly, Stock, Audio)
"""

import pytest


class TestOpenAIService:
    """Test cases for OpenAIService"""

    @pytest.mark.asyncio
    async def test_send_message(self, fake_httpx):
        """Test send_message - payload shape and assistant reply"""
        from creative_coach.services.openai_service import get_openai_service

        fake_httpx.respond((200, {"choices": [{"message": {"role": "assistant", "content": "Hi!"}}]}))

        reply = await get_openai_service().send_message([{"role": "user", "content": "Hello"}])

        assert reply == {"role": "assistant", "content": "Hi!"}
        payload = fake_httpx.calls[0]["json"]
        assert payload["deployment"] == "o4-mini"
        assert payload["apiVersion"] == "2024-12-01-preview"
        assert fake_httpx.calls[0]["url"].endswith("/completions")

    @pytest.mark.asyncio
    async def test_send_message_no_choices(self, fake_httpx):
        """Test send_message - empty choices raise ProviderResponseError"""
        from creative_coach.services.api_client import ProviderResponseError
        from creative_coach.services.openai_service import get_openai_service

        fake_httpx.respond((200, {"choices": []}))

        with pytest.raises(ProviderResponseError):
            await get_openai_service().send_message([{"role": "user", "content": "Hello"}])

    @pytest.mark.asyncio
    async def test_generate_image_rejects_unknown_size(self):
        """Test generate_image - invalid size is a ValueError before any request"""
        from creative_coach.services.openai_service import get_openai_service

        with pytest.raises(ValueError):
            await get_openai_service().generate_image("a cat", size="10x10")

    def test_build_user_message_with_image(self):
        """Test build_user_message - image part goes first"""
        from creative_coach.services.openai_service import build_user_message, prepare_image_for_openai

        data_url = prepare_image_for_openai(b"\x89PNG", "image/png")
        message = build_user_message("What is this?", data_url)

        assert data_url.startswith("data:image/png;base64,")
        assert message["content"][0]["type"] == "image_url"
        assert message["content"][1] == {"type": "text", "text": "What is this?"}

    def test_build_user_message_empty(self):
        """Test build_user_message - no text and no image"""
        from creative_coach.services.openai_service import build_user_message

        with pytest.raises(ValueError):
            build_user_message("   ")


class TestClaudeService:
    """Test cases for ClaudeService"""

    @pytest.mark.asyncio
    async def test_send_text_message(self, fake_httpx):
        """Test send_text_message - system prompt and joined text blocks"""
        from creative_coach.services.claude_service import get_claude_service

        fake_httpx.respond(
            (200, {"content": [{"type": "text", "text": "Hello "}, {"type": "tool_use"}, {"type": "text", "text": "there"}]})
        )

        text = await get_claude_service().send_text_message("Hi", "Be brief", max_tokens=300, temperature=0.3)

        assert text == "Hello there"
        payload = fake_httpx.calls[0]["json"]
        assert payload["system"] == "Be brief"
        assert payload["max_tokens"] == 300
        assert payload["temperature"] == 0.3
        assert payload["messages"] == [{"role": "user", "content": "Hi"}]

    @pytest.mark.asyncio
    async def test_missing_content(self, fake_httpx):
        """Test send_message - response without content"""
        from creative_coach.services.api_client import ProviderResponseError
        from creative_coach.services.claude_service import get_claude_service

        fake_httpx.respond((200, {"id": "msg_1"}))

        with pytest.raises(ProviderResponseError):
            await get_claude_service().send_message([{"role": "user", "content": "Hi"}])


class TestGeminiService:
    """Test cases for GeminiService"""

    @pytest.mark.asyncio
    async def test_send_text_message(self, fake_httpx):
        """Test send_text_message - defaults filled in and parts joined"""
        from creative_coach.services.gemini_service import get_gemini_service

        fake_httpx.respond((200, {"candidates": [{"content": {"parts": [{"text": "a"}, {"text": "b"}]}}]}))

        text = await get_gemini_service().send_text_message("Hi", "System")

        assert text == "ab"
        payload = fake_httpx.calls[0]["json"]
        assert payload["model"] == "gemini-1.5-flash"
        assert payload["temperature"] == 0.7
        assert payload["contents"][0]["role"] == "system"
        assert payload["contents"][1] == {"role": "user", "parts": [{"text": "Hi"}]}

    @pytest.mark.asyncio
    async def test_no_candidates(self, fake_httpx):
        """Test send_message - no candidates"""
        from creative_coach.services.api_client import ProviderResponseError
        from creative_coach.services.gemini_service import get_gemini_service

        fake_httpx.respond((200, {"candidates": []}))

        with pytest.raises(ProviderResponseError):
            await get_gemini_service().send_text_message("Hi")


class TestFalService:
    """Test cases for FalService"""

    @pytest.mark.asyncio
    async def test_generate_image(self, fake_httpx):
        """Test generate_image - default model and options forwarded"""
        from creative_coach.services.fal_service import get_fal_service

        response = {"data": {"images": [{"url": "https://img"}], "seed": 1}, "requestId": "r1"}
        fake_httpx.respond((200, response))

        result = await get_fal_service().generate_image("a cat", aspect_ratio="1:1")

        assert result == response
        payload = fake_httpx.calls[0]["json"]
        assert payload == {"model": "fal-ai/imagen3/fast", "prompt": "a cat", "aspect_ratio": "1:1"}

    @pytest.mark.asyncio
    async def test_invalid_response(self, fake_httpx):
        """Test generate_image - missing images"""
        from creative_coach.services.api_client import ProviderResponseError
        from creative_coach.services.fal_service import get_fal_service

        fake_httpx.respond((200, {"data": {}}))

        with pytest.raises(ProviderResponseError):
            await get_fal_service().generate_image("a cat")

    @pytest.mark.asyncio
    async def test_check_api_availability_never_raises(self, fake_httpx):
        """Test check_api_availability - failure is reported as False"""
        from creative_coach.services.fal_service import get_fal_service

        fake_httpx.respond((400, {"message": "bad"}))

        assert await get_fal_service().check_api_availability() is False


class TestFireflyService:
    """Test cases for FireflyService"""

    @pytest.mark.asyncio
    async def test_generate_maps_named_size(self, fake_httpx):
        """Test generate - named size and auth headers"""
        from creative_coach.services.firefly_service import extract_image_outputs, get_firefly_service

        fake_httpx.respond((200, {"outputs": [{"image": {"presignedUrl": "https://img"}, "seed": 7}]}))

        response = await get_firefly_service().generate("a fox", "token", "client", size="square")

        call = fake_httpx.calls[0]
        assert call["json"]["size"] == {"width": 2048, "height": 2048}
        assert call["json"]["numVariations"] == 1
        assert call["headers"]["Authorization"] == "Bearer token"
        assert call["headers"]["x-api-key"] == "client"
        assert extract_image_outputs(response) == [{"url": "https://img", "seed": 7}]

    @pytest.mark.asyncio
    async def test_generate_requires_token(self):
        """Test generate - missing IMS token"""
        from creative_coach.services.firefly_service import get_firefly_service

        with pytest.raises(ValueError):
            await get_firefly_service().generate("a fox", "", "client")

    @pytest.mark.asyncio
    async def test_generate_unknown_size(self):
        """Test generate - unknown size name"""
        from creative_coach.services.firefly_service import get_firefly_service

        with pytest.raises(ValueError):
            await get_firefly_service().generate("a fox", "token", "client", size="huge")

    def test_build_video_request(self):
        """Test build_video_request - sizes, settings and image conditions"""
        from creative_coach.services.firefly_service import build_video_request

        request = build_video_request("waves", size="HD (720p)", num_frames=64, image_ids=["img-1"])

        assert request["sizes"] == [{"width": 1280, "height": 720, "numFrames": 64}]
        assert request["videoSettings"]["cameraMotion"] == "camera locked down"
        assert request["image"]["conditions"][0]["source"] == {"id": "img-1"}

    def test_build_video_request_invalid_option(self):
        """Test build_video_request - unknown camera motion"""
        from creative_coach.services.firefly_service import build_video_request

        with pytest.raises(ValueError):
            build_video_request("waves", camera_motion="barrel roll")

    @pytest.mark.asyncio
    async def test_wait_for_video_polls_until_done(self, fake_httpx):
        """Test wait_for_video - follows progress until outputs appear"""
        from creative_coach.services.firefly_service import get_firefly_service

        fake_httpx.respond(
            (200, {"progress": 10}),
            (200, {"progress": 60, "links": {"result": {"href": "https://firefly.test/status/2"}}}),
            (200, {"progress": 100, "outputs": [{"video": {"url": "https://video"}, "seed": 3}]}),
        )

        videos = await get_firefly_service().wait_for_video(
            {"statusUrl": "https://firefly.test/status/1"}, "token", "client", poll_interval=0
        )

        assert videos == [{"url": "https://video", "seed": 3}]
        assert [call["url"] for call in fake_httpx.calls] == [
            "https://firefly.test/status/1",
            "https://firefly.test/status/1",
            "https://firefly.test/status/2",
        ]


class TestStockService:
    """Test cases for StockService"""

    @pytest.mark.asyncio
    async def test_quick_search_params(self, fake_httpx):
        """Test quick_search - flattened params and product header"""
        from creative_coach.services.stock_service import content_type_filters, get_stock_service

        fake_httpx.respond((200, {"nb_results": 1, "files": [{"id": 1, "title": "Sunset"}]}))

        await get_stock_service().quick_search("key", " sunset ", limit=5, filters=content_type_filters("vector"))

        call = fake_httpx.calls[0]
        assert call["params"]["search_parameters[words]"] == "sunset"
        assert call["params"]["search_parameters[limit]"] == 5
        assert call["params"]["search_parameters[filters][content_type:vector]"] == 1
        assert call["headers"]["x-api-key"] == "key"

    def test_to_stock_images_defaults(self):
        """Test to_stock_images - missing fields get defaults"""
        from creative_coach.services.stock_service import to_stock_images

        images = to_stock_images({"files": [{"id": 5}]})

        assert images[0]["title"] == "Untitled"
        assert images[0]["creator_name"] == "Unknown"
        assert images[0]["width"] == 0

    def test_content_type_all(self):
        """Test content_type_filters - 'all' means no filter"""
        from creative_coach.services.stock_service import content_type_filters

        assert content_type_filters("all") == {}
        with pytest.raises(ValueError):
            content_type_filters("sculpture")


class TestAudioService:
    """Test cases for AudioService"""

    @pytest.mark.asyncio
    async def test_generate_music_requires_input(self):
        """Test generate_music - needs a prompt, prompts, media id or description"""
        from creative_coach.services.audio_service import MusicGenerateRequest, get_audio_service

        with pytest.raises(ValueError):
            await get_audio_service().generate_music(MusicGenerateRequest())

    @pytest.mark.asyncio
    async def test_generate_music_drops_none_fields(self, fake_httpx):
        """Test generate_music - request body excludes unset fields"""
        from creative_coach.services.audio_service import MusicGenerateRequest, get_audio_service

        fake_httpx.respond((200, {"job_id": "job-1", "wait_time_in_seconds": 10}))

        result = await get_audio_service().generate_music(MusicGenerateRequest(prompt="lofi beats", num_outputs=2))

        assert result["job_id"] == "job-1"
        assert fake_httpx.calls[0]["json"] == {"prompt": "lofi beats", "num_outputs": 2}

    @pytest.mark.asyncio
    async def test_wait_for_music_completed(self, fake_httpx, monkeypatch):
        """Test wait_for_music - pending then completed"""
        import creative_coach.services.audio_service as audio_service

        monkeypatch.setattr(audio_service, "STATUS_POLL_INTERVAL", 0)
        fake_httpx.respond(
            (200, {"status": "pending"}),
            (200, {"status": "completed", "urls": ["https://a", "https://b"], "captions": ["Chill"]}),
        )

        tracks = await audio_service.get_audio_service().wait_for_music("job-1")

        assert [track.title for track in tracks] == ["Chill", "Generated Music 2"]
        assert tracks[0].url == "https://a"

    @pytest.mark.asyncio
    async def test_wait_for_music_initial_error_retries_once(self, fake_httpx, monkeypatch):
        """Test wait_for_music - a failed first status check waits 5s and retries"""
        import creative_coach.services.audio_service as audio_service

        sleeps = []

        async def fake_sleep(seconds):
            sleeps.append(seconds)

        monkeypatch.setattr(audio_service.asyncio, "sleep", fake_sleep)
        fake_httpx.respond(
            (404, {"detail": "not ready"}),
            (200, {"status": "pending"}),
            (200, {"status": "completed", "urls": ["https://a"]}),
        )

        tracks = await audio_service.get_audio_service().wait_for_music("job-1")

        assert [track.url for track in tracks] == ["https://a"]
        assert sleeps == [5.0, 3.0]
        assert len(fake_httpx.calls) == 3

    @pytest.mark.asyncio
    async def test_wait_for_music_initial_error_twice_raises(self, fake_httpx, monkeypatch):
        """Test wait_for_music - the initial status check is retried only once"""
        import creative_coach.services.audio_service as audio_service
        from creative_coach.services.api_client import ProviderError

        sleeps = []

        async def fake_sleep(seconds):
            sleeps.append(seconds)

        monkeypatch.setattr(audio_service.asyncio, "sleep", fake_sleep)
        fake_httpx.respond((404, {"detail": "not found"}))

        with pytest.raises(ProviderError):
            await audio_service.get_audio_service().wait_for_music("job-1")

        assert sleeps == [5.0]
        assert len(fake_httpx.calls) == 2

    @pytest.mark.asyncio
    async def test_wait_for_music_poll_error_keeps_polling(self, fake_httpx, monkeypatch):
        """Test wait_for_music - a failed poll waits 2s and polls again"""
        import creative_coach.services.audio_service as audio_service

        sleeps = []

        async def fake_sleep(seconds):
            sleeps.append(seconds)

        monkeypatch.setattr(audio_service.asyncio, "sleep", fake_sleep)
        fake_httpx.respond(
            (200, {"status": "pending"}),
            (404, {"detail": "flaky"}),
            (200, {"status": "completed", "urls": ["https://a"], "captions": ["Intro"]}),
        )

        tracks = await audio_service.get_audio_service().wait_for_music("job-1")

        assert [track.title for track in tracks] == ["Intro"]
        assert sleeps == [3.0, 2.0, 3.0]
        assert len(fake_httpx.calls) == 3

    @pytest.mark.asyncio
    async def test_wait_for_music_failed(self, fake_httpx):
        """Test wait_for_music - failed job raises ProviderError"""
        from creative_coach.services.api_client import ProviderError
        from creative_coach.services.audio_service import get_audio_service

        fake_httpx.respond((200, {"status": "failed"}))

        with pytest.raises(ProviderError, match="Music generation failed"):
            await get_audio_service().wait_for_music("job-1")

    @pytest.mark.asyncio
    async def test_wait_for_music_max_polls(self, fake_httpx, monkeypatch):
        """Test wait_for_music - gives up after max_polls pending checks"""
        import creative_coach.services.audio_service as audio_service
        from creative_coach.services.api_client import ProviderError

        monkeypatch.setattr(audio_service, "STATUS_POLL_INTERVAL", 0)
        fake_httpx.respond((200, {"status": "pending"}))

        with pytest.raises(ProviderError, match="still pending"):
            await audio_service.get_audio_service().wait_for_music("job-1", max_polls=2)
