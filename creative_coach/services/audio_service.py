"""
Audio / music generation service wrapper.

Covers media upload, transcript/caption analysis, vibe and prompt generation,
music generation (plus extension and variation), beat detection and job polling.
"""

import asyncio
import logging
from enum import Enum
from typing import Any, Awaitable, Callable, Optional, Union

from pydantic import BaseModel, Field

from creative_coach.services.api_client import ApiClient, ProviderError
from creative_coach.services.api_registry import get_or_register_api

logger = logging.getLogger(__name__)


class AudioStatus(str, Enum):
    VIDEO_UPLOADED = "video_uploaded"
    AUDIO_UPLOADED = "audio_uploaded"
    TRANSCRIPT_UPLOADED = "transcript_uploaded"
    TRANSCRIBING = "transcribing"
    GENERATING_CAPTIONS = "generating_captions"
    GENERATING_SUMMARY = "generating_summary"
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"


ANALYSIS_MODELS = {
    "GEMMA_3_4B_IT": "gemma-3-4b-it",
    "GPT_4": "gpt-4",
}

MUSIC_GENERATION_PARAMETERS = {
    "MAX_DURATION": 300,  # seconds
    "MIN_DURATION": 0,
    "DEFAULT_NUM_OUTPUTS": 4,
    "DEFAULT_PNG_SCALE": 2,
}

BEAT_DETECTION_EVENTS = {
    "DOWNBEAT": 0,
    "BEAT": 1,
    "ONSET": 2,
}

# Polling cadence for music jobs (seconds)
STATUS_RETRY_DELAY = 5.0
STATUS_POLL_INTERVAL = 3.0
STATUS_ERROR_DELAY = 2.0
SUMMARY_START_DELAY = 2.0


class StructuredPrompt(BaseModel):
    music_genre: str
    music_instruments: str
    mood: str
    theme: str
    energy: str


class MusicGenerationParameters(BaseModel):
    duration: Optional[float] = Field(
        default=None,
        ge=MUSIC_GENERATION_PARAMETERS["MIN_DURATION"],
        le=MUSIC_GENERATION_PARAMETERS["MAX_DURATION"],
    )
    intro: Optional[bool] = None
    outro: Optional[bool] = None
    loop: Optional[bool] = None
    bpm: Optional[int] = None
    seed: Optional[int] = None
    audio: Optional[str] = None


class MusicGenerateRequest(BaseModel):
    model: Optional[str] = None
    media_id: Optional[str] = None
    video_description: Optional[str] = None
    vibe: Optional[str] = None
    prompt: Optional[Union[str, StructuredPrompt]] = None
    prompts: Optional[list[Union[str, StructuredPrompt]]] = None
    num_outputs: Optional[int] = Field(default=None, ge=1)
    parameters: Optional[MusicGenerationParameters] = None
    generate_title: Optional[bool] = None


class MusicTrack(BaseModel):
    url: str
    title: str


def _payload(model: BaseModel) -> dict:
    return model.model_dump(exclude_none=True)


def tracks_from_status(status: dict) -> list[MusicTrack]:
    """Tracks from a completed status; titles fall back to 'Generated Music N'."""
    captions = status.get("captions") or []
    return [
        MusicTrack(
            url=url,
            title=captions[index] if index < len(captions) and captions[index] else f"Generated Music {index + 1}",
        )
        for index, url in enumerate(status.get("urls") or [])
    ]


# Lazy singleton instance
_audio_service_instance = None


def get_audio_service() -> "AudioService":
    global _audio_service_instance

    if _audio_service_instance is None:
        logger.info("🎵 Initializing AudioService (first use)...")
        _audio_service_instance = AudioService()
        logger.info("✅ AudioService ready")

    return _audio_service_instance


class AudioService:
    def __init__(self, client: Optional[ApiClient] = None):
        self.client = client or get_or_register_api("audio")

    # Uploads

    async def _upload(self, path: str, field: str, filename: str, content: bytes, content_type: str) -> dict:
        files = {field: (filename, content, content_type)}
        try:
            return await self.client.post(path, files=files)
        except ProviderError as e:
            logger.error(f"❌ Error uploading {field}: {e}")
            raise

    async def upload_video(self, filename: str, content: bytes, content_type: str = "video/mp4") -> dict:
        return await self._upload("/upload/video", "video", filename, content, content_type)

    async def upload_audio(self, filename: str, content: bytes, content_type: str = "audio/mpeg") -> dict:
        return await self._upload("/upload/audio", "audio", filename, content, content_type)

    async def upload_transcript(self, filename: str, content: bytes, content_type: str = "text/plain") -> dict:
        return await self._upload("/upload/transcript", "transcript", filename, content, content_type)

    async def upload_media_to_s3(
        self, ldap: str, filename: str, content: bytes, content_type: str = "application/octet-stream"
    ) -> dict:
        """Upload any media file to S3 under the given LDAP. Returns {"s3_url": ...}."""
        if not ldap:
            raise ValueError("ldap is required for S3 uploads")
        return await self.client.post(
            "/upload/media-to-s3",
            data={"ldap": ldap},
            files={"file": (filename, content, content_type)},
        )

    # Analysis

    async def start_transcript_generation(self, media_id: str) -> dict:
        return await self.client.post(f"/analyze/transcript/{media_id}", json={})

    async def start_caption_generation(self, media_id: str, segment_scenes: Optional[bool] = None) -> dict:
        options = {} if segment_scenes is None else {"segment_scenes": segment_scenes}
        return await self.client.post(f"/analyze/captions/{media_id}", json=options)

    async def start_caption_summary(self, media_id: str, model: Optional[str] = None) -> dict:
        if model and model not in ANALYSIS_MODELS.values():
            raise ValueError(f"Unknown analysis model '{model}'")
        options = {} if model is None else {"model": model}
        return await self.client.post(f"/analyze/caption-summary/{media_id}", json=options)

    async def get_analysis_status(self, media_id: str) -> dict:
        return await self.client.get(f"/analysis-status/{media_id}")

    # Vibe and prompt generation

    async def generate_vibe(self, request: dict[str, Any]) -> dict:
        return await self.client.post("/generate/vibe", json=request)

    async def generate_music_prompt(self, request: dict[str, Any]) -> dict:
        return await self.client.post("/generate/music-prompt", json=request)

    # Music generation

    async def generate_music(self, request: MusicGenerateRequest) -> dict:
        """Start a music job. Returns {job_id, wait_time_in_seconds, ...}."""
        if not (request.prompt or request.prompts or request.media_id or request.video_description):
            raise ValueError("A prompt, prompts, media_id or video_description is required")
        return await self.client.post("/generate/music", json=_payload(request))

    async def _generate_from_audio(self, path: str, request: MusicGenerateRequest) -> dict:
        if not request.parameters or not request.parameters.audio:
            raise ValueError("parameters.audio is required to extend or vary music")
        return await self.client.post(path, json=_payload(request))

    async def generate_music_extension(self, request: MusicGenerateRequest) -> dict:
        return await self._generate_from_audio("/generate/music-extension", request)

    async def generate_music_variation(self, request: MusicGenerateRequest) -> dict:
        return await self._generate_from_audio("/generate/music-variation", request)

    async def get_music_status(self, job_id: str) -> dict:
        return await self.client.get(f"/music-status/{job_id}")

    # Utilities

    async def detect_beats(self, audio: str) -> dict:
        """Detect beats in an audio URL. Events use BEAT_DETECTION_EVENTS codes."""
        return await self.client.post("/detect-beats", json={"audio": audio})

    async def get_media_duration(self, media_id: str) -> dict:
        return await self.client.get(f"/get-duration/{media_id}")

    # Workflows

    async def upload_and_analyze_video(
        self,
        filename: str,
        content: bytes,
        generate_transcript: bool = False,
        generate_captions: bool = False,
        generate_summary: bool = False,
        segment_scenes: Optional[bool] = None,
        summary_model: Optional[str] = None,
        content_type: str = "video/mp4",
    ) -> dict:
        """
        Upload a video and kick off the requested analyses.
        The caption summary only starts when captions were requested too.
        """
        upload_response = await self.upload_video(filename, content, content_type)
        media_id = upload_response["media_id"]
        result: dict[str, Any] = {"upload_response": upload_response}

        if generate_transcript:
            result["transcript_response"] = await self.start_transcript_generation(media_id)

        if generate_captions:
            result["caption_response"] = await self.start_caption_generation(media_id, segment_scenes)

        if generate_summary and generate_captions:
            # Give caption generation a head start
            await asyncio.sleep(SUMMARY_START_DELAY)
            result["summary_response"] = await self.start_caption_summary(media_id, summary_model)

        return result

    async def generate_music_from_video(
        self,
        filename: str,
        content: bytes,
        music_request: MusicGenerateRequest,
        generate_transcript: bool = True,
        generate_captions: bool = True,
        generate_summary: bool = True,
    ) -> dict:
        """Upload and analyze a video, then generate music for its media id."""
        analysis = await self.upload_and_analyze_video(
            filename,
            content,
            generate_transcript=generate_transcript,
            generate_captions=generate_captions,
            generate_summary=generate_summary,
        )
        upload_response = analysis["upload_response"]
        request = music_request.model_copy(update={"media_id": upload_response["media_id"]})
        music_response = await self.generate_music(request)
        return {"upload_response": upload_response, "music_response": music_response}

    async def wait_for_music(
        self,
        job_id: str,
        wait_time_in_seconds: float = 0,
        on_status: Optional[Callable[[str], Awaitable[None]]] = None,
        max_polls: Optional[int] = None,
    ) -> list[MusicTrack]:
        """
        Poll a music job until it leaves the pending state.

        Returns:
            Generated tracks

        Raises:
            ProviderError: If the job failed, or the status could not be read at all
        """
        if wait_time_in_seconds and wait_time_in_seconds > 0:
            logger.info(f"⏳ Waiting {wait_time_in_seconds}s before checking music job {job_id}")
            await asyncio.sleep(wait_time_in_seconds)

        try:
            status = await self.get_music_status(job_id)
        except ProviderError as e:
            logger.warning(f"⚠️  Initial status check failed, waiting longer... ({e})")
            await asyncio.sleep(STATUS_RETRY_DELAY)
            status = await self.get_music_status(job_id)

        polls = 0
        while status.get("status") == AudioStatus.PENDING.value:
            if max_polls is not None and polls >= max_polls:
                raise ProviderError(f"Music job {job_id} still pending after {polls} checks", provider="audio")
            polls += 1
            if on_status:
                await on_status(status["status"])
            await asyncio.sleep(STATUS_POLL_INTERVAL)
            try:
                status = await self.get_music_status(job_id)
            except ProviderError as e:
                logger.warning(f"⚠️  Status check failed, retrying... ({e})")
                await asyncio.sleep(STATUS_ERROR_DELAY)
                continue

        if status.get("status") == AudioStatus.FAILED.value:
            raise ProviderError("Music generation failed", provider="audio")

        tracks = tracks_from_status(status)
        logger.info(f"✅ Music job {job_id} completed with {len(tracks)} track(s)")
        return tracks
