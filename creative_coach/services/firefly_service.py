"""
Adobe Firefly wrapper for image and video generation.
Callers pass the IMS access token and client id on every call.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional, Union

from creative_coach.config import settings
from creative_coach.services.api_client import ApiClient, ProviderResponseError
from creative_coach.services.api_registry import get_or_register_api

logger = logging.getLogger(__name__)

IMAGES_GENERATE_PATH = "/v3/images/generate"
VIDEOS_GENERATE_PATH = "/v3/videos/generate"
STORAGE_IMAGE_PATH = "/v2/storage/image"

FIREFLY_DIMENSIONS = {
    "square": {"width": 2048, "height": 2048},
    "landscape": {"width": 2304, "height": 1792},
    "portrait": {"width": 1792, "height": 2304},
    "widescreen": {"width": 2688, "height": 1536},
}

VIDEO_DIMENSIONS = {
    "HD (1080p)": {"width": 1920, "height": 1080},
    "HD (720p)": {"width": 1280, "height": 720},
    "SD (480p)": {"width": 854, "height": 480},
    "Portrait Mobile": {"width": 540, "height": 960},
}

CAMERA_MOTION_OPTIONS = (
    "camera pan left",
    "camera pan right",
    "camera zoom in",
    "camera zoom out",
    "camera tilt up",
    "camera tilt down",
    "camera locked down",
    "camera handheld",
)

SHOT_ANGLE_OPTIONS = (
    "aerial shot",
    "eye_level shot",
    "high angle shot",
    "low angle shot",
    "top-down shot",
)

PROMPT_STYLE_OPTIONS = (
    "anime",
    "3d",
    "fantasy",
    "cinematic",
    "claymation",
    "line art",
    "stop motion",
    "2d",
    "vector art",
    "black and white",
)

SHOT_SIZE_OPTIONS = (
    "close-up shot",
    "extreme close-up",
    "medium shot",
    "long shot",
    "extreme long shot",
)

IMAGE_PLACEMENT_OPTIONS = (
    {"id": "0", "name": "Start Frame (0%)", "value": 0.0},
    {"id": "0.5", "name": "Middle Frame (50%)", "value": 0.5},
    {"id": "1", "name": "End Frame (100%)", "value": 1.0},
)

DEFAULT_VIDEO_SIZE = "Portrait Mobile"
DEFAULT_NUM_FRAMES = 128
DEFAULT_NEGATIVE_PROMPT = "cartoon, vector art, & bad aesthetics & poor aesthetic"

# Lazy singleton instance
_firefly_service_instance = None


def get_firefly_service() -> "FireflyService":
    global _firefly_service_instance

    if _firefly_service_instance is None:
        logger.info("🔥 Initializing FireflyService (first use)...")
        _firefly_service_instance = FireflyService()
        logger.info("✅ FireflyService ready")

    return _firefly_service_instance


def _check_option(name: str, value: str, allowed: tuple) -> str:
    if value not in allowed:
        raise ValueError(f"Invalid {name} '{value}'. Allowed: {', '.join(allowed)}")
    return value


def build_video_request(
    prompt: str,
    size: str = DEFAULT_VIDEO_SIZE,
    num_frames: int = DEFAULT_NUM_FRAMES,
    camera_motion: str = "camera locked down",
    shot_angle: str = "aerial shot",
    prompt_style: str = "cinematic",
    shot_size: str = "close-up shot",
    negative_prompt: str = DEFAULT_NEGATIVE_PROMPT,
    image_ids: Optional[list[str]] = None,
    image_placement: float = 0.0,
    locale: str = "en-US",
) -> dict[str, Any]:
    """
    Build and validate a video generation request body.

    Raises:
        ValueError: On empty prompt or unknown option values
    """
    if not prompt or not prompt.strip():
        raise ValueError("Prompt is required for video generation")
    if size not in VIDEO_DIMENSIONS:
        raise ValueError(f"Invalid video size '{size}'. Allowed: {', '.join(VIDEO_DIMENSIONS)}")
    if num_frames <= 0:
        raise ValueError("num_frames must be positive")
    placements = [option["value"] for option in IMAGE_PLACEMENT_OPTIONS]
    if image_placement not in placements:
        raise ValueError(f"Invalid image placement {image_placement}. Allowed: {placements}")

    request: dict[str, Any] = {
        "prompt": prompt,
        "sizes": [{**VIDEO_DIMENSIONS[size], "numFrames": num_frames}],
        "videoSettings": {
            "cameraMotion": _check_option("camera motion", camera_motion, CAMERA_MOTION_OPTIONS),
            "shotAngle": _check_option("shot angle", shot_angle, SHOT_ANGLE_OPTIONS),
            "promptStyle": _check_option("prompt style", prompt_style, PROMPT_STYLE_OPTIONS),
            "shotSize": _check_option("shot size", shot_size, SHOT_SIZE_OPTIONS),
        },
        "locale": locale,
        "negativePrompt": negative_prompt,
        "output": {"storeInputs": False},
    }

    if image_ids:
        request["image"] = {
            "conditions": [
                {"placement": {"start": image_placement}, "source": {"id": image_id}}
                for image_id in image_ids
            ]
        }

    return request


def extract_status_url(response: dict) -> Optional[str]:
    """Status URL from a generate/status response (`statusUrl` or `links.result.href`)."""
    href = (response.get("links") or {}).get("result", {}).get("href")
    return href or response.get("statusUrl")


def extract_video_outputs(status: dict) -> list[dict]:
    """[{url, seed}] from a finished video job."""
    outputs = status.get("outputs") or (status.get("result") or {}).get("outputs") or []
    videos = []
    for output in outputs:
        video = output.get("video") or {}
        videos.append({"url": video.get("presignedUrl") or video.get("url") or "", "seed": output.get("seed")})
    return videos


def extract_image_outputs(response: dict) -> list[dict]:
    """[{url, seed}] from an image generation response."""
    images = []
    for output in response.get("outputs") or []:
        image = output.get("image") or {}
        images.append({"url": image.get("presignedUrl") or image.get("url") or "", "seed": output.get("seed")})
    return images


class FireflyService:
    def __init__(self, client: Optional[ApiClient] = None):
        self.client = client or get_or_register_api("firefly")
        self.poll_interval = settings.firefly_poll_interval

    @staticmethod
    def _auth_headers(token: str, client_id: str) -> dict[str, str]:
        if not token:
            raise ValueError("An IMS access token is required for Firefly requests")
        if not client_id:
            raise ValueError("An IMS client id is required for Firefly requests")
        return {
            "Authorization": f"Bearer {token}",
            "x-api-key": client_id,
            "Content-Type": "application/json",
        }

    async def generate(
        self,
        prompt: str,
        token: str,
        client_id: str,
        size: Union[str, dict, None] = None,
        num_variations: int = 1,
        **options: Any,
    ) -> dict:
        """
        Generate images from a text prompt.

        Args:
            size: A FIREFLY_DIMENSIONS key or an explicit {"width", "height"}

        Returns:
            Firefly response with outputs[{image: {presignedUrl|url}, seed}]
        """
        if not prompt or not prompt.strip():
            raise ValueError("Prompt is required for image generation")

        if isinstance(size, str):
            if size not in FIREFLY_DIMENSIONS:
                raise ValueError(f"Invalid size '{size}'. Allowed: {', '.join(FIREFLY_DIMENSIONS)}")
            size = FIREFLY_DIMENSIONS[size]

        body = {"prompt": prompt, "numVariations": num_variations, **options}
        if size:
            body["size"] = size

        response = await self.client.post(
            IMAGES_GENERATE_PATH, json=body, headers=self._auth_headers(token, client_id)
        )
        if not isinstance(response, dict) or "outputs" not in response:
            raise ProviderResponseError("Invalid response format from Firefly API", provider="firefly")

        logger.info(f"✅ Firefly generated {len(response['outputs'])} image(s)")
        return response

    async def upload_image(self, content: bytes, mime_type: str, token: str, client_id: str) -> dict:
        """Upload an image to Firefly storage. Returns {"images": [{"id": ...}]}."""
        if not mime_type.startswith("image/"):
            raise ValueError("Only image files can be uploaded to Firefly")

        headers = self._auth_headers(token, client_id)
        headers["Content-Type"] = mime_type
        response = await self.client.post(STORAGE_IMAGE_PATH, content=content, headers=headers)

        if not isinstance(response, dict) or not response.get("images"):
            raise ProviderResponseError("Firefly upload returned no image id", provider="firefly")
        return response

    async def upload_video_image(self, content: bytes, mime_type: str, token: str, client_id: str) -> dict:
        """Upload a conditioning image for video generation."""
        response = await self.upload_image(content, mime_type, token, client_id)
        logger.info(f"✅ Uploaded video conditioning image: {response['images'][0].get('id')}")
        return response

    async def generate_video(self, request: dict, token: str, client_id: str) -> dict:
        """
        Start a video generation job.

        Args:
            request: Body from build_video_request()

        Returns:
            Job response with a status URL (links.result.href or statusUrl)
        """
        response = await self.client.post(
            VIDEOS_GENERATE_PATH, json=request, headers=self._auth_headers(token, client_id)
        )
        if not isinstance(response, dict) or not extract_status_url(response):
            raise ProviderResponseError("Firefly video job returned no status URL", provider="firefly")
        return response

    async def check_video_status(self, url: str, token: str, client_id: str) -> dict:
        return await self.client.get(url, headers=self._auth_headers(token, client_id))

    async def wait_for_video(
        self,
        initial_response: dict,
        token: str,
        client_id: str,
        poll_interval: Optional[float] = None,
        on_progress: Optional[Callable[[float], Awaitable[None]]] = None,
    ) -> list[dict]:
        """
        Poll a video job until it stops reporting progress below 100.

        Returns:
            [{url, seed}] for each generated video
        """
        interval = self.poll_interval if poll_interval is None else poll_interval
        current_url = extract_status_url(initial_response)
        status = await self.check_video_status(current_url, token, client_id)

        while "progress" in status and status["progress"] < 100 and not extract_video_outputs(status):
            logger.debug(f"⏳ Firefly video progress: {status['progress']}%")
            if on_progress:
                await on_progress(status["progress"])
            await asyncio.sleep(interval)

            # Follow the newest result URL when the job hands one back
            current_url = extract_status_url(status) or current_url
            status = await self.check_video_status(current_url, token, client_id)

        if status.get("status") == "failed":
            raise ProviderResponseError("Firefly video generation failed", provider="firefly")

        videos = extract_video_outputs(status)
        logger.info(f"✅ Firefly video job finished with {len(videos)} output(s)")
        return videos
