from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional, Union
import base64
import binascii
import logging

from creative_coach.api.errors import to_http_exception
from creative_coach.services.audio_service import MusicGenerateRequest, get_audio_service
from creative_coach.services.fal_service import get_fal_service
from creative_coach.services.firefly_service import (
    DEFAULT_NUM_FRAMES,
    DEFAULT_VIDEO_SIZE,
    build_video_request,
    extract_image_outputs,
    get_firefly_service,
)
from creative_coach.services.openai_service import get_openai_service
from creative_coach.services.stock_service import content_type_filters, get_stock_service, to_stock_images
from creative_coach.utils.ims_auth import ImsCredentials, ims_credentials, stock_client_id

router = APIRouter(
    tags=["Media"],
)

logger = logging.getLogger(__name__)


class FireflyImageRequest(BaseModel):
    prompt: str
    size: Optional[Union[str, Dict[str, int]]] = None
    num_variations: int = Field(default=1, ge=1, le=4)
    options: Dict[str, Any] = Field(default_factory=dict, description="Extra Firefly body fields (style, seeds, ...)")


class FireflyUploadRequest(BaseModel):
    data: str = Field(..., description="Base64-encoded image bytes")
    mime_type: str = "image/png"


class FireflyVideoRequest(BaseModel):
    prompt: str
    size: str = DEFAULT_VIDEO_SIZE
    num_frames: int = DEFAULT_NUM_FRAMES
    camera_motion: str = "camera locked down"
    shot_angle: str = "aerial shot"
    prompt_style: str = "cinematic"
    shot_size: str = "close-up shot"
    image_ids: Optional[List[str]] = None
    image_placement: float = 0.0
    wait: bool = Field(default=False, description="Poll until the video is ready")


class OpenAIImageRequest(BaseModel):
    prompt: str
    size: str = "1024x1024"
    n: int = Field(default=1, ge=1)


class FalImageRequest(BaseModel):
    prompt: str
    model: Optional[str] = None
    options: Dict[str, Any] = Field(default_factory=dict)


class MusicWaitRequest(BaseModel):
    job_id: str
    wait_time_in_seconds: float = 0
    max_polls: Optional[int] = Field(default=None, ge=1)


# Firefly


@router.post("/firefly/images")
async def generate_firefly_images(body: FireflyImageRequest, credentials: ImsCredentials = Depends(ims_credentials)):
    try:
        response = await get_firefly_service().generate(
            body.prompt,
            credentials.token,
            credentials.client_id,
            size=body.size,
            num_variations=body.num_variations,
            **body.options,
        )
        return {"images": extract_image_outputs(response), "raw": response}
    except Exception as e:
        raise to_http_exception(e, "generate Firefly images")


@router.post("/firefly/uploads")
async def upload_firefly_image(body: FireflyUploadRequest, credentials: ImsCredentials = Depends(ims_credentials)):
    try:
        try:
            content = base64.b64decode(body.data, validate=True)
        except binascii.Error as e:
            raise ValueError(f"Image data is not valid base64: {e}")
        return await get_firefly_service().upload_image(content, body.mime_type, credentials.token, credentials.client_id)
    except Exception as e:
        raise to_http_exception(e, "upload image to Firefly")


@router.post("/firefly/videos")
async def generate_firefly_video(body: FireflyVideoRequest, credentials: ImsCredentials = Depends(ims_credentials)):
    """
    Start a Firefly video job.

    Returns:
        The job response, or {"videos": [...]} once finished when `wait` is set
    """
    try:
        request = build_video_request(
            body.prompt,
            size=body.size,
            num_frames=body.num_frames,
            camera_motion=body.camera_motion,
            shot_angle=body.shot_angle,
            prompt_style=body.prompt_style,
            shot_size=body.shot_size,
            image_ids=body.image_ids,
            image_placement=body.image_placement,
        )
        service = get_firefly_service()
        job = await service.generate_video(request, credentials.token, credentials.client_id)
        if not body.wait:
            return job

        logger.info("⏳ Waiting for Firefly video job...")
        videos = await service.wait_for_video(job, credentials.token, credentials.client_id)
        return {"videos": videos}
    except Exception as e:
        raise to_http_exception(e, "generate Firefly video")


# OpenAI / Fal images


@router.post("/openai/images")
async def generate_openai_images(body: OpenAIImageRequest):
    try:
        images = await get_openai_service().generate_image(body.prompt, size=body.size, n=body.n)
        return {"images": images}
    except Exception as e:
        raise to_http_exception(e, "generate OpenAI images")


@router.post("/fal/images")
async def generate_fal_images(body: FalImageRequest):
    try:
        return await get_fal_service().generate_image(body.prompt, model=body.model, **body.options)
    except Exception as e:
        raise to_http_exception(e, "generate Fal images")


# Adobe Stock


@router.get("/stock/search")
async def search_stock(
    q: str = Query(..., min_length=1, description="Search keywords"),
    limit: int = Query(20, ge=1, le=64),
    offset: int = Query(0, ge=0),
    content_type: str = Query("photo", description="photo, illustration, vector, video, template, 3d or all"),
    client_id: str = Depends(stock_client_id),
):
    try:
        response = await get_stock_service().quick_search(
            client_id, q, limit=limit, filters=content_type_filters(content_type), offset=offset
        )
        return {"total": response.get("nb_results", 0), "images": to_stock_images(response)}
    except Exception as e:
        raise to_http_exception(e, "search Adobe Stock")


# Music


@router.post("/music/generate")
async def generate_music(body: MusicGenerateRequest):
    try:
        return await get_audio_service().generate_music(body)
    except Exception as e:
        raise to_http_exception(e, "generate music")


@router.post("/music/extend")
async def extend_music(body: MusicGenerateRequest):
    try:
        return await get_audio_service().generate_music_extension(body)
    except Exception as e:
        raise to_http_exception(e, "extend music")


@router.post("/music/variation")
async def vary_music(body: MusicGenerateRequest):
    try:
        return await get_audio_service().generate_music_variation(body)
    except Exception as e:
        raise to_http_exception(e, "generate music variation")


@router.get("/music/status/{job_id}")
async def get_music_status(job_id: str):
    try:
        return await get_audio_service().get_music_status(job_id)
    except Exception as e:
        raise to_http_exception(e, "get music status")


@router.post("/music/wait")
async def wait_for_music(body: MusicWaitRequest):
    try:
        tracks = await get_audio_service().wait_for_music(
            body.job_id, body.wait_time_in_seconds, max_polls=body.max_polls
        )
        return {"tracks": [track.model_dump() for track in tracks]}
    except Exception as e:
        raise to_http_exception(e, "wait for music")
