from fastapi import APIRouter
from pydantic import BaseModel, Field
from typing import List, Optional
import logging

from creative_coach.api.errors import to_http_exception
from creative_coach.models.learning import AppPredictions, CamelModel, LearningPath
from creative_coach.services.learning_assistant import get_learning_assistant

router = APIRouter(
    tags=["Learning Assistant"],
)

logger = logging.getLogger(__name__)


class PredictAppsRequest(BaseModel):
    goals: str = Field(..., description="Free-text learning goals", min_length=1)
    files: Optional[List[str]] = Field(default=None, description="Names of uploaded files")


class GeneratePathsRequest(CamelModel):
    predictions: Optional[AppPredictions] = None
    step: str = "learning-paths-predicted"


class RevisePathsRequest(CamelModel):
    feedback: str = Field(..., min_length=1)
    current_paths: List[LearningPath] = Field(default_factory=list)
    predictions: Optional[AppPredictions] = None


class TutorialSearchRequest(BaseModel):
    goals: str = Field(..., min_length=1)
    apps: List[str] = Field(default_factory=list)
    difficulty: str = "beginner"


class ResourcesRequest(BaseModel):
    goals: str
    apps: List[str] = Field(default_factory=list)
    difficulty: str = "beginner"
    focus: str = ""


class TitleRequest(CamelModel):
    step: str
    predictions: Optional[AppPredictions] = None


class FastModeRequest(BaseModel):
    enabled: bool


@router.post("/predict-apps")
async def predict_apps(body: PredictAppsRequest):
    """Predict confident and need-help apps for the given goals."""
    predictions = await get_learning_assistant().analyze_goals_and_predict_apps(body.goals, body.files)
    return predictions.model_dump(by_alias=True)


@router.post("/paths")
async def generate_paths(body: GeneratePathsRequest):
    """
    Generate personalized learning paths.

    Returns:
        {"paths": [...], "title": str, "subtitle": str}
    """
    assistant = get_learning_assistant()
    paths = await assistant.generate_personalized_learning_paths(body.predictions)
    titles = assistant.get_static_title_subtitle(body.step, body.predictions)
    return {"paths": [path.model_dump(by_alias=True) for path in paths], **titles}


@router.post("/paths/revise")
async def revise_paths(body: RevisePathsRequest):
    assistant = get_learning_assistant()
    paths = await assistant.generate_revised_learning_paths(body.feedback, body.current_paths, body.predictions)
    return {"paths": [path.model_dump(by_alias=True) for path in paths]}


@router.post("/titles")
def get_step_title(body: TitleRequest):
    return get_learning_assistant().get_static_title_subtitle(body.step, body.predictions)


@router.post("/tutorials/search")
def search_tutorials(body: TutorialSearchRequest):
    result = get_learning_assistant().search_tutorials(body.goals, body.apps, body.difficulty)
    return result.model_dump()


@router.post("/resources")
def get_learning_resources(body: ResourcesRequest):
    try:
        resources = get_learning_assistant().get_learning_resources(
            body.goals, body.apps, body.difficulty, body.focus
        )
        return resources.model_dump()
    except Exception as e:
        raise to_http_exception(e, "get learning resources")


@router.get("/context")
def get_context():
    return get_learning_assistant().get_context().model_dump(by_alias=True)


@router.post("/reset")
def reset_context():
    get_learning_assistant().reset()
    return {"success": True}


@router.get("/cache/stats")
def get_cache_stats():
    return get_learning_assistant().get_cache_stats()


@router.delete("/cache")
def clear_cache():
    get_learning_assistant().clear_cache()
    return {"success": True}


@router.put("/fast-mode")
def set_fast_mode(body: FastModeRequest):
    assistant = get_learning_assistant()
    assistant.set_fast_mode(body.enabled)
    return {"fastMode": assistant.fast_mode}
