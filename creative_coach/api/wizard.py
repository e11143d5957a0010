from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field
from typing import List, Literal, Optional
import logging

from creative_coach.services.wizard import (
    ADOBE_APPS,
    GOAL_SUGGESTIONS,
    WizardError,
    WizardSession,
    get_wizard_store,
)

router = APIRouter(
    tags=["Wizard"],
)

logger = logging.getLogger(__name__)


class WizardAction(BaseModel):
    action: Literal[
        "welcome-continue",
        "goal-submit",
        "prediction-confirm",
        "prediction-reject",
        "app-toggle",
        "skill-assessment-continue",
        "path-select",
        "revise",
        "revision-submit",
    ] = Field(..., description="User action on the current step")
    goal: Optional[str] = Field(default=None, description="Goal text for goal-submit")
    files: Optional[List[str]] = Field(default=None, description="Uploaded file names for goal-submit")
    app_id: Optional[str] = Field(default=None, alias="appId", description="App id for app-toggle")
    path_id: Optional[int] = Field(default=None, alias="pathId", description="Path id for path-select")
    feedback: Optional[str] = Field(default=None, description="Revision feedback for revision-submit")

    model_config = {"populate_by_name": True}


class NavigateRequest(BaseModel):
    direction: Literal["up", "down"]


def _get_session(session_id: str) -> WizardSession:
    session = get_wizard_store().get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Wizard session not found")
    return session


@router.get("/options")
def get_options():
    """Apps and goal suggestions shown by the wizard."""
    return {"apps": ADOBE_APPS, "goalSuggestions": GOAL_SUGGESTIONS}


@router.post("/sessions")
def create_session():
    session = get_wizard_store().create()
    return session.to_dict()


@router.get("/sessions/{session_id}")
def get_session(session_id: str):
    return _get_session(session_id).to_dict()


@router.delete("/sessions/{session_id}")
def delete_session(session_id: str):
    if not get_wizard_store().delete(session_id):
        raise HTTPException(status_code=404, detail="Wizard session not found")
    return {"success": True}


@router.post("/sessions/{session_id}/navigate")
def navigate(session_id: str, body: NavigateRequest):
    session = _get_session(session_id)
    if body.direction == "up":
        session.navigate_up()
    else:
        session.navigate_down()
    return session.to_dict()


@router.post("/sessions/{session_id}/actions")
async def perform_action(session_id: str, body: WizardAction):
    """
    Apply a user action to a wizard session.

    Args:
        session_id: Wizard session id
        body: Action name plus the field that action needs

    Returns:
        Full session state after the action
    """
    session = _get_session(session_id)
    logger.info(f"🧭 Wizard action '{body.action}' on session {session_id}")

    try:
        if body.action == "welcome-continue":
            session.welcome_continue()
        elif body.action == "goal-submit":
            await session.goal_submit(body.goal or "", body.files)
        elif body.action == "prediction-confirm":
            await session.prediction_confirm()
        elif body.action == "prediction-reject":
            session.prediction_reject()
        elif body.action == "app-toggle":
            session.app_toggle(body.app_id or "")
        elif body.action == "skill-assessment-continue":
            await session.skill_assessment_continue()
        elif body.action == "path-select":
            if body.path_id is None:
                raise WizardError("pathId is required")
            await session.path_select(body.path_id)
        elif body.action == "revise":
            await session.revise()
        elif body.action == "revision-submit":
            await session.revision_submit(body.feedback or "")
    except WizardError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return session.to_dict()
