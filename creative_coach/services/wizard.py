"""
Server-side conversational wizard.

A session is a growing list of steps plus a cursor. Every user action appends
one or more steps (loading screens included) and moves the cursor to the
newest one; navigation walks back and forth over the existing steps, skipping
loading screens.
"""

import asyncio
import logging
import uuid
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

from creative_coach.config import settings
from creative_coach.models.learning import AppPredictions, LearningPath
from creative_coach.services.learning_assistant import LearningAssistantService

logger = logging.getLogger(__name__)

StepType = Literal[
    "welcome",
    "goal-input",
    "loading",
    "app-prediction",
    "skill-assessment",
    "learning-paths",
    "learning-path-detail",
    "revision-input",
]

ADOBE_APPS = [
    {"id": "photoshop", "name": "Photoshop", "icon": "🎨"},
    {"id": "illustrator", "name": "Illustrator", "icon": "📐"},
    {"id": "premiere", "name": "Premiere Pro", "icon": "🎬"},
    {"id": "indesign", "name": "InDesign", "icon": "📄"},
    {"id": "lightroom", "name": "Lightroom", "icon": "📸"},
    {"id": "acrobat", "name": "Acrobat", "icon": "📋"},
]

GOAL_SUGGESTIONS = [
    "Photo editing for social media",
    "Logo design and branding a new business",
    "Getting started with digital illustration in Illustrator",
    "Video editing basics",
]

LOADING_MESSAGES = {
    "goal-submit": {
        "message": "Analyzing your goals...",
        "subMessage": "I'm reviewing your learning objectives and determining the best Adobe apps for your journey.",
    },
    "prediction-confirm": {
        "message": "Perfect! Generating your learning paths...",
        "subMessage": "Creating personalized Adobe learning journeys based on your goals and the apps we identified.",
    },
    "skill-assessment": {
        "message": "Creating your learning paths...",
        "subMessage": "Building personalized Adobe learning journeys based on your skill selections.",
    },
    "path-select": {
        "message": "Great! Creating your personalized plan now...",
        "subMessage": "Analyzing your background and customizing your learning journey...",
    },
    "revise": {
        "message": "Setting up your revision workspace...",
        "subMessage": "Preparing the interface for you to customize your learning paths.",
    },
    "revision-submit": {
        "message": "Updating your learning paths...",
        "subMessage": "Applying your feedback and regenerating personalized learning journeys.",
    },
}

REVISED_TITLES = {"title": "Your Revised Learning Paths", "subtitle": "Updated based on your feedback"}
REVISION_FAILED_TITLES = {
    "title": "Learning Paths (Revision Failed)",
    "subtitle": "Unable to apply changes. Here are your original paths.",
}
REVISION_INPUT_TITLES = {"title": "Revise Your Learning Plan", "subtitle": "Tell me what you'd like to change"}

APP_IDS = {app["id"] for app in ADOBE_APPS}


class WizardError(ValueError):
    """An action that is not valid for the session's current state."""


class WizardStep(BaseModel):
    type: StepType
    content: dict[str, Any] = Field(default_factory=dict)


def predict_apps_from_goal(goal: str) -> AppPredictions:
    """Local keyword prediction used when the assistant cannot analyze the goal."""
    g = goal.lower()
    confident: list[str] = []
    need_help: list[str] = []

    if any(word in g for word in ("photo", "image", "edit", "retouch", "filter", "social media")):
        confident.append("photoshop")
        need_help.append("lightroom")
    if any(word in g for word in ("logo", "brand", "graphic", "vector", "illustration", "poster")):
        confident.append("illustrator")
        need_help.append("photoshop")
    if any(word in g for word in ("video", "movie", "film", "edit", "youtube", "content")):
        confident.append("premiere")

    if not confident:
        confident.append("photoshop")
        need_help += ["illustrator", "premiere"]

    return AppPredictions(confident=confident, need_help=need_help, goals=goal)


def _dump_paths(paths: list[LearningPath]) -> list[dict[str, Any]]:
    return [path.model_dump(by_alias=True) for path in paths]


class WizardSession:
    def __init__(self, session_id: Optional[str] = None, assistant: Optional[LearningAssistantService] = None):
        self.id = session_id or str(uuid.uuid4())
        self.assistant = assistant or LearningAssistantService()
        self.steps: list[WizardStep] = [WizardStep(type="welcome")]
        self.current_step_index = 0
        self.goal = ""
        self.selected_apps: list[str] = []
        self.predictions: Optional[AppPredictions] = None
        self.learning_paths: list[LearningPath] = []
        self.selected_path: Optional[LearningPath] = None
        self.revision_feedback = ""
        self.loading_message: Optional[dict[str, str]] = None

    @property
    def current_step(self) -> WizardStep:
        return self.steps[self.current_step_index]

    def add_step(self, step_type: str, content: Optional[dict[str, Any]] = None) -> WizardStep:
        """Append a step and move the cursor to it."""
        step = WizardStep(type=step_type, content=content or {})
        self.steps.append(step)
        self.current_step_index = len(self.steps) - 1
        self.loading_message = step.content if step_type == "loading" else None
        logger.debug(f"   Session {self.id[:8]}: step {self.current_step_index} → {step_type}")
        return step

    def _add_loading(self, key: str) -> None:
        self.add_step("loading", dict(LOADING_MESSAGES[key]))

    # Navigation

    def navigate_up(self) -> WizardStep:
        index = self.current_step_index - 1
        while index >= 0 and self.steps[index].type == "loading":
            index -= 1
        if index >= 0:
            self.current_step_index = index
        return self.current_step

    def navigate_down(self) -> WizardStep:
        index = self.current_step_index + 1
        while index < len(self.steps) and self.steps[index].type == "loading":
            index += 1
        if index < len(self.steps):
            self.current_step_index = index
        return self.current_step

    # Actions

    def welcome_continue(self) -> WizardStep:
        return self.add_step("goal-input", self.assistant.get_static_title_subtitle("goal-input"))

    async def goal_submit(self, goal: str, files: Optional[list[str]] = None) -> WizardStep:
        if not goal or not goal.strip():
            raise WizardError("Goal text is required")

        self.goal = goal.strip()
        self._add_loading("goal-submit")

        try:
            predictions = await self.assistant.analyze_goals_and_predict_apps(self.goal, files)
            titles = self.assistant.get_static_title_subtitle("app-prediction")
        except Exception as e:
            logger.error(f"❌ Goal analysis failed, using local prediction: {e}")
            predictions = predict_apps_from_goal(self.goal)
            titles = {}

        self.predictions = predictions
        return self.add_step("app-prediction", {"predictions": predictions.model_dump(by_alias=True), **titles})

    async def _generate_paths(self, predictions: AppPredictions, loading_key: str, title_step: str) -> WizardStep:
        self._add_loading(loading_key)
        try:
            paths = await self.assistant.generate_personalized_learning_paths(predictions)
            titles = self.assistant.get_static_title_subtitle(title_step, predictions)
            self.learning_paths = paths
        except Exception as e:
            logger.error(f"❌ Learning path generation failed: {e}")
            return self.add_step("learning-paths", {"paths": _dump_paths(self.learning_paths)})

        return self.add_step("learning-paths", {"paths": _dump_paths(paths), **titles})

    async def prediction_confirm(self) -> WizardStep:
        if self.predictions is None:
            raise WizardError("No app predictions to confirm")

        self.selected_apps = list(self.predictions.confident)
        self.assistant.update_user_profile(selected_apps=self.selected_apps)
        return await self._generate_paths(self.predictions, "prediction-confirm", "learning-paths-predicted")

    def prediction_reject(self) -> WizardStep:
        return self.add_step("skill-assessment", self.assistant.get_static_title_subtitle("skill-assessment"))

    def app_toggle(self, app_id: str) -> list[str]:
        if app_id not in APP_IDS:
            raise WizardError(f"Unknown app: {app_id}")
        if app_id in self.selected_apps:
            self.selected_apps = [app for app in self.selected_apps if app != app_id]
        else:
            self.selected_apps = [*self.selected_apps, app_id]
        return self.selected_apps

    async def skill_assessment_continue(self) -> WizardStep:
        if not self.selected_apps:
            raise WizardError("Select at least one app")

        self.assistant.update_user_profile(selected_apps=self.selected_apps)
        manual = AppPredictions(confident=list(self.selected_apps), need_help=[], goals=self.goal or None)
        return await self._generate_paths(manual, "skill-assessment", "learning-paths-manual")

    async def path_select(self, path_id: int) -> WizardStep:
        path = next((p for p in self.learning_paths if p.id == path_id), None)
        if path is None:
            raise WizardError(f"Unknown learning path: {path_id}")

        self._add_loading("path-select")
        if settings.wizard_step_delay_seconds:
            await asyncio.sleep(settings.wizard_step_delay_seconds)

        self.selected_path = path
        return self.add_step("learning-path-detail", {"path": path.model_dump(by_alias=True)})

    async def revise(self) -> WizardStep:
        self._add_loading("revise")
        if settings.wizard_revision_delay_seconds:
            await asyncio.sleep(settings.wizard_revision_delay_seconds)

        return self.add_step(
            "revision-input",
            {"currentPaths": _dump_paths(self.learning_paths), **REVISION_INPUT_TITLES},
        )

    async def revision_submit(self, feedback: str) -> WizardStep:
        if not feedback or not feedback.strip():
            raise WizardError("Revision feedback is required")

        self.revision_feedback = feedback.strip()
        logger.info(f"📝 Processing revision request: {self.revision_feedback}")
        self._add_loading("revision-submit")

        try:
            revised = await self.assistant.generate_revised_learning_paths(
                self.revision_feedback, self.learning_paths, self.predictions
            )
        except Exception as e:
            logger.error(f"❌ Revision failed, keeping original paths: {e}")
            return self.add_step("learning-paths", {"paths": _dump_paths(self.learning_paths), **REVISION_FAILED_TITLES})

        self.learning_paths = revised
        return self.add_step("learning-paths", {"paths": _dump_paths(revised), **REVISED_TITLES})

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "currentStepIndex": self.current_step_index,
            "currentStep": self.current_step.model_dump(),
            "steps": [step.model_dump() for step in self.steps],
            "goal": self.goal,
            "selectedApps": self.selected_apps,
            "predictions": self.predictions.model_dump(by_alias=True) if self.predictions else None,
            "learningPaths": _dump_paths(self.learning_paths),
            "selectedPath": self.selected_path.model_dump(by_alias=True) if self.selected_path else None,
            "revisionFeedback": self.revision_feedback,
            "loadingMessage": self.loading_message,
        }


class WizardSessionStore:
    """In-memory sessions keyed by uuid. Nothing survives a restart."""

    def __init__(self):
        self._sessions: dict[str, WizardSession] = {}

    def create(self) -> WizardSession:
        session = WizardSession()
        self._sessions[session.id] = session
        logger.info(f"🧭 Wizard session created: {session.id}")
        return session

    def get(self, session_id: str) -> Optional[WizardSession]:
        return self._sessions.get(session_id)

    def delete(self, session_id: str) -> bool:
        return self._sessions.pop(session_id, None) is not None

    def __len__(self) -> int:
        return len(self._sessions)


# Lazy singleton instance
_wizard_store_instance = None


def get_wizard_store() -> WizardSessionStore:
    global _wizard_store_instance

    if _wizard_store_instance is None:
        _wizard_store_instance = WizardSessionStore()
        logger.info("✅ WizardSessionStore ready")

    return _wizard_store_instance
