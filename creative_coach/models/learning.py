"""
Pydantic models for learning paths, modules and the assistant's context.

Field names are snake_case in Python and camelCase on the wire, matching the
JSON contracts in `creative_coach/prompts/learning.py`.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ConversationMessage(CamelModel):
    role: Literal["user", "assistant"]
    content: str
    timestamp: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())


class UserProfile(CamelModel):
    selected_apps: list[str] = Field(default_factory=list)
    goals: str = ""
    files: list[str] = Field(default_factory=list)  # Uploaded file names only
    preferences: Optional[dict[str, Any]] = None


class LearningAssistantContext(CamelModel):
    conversation: list[ConversationMessage] = Field(default_factory=list)
    user_profile: UserProfile = Field(default_factory=UserProfile)
    current_step: str = "welcome"


class AppPredictions(CamelModel):
    confident: list[str] = Field(default_factory=list)
    need_help: list[str] = Field(default_factory=list)
    reasoning: str = ""
    goals: Optional[str] = None


class LearnTutorialLink(CamelModel):
    title: str
    url: str
    summary: str
    duration: str
    type: str


class HelpArticleLink(CamelModel):
    title: str
    url: str
    summary: str
    relevance: str


class InspirationLink(CamelModel):
    title: str
    url: str
    summary: str
    creator: str
    inspiration_type: str


class ModuleResources(CamelModel):
    adobe_learn_tutorials: list[LearnTutorialLink] = Field(default_factory=list)
    adobe_help_articles: list[HelpArticleLink] = Field(default_factory=list)
    community_inspiration: list[InspirationLink] = Field(default_factory=list)


class PracticeExercise(CamelModel):
    title: str
    description: str
    estimated_time: str = ""
    deliverable: str = ""


class LearningModule(CamelModel):
    id: int
    title: str
    description: str = ""
    duration: str = ""
    difficulty: str = "beginner"
    objectives: list[str] = Field(default_factory=list)
    key_advice: list[str] = Field(default_factory=list)
    project_ideas: list[str] = Field(default_factory=list)
    resources: ModuleResources = Field(default_factory=ModuleResources)
    practice_exercises: list[PracticeExercise] = Field(default_factory=list)


class LearningPath(CamelModel):
    id: int
    title: str
    description: str = ""
    level: str = "Beginner"
    duration: str = ""
    time_commitment: str = ""
    focus: str = ""
    apps: list[str] = Field(default_factory=list)
    personalized_reason: str = ""
    goal_connection: str = ""
    modules: list[LearningModule] = Field(default_factory=list)
    resources: Optional[dict[str, Any]] = None
