"""
Learning path data models.
Shared by the learning assistant, the wizard and the HTTP API.
"""

from creative_coach.models.learning import (
    AppPredictions,
    ConversationMessage,
    LearningAssistantContext,
    LearningModule,
    LearningPath,
    ModuleResources,
    PracticeExercise,
    UserProfile,
)

__all__ = [
    "AppPredictions",
    "ConversationMessage",
    "LearningAssistantContext",
    "LearningModule",
    "LearningPath",
    "ModuleResources",
    "PracticeExercise",
    "UserProfile",
]
