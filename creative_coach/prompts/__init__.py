"""
Prompt templates for the learning assistant.
All prompts are designed to return structured JSON for parsing.
"""

from creative_coach.prompts.learning import (
    APP_PREDICTION_PROMPT,
    CURRENT_PATH_SUMMARY,
    LEARNING_PATH_SYSTEM_PROMPT,
    LEARNING_PATHS_PROMPT,
    REVISION_PROMPT,
)

__all__ = [
    "APP_PREDICTION_PROMPT",
    "CURRENT_PATH_SUMMARY",
    "LEARNING_PATH_SYSTEM_PROMPT",
    "LEARNING_PATHS_PROMPT",
    "REVISION_PROMPT",
]
