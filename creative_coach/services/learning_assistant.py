"""
Learning assistant: turns a user's goals into app predictions and learning paths.

Claude does the generation; every call falls back to the keyword templates in
learning_templates when the request or the JSON parsing fails.
"""

import logging
import time
from typing import Any, Optional

from creative_coach.config import settings
from creative_coach.models.learning import (
    AppPredictions,
    ConversationMessage,
    HelpArticleLink,
    InspirationLink,
    LearningAssistantContext,
    LearningPath,
    LearnTutorialLink,
    ModuleResources,
)
from creative_coach.prompts.learning import (
    APP_PREDICTION_PROMPT,
    CURRENT_PATH_SUMMARY,
    LEARNING_PATH_SYSTEM_PROMPT,
    LEARNING_PATHS_PROMPT,
    REVISION_PROMPT,
)
from creative_coach.services.claude_service import get_claude_service
from creative_coach.services.learning_templates import (
    DEFAULT_PATHS_TITLE,
    STATIC_TITLES,
    add_standard_modules,
    create_revised_fallback_paths,
    create_structured_fallback_paths,
    fallback_prediction,
    generate_personalized_subtitle,
)
from creative_coach.services.tutorial_service import (
    LearningResources,
    TutorialFilters,
    TutorialSearchResult,
    get_tutorial_service,
)
from creative_coach.services.web_search import search_adobe_community, search_adobe_help, search_adobe_learn
from creative_coach.utils.json_parser import parse_llm_json_response

logger = logging.getLogger(__name__)

TUTORIAL_SOURCES = ["adobe-official", "youtube-adobe", "adobe-community"]

# Lazy singleton instance
_learning_assistant_instance = None


def get_learning_assistant() -> "LearningAssistantService":
    """
    Get or create singleton LearningAssistantService instance (lazy initialization).

    Returns:
        LearningAssistantService: Singleton instance
    """
    global _learning_assistant_instance

    if _learning_assistant_instance is None:
        logger.info("🎓 Initializing LearningAssistantService (first use)...")
        _learning_assistant_instance = LearningAssistantService()
        logger.info(f"✅ LearningAssistantService ready (fast mode: {_learning_assistant_instance.fast_mode})")

    return _learning_assistant_instance


class LearningAssistantService:
    def __init__(self, fast_mode: Optional[bool] = None):
        self.context = LearningAssistantContext()
        self.path_cache: dict[str, list[LearningPath]] = {}
        self.fast_mode = settings.learning_fast_mode if fast_mode is None else fast_mode

    # Context

    def get_context(self) -> LearningAssistantContext:
        return self.context

    def update_user_profile(self, **updates: Any) -> None:
        """Merge the given fields (snake_case) into the user profile."""
        self.context.user_profile = self.context.user_profile.model_copy(update=updates)

    def add_message(self, role: str, content: str) -> None:
        self.context.conversation.append(ConversationMessage(role=role, content=content))

    def reset(self) -> None:
        self.context = LearningAssistantContext()

    # Cache / mode

    def set_fast_mode(self, enabled: bool) -> None:
        self.fast_mode = enabled
        logger.info(f"⚡ Fast mode {'enabled' if enabled else 'disabled'}")

    def clear_cache(self) -> None:
        self.path_cache.clear()
        logger.info("🧹 Learning path cache cleared")

    def get_cache_stats(self) -> dict[str, Any]:
        return {"size": len(self.path_cache), "keys": list(self.path_cache.keys())}

    # Step headers

    def get_static_title_subtitle(self, step: str, predictions: Optional[AppPredictions] = None) -> dict[str, str]:
        """
        Title and subtitle for a wizard step.
        Learning-paths steps (and unknown steps) get a subtitle personalized to the goals.
        """
        goals = (predictions.goals if predictions else None) or self.context.user_profile.goals
        selected_apps = self.context.user_profile.selected_apps

        static = STATIC_TITLES.get(step)
        if static is None:
            return {
                "title": DEFAULT_PATHS_TITLE,
                "subtitle": generate_personalized_subtitle(goals, predictions, selected_apps),
            }
        if "learning-paths" in step:
            return {
                "title": static["title"],
                "subtitle": generate_personalized_subtitle(goals, predictions, selected_apps),
            }
        return dict(static)

    # LLM helpers

    async def _ask_claude(self, prompt: str, max_tokens: int, temperature: float) -> str:
        return await get_claude_service().send_text_message(
            prompt,
            LEARNING_PATH_SYSTEM_PROMPT,
            max_tokens=max_tokens,
            temperature=temperature,
        )

    # Predictions

    async def analyze_goals_and_predict_apps(self, goals: str, files: Optional[list[str]] = None) -> AppPredictions:
        """
        Predict which Adobe apps the user is confident with and which they need to learn.

        Args:
            goals: Free-text learning goals
            files: Names of uploaded files, if any

        Returns:
            AppPredictions (keyword fallback when the LLM call or parsing fails)
        """
        self.update_user_profile(goals=goals, files=files or [])
        files_line = f"\nFiles uploaded: {', '.join(files)}" if files else ""
        prompt = APP_PREDICTION_PROMPT.format(goals=goals, files_line=files_line)

        try:
            start_time = time.time()
            response = await self._ask_claude(prompt, max_tokens=300, temperature=0.3)
            parsed = parse_llm_json_response(response, expected_type="object")
            predictions = AppPredictions.model_validate(parsed).model_copy(update={"goals": goals})
            logger.info(
                f"✅ App predictions in {time.time() - start_time:.2f}s: "
                f"confident={predictions.confident}, needHelp={predictions.need_help}"
            )
            return predictions
        except Exception as e:
            logger.error(f"❌ App prediction failed, using keyword fallback: {e}")
            return fallback_prediction(goals).model_copy(update={"goals": goals})

    # Paths

    def _cache_key(self, goals: str, apps_to_learn: list[str], confident_apps: list[str]) -> str:
        return f"{goals.lower()[:50]}-{','.join(apps_to_learn)}-{','.join(confident_apps)}"

    async def generate_personalized_learning_paths(self, predictions: Optional[AppPredictions] = None) -> list[LearningPath]:
        """
        Two learning paths for the current goals, cached per goals/apps combination.
        Resources are attached from web search unless fast mode is on.
        """
        profile = self.context.user_profile
        goals = (predictions.goals if predictions else None) or profile.goals
        apps_to_learn = predictions.need_help if predictions is not None else profile.selected_apps
        confident_apps = predictions.confident if predictions else []

        cache_key = self._cache_key(goals, apps_to_learn, confident_apps)
        if cache_key in self.path_cache:
            logger.info(f"⚡ Learning paths served from cache: {cache_key}")
            return self.path_cache[cache_key]

        prompt = LEARNING_PATHS_PROMPT.format(
            goals=goals,
            apps_to_learn=", ".join(apps_to_learn),
            confident_apps=", ".join(confident_apps) or "None specified",
        )

        try:
            start_time = time.time()
            response = await self._ask_claude(prompt, max_tokens=500, temperature=0.3)
            basic_paths = parse_llm_json_response(response, expected_type="array")
            if not basic_paths:
                raise ValueError("LLM returned no learning paths")
            paths = [
                add_standard_modules(basic_path, index, apps_to_learn, goals)
                for index, basic_path in enumerate(basic_paths)
            ]
            logger.info(f"✅ Generated {len(paths)} learning paths in {time.time() - start_time:.2f}s")
        except Exception as e:
            logger.error(f"❌ Learning path generation failed, using structured fallback: {e}")
            paths = create_structured_fallback_paths(goals, apps_to_learn)

        self.path_cache[cache_key] = paths

        if self.fast_mode:
            return paths
        return await self.enhance_paths_with_real_content(paths)

    async def enhance_paths_with_real_content(self, paths: list[LearningPath]) -> list[LearningPath]:
        """Fill each module's resources from the Adobe Learn/Help/Community searches."""
        goals = self.context.user_profile.goals
        enhanced = []
        for path in paths:
            try:
                enhanced.append(self._enhance_path(path, goals))
            except Exception as e:
                logger.warning(f"⚠️  Could not enhance path '{path.title}': {e}")
                enhanced.append(path)
        return enhanced

    def _enhance_path(self, path: LearningPath, goals: str) -> LearningPath:
        app = path.apps[0] if path.apps else "photoshop"
        modules = []
        for index, module in enumerate(path.modules):
            learn = search_adobe_learn(module.title, app, module.difficulty, goals, index)
            help_articles = search_adobe_help(module.title, app, goals, index)
            community = search_adobe_community(module.title, app, goals, index)

            resources = ModuleResources(
                adobe_learn_tutorials=[
                    LearnTutorialLink(
                        title=item.title,
                        url=item.url,
                        summary=item.summary,
                        duration=item.duration,
                        type=item.type,
                    )
                    for item in learn
                ],
                adobe_help_articles=[
                    HelpArticleLink(
                        title=item.title,
                        url=item.url,
                        summary=item.summary,
                        relevance=f"Highly relevant for {module.title} - {item.type} documentation",
                    )
                    for item in help_articles
                ],
                community_inspiration=[
                    InspirationLink(
                        title=item.title,
                        url=item.url,
                        summary=item.summary,
                        creator=item.author or "Adobe Community",
                        inspiration_type=item.type,
                    )
                    for item in community
                ],
            )
            modules.append(module.model_copy(update={"resources": resources}))

        logger.debug(f"   Enhanced {len(modules)} modules for '{path.title}'")
        return path.model_copy(update={"modules": modules})

    async def generate_revised_learning_paths(
        self,
        feedback: str,
        current_paths: list[LearningPath],
        predictions: Optional[AppPredictions] = None,
    ) -> list[LearningPath]:
        """
        Three revised paths addressing the user's feedback.

        Args:
            feedback: What the user wants changed
            current_paths: Paths currently shown to the user
            predictions: App predictions the current paths were built from

        Returns:
            List of revised LearningPath (feedback-adjusted templates on failure)
        """
        goals = (predictions.goals if predictions else None) or self.context.user_profile.goals
        apps_to_learn = predictions.need_help if predictions is not None else self.context.user_profile.selected_apps
        confident_apps = predictions.confident if predictions else []

        current_summary = "".join(
            CURRENT_PATH_SUMMARY.format(
                number=index + 1,
                title=path.title,
                description=path.description,
                level=path.level,
                duration=path.duration,
                focus=path.focus,
                apps=", ".join(path.apps),
            )
            for index, path in enumerate(current_paths)
        )
        prompt = REVISION_PROMPT.format(
            goals=goals,
            confident_apps=", ".join(confident_apps) or "none specified",
            apps_to_learn=", ".join(apps_to_learn) or "general Adobe skills",
            current_paths=current_summary,
            feedback=feedback,
        )

        try:
            response = await self._ask_claude(prompt, max_tokens=1500, temperature=0.7)
            parsed = parse_llm_json_response(response, expected_type="array")
            paths = [LearningPath.model_validate(item) for item in parsed]
            if not paths:
                raise ValueError("LLM returned no revised paths")
            logger.info(f"✅ Generated {len(paths)} revised learning paths")
        except Exception as e:
            logger.error(f"❌ Revision failed, using feedback-adjusted fallback: {e}")
            paths = create_revised_fallback_paths(feedback, goals, apps_to_learn)

        return await self.enhance_paths_with_real_content(paths)

    # Tutorials

    def search_tutorials(self, goals: str, apps: Optional[list[str]] = None, difficulty: str = "beginner") -> TutorialSearchResult:
        apps = apps or self.context.user_profile.selected_apps
        filters = TutorialFilters(max_results=10, min_quality_score=6, sources=TUTORIAL_SOURCES)
        try:
            return get_tutorial_service().search_tutorials(goals, apps, difficulty, filters)
        except Exception as e:
            logger.error(f"❌ Tutorial search failed: {e}")
            return TutorialSearchResult(tutorials=[], total_found=0, search_query=goals, filters=filters)

    def get_learning_resources(self, goals: str, apps: list[str], difficulty: str, focus: str) -> LearningResources:
        return get_tutorial_service().get_learning_resources(goals, apps, difficulty, focus)
