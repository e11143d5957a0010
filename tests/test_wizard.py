"""
Tests for wizard sessions and the session store
"""

import pytest


class FakeAssistant:
    """Stands in for LearningAssistantService; records what the wizard asks for."""

    def __init__(self, fail_predict=False, fail_revision=False):
        from creative_coach.models.learning import LearningPath

        self.fail_predict = fail_predict
        self.fail_revision = fail_revision
        self.profile_updates = []
        self.paths = [
            LearningPath(id=1, title="Logo Foundations", apps=["illustrator"]),
            LearningPath(id=2, title="Brand Systems", apps=["illustrator", "photoshop"]),
        ]

    def get_static_title_subtitle(self, step, predictions=None):
        return {"title": f"title:{step}", "subtitle": f"subtitle:{step}"}

    def update_user_profile(self, **updates):
        self.profile_updates.append(updates)

    async def analyze_goals_and_predict_apps(self, goals, files=None):
        from creative_coach.models.learning import AppPredictions

        if self.fail_predict:
            raise RuntimeError("assistant down")
        return AppPredictions(confident=["photoshop"], need_help=["illustrator"], goals=goals)

    async def generate_personalized_learning_paths(self, predictions=None):
        return self.paths

    async def generate_revised_learning_paths(self, feedback, current_paths, predictions=None):
        from creative_coach.models.learning import LearningPath

        if self.fail_revision:
            raise RuntimeError("revision down")
        return [LearningPath(id=1, title=f"Revised for {feedback}")]


def _session(**kwargs):
    from creative_coach.services.wizard import WizardSession

    return WizardSession("session-1", FakeAssistant(**kwargs))


class TestWizardFlow:
    """Test cases for wizard actions"""

    @pytest.mark.asyncio
    async def test_happy_path(self):
        """Test welcome → goal → prediction → paths → detail"""
        session = _session()

        assert session.current_step.type == "welcome"

        step = session.welcome_continue()
        assert step.type == "goal-input"
        assert step.content["title"] == "title:goal-input"

        step = await session.goal_submit("  Design a logo  ", ["sketch.png"])
        assert step.type == "app-prediction"
        assert session.goal == "Design a logo"
        assert step.content["predictions"]["needHelp"] == ["illustrator"]
        assert [s.type for s in session.steps] == ["welcome", "goal-input", "loading", "app-prediction"]

        step = await session.prediction_confirm()
        assert step.type == "learning-paths"
        assert session.selected_apps == ["photoshop"]
        assert [path["title"] for path in step.content["paths"]] == ["Logo Foundations", "Brand Systems"]
        assert step.content["title"] == "title:learning-paths-predicted"

        step = await session.path_select(2)
        assert step.type == "learning-path-detail"
        assert step.content["path"]["title"] == "Brand Systems"
        assert session.selected_path.id == 2
        assert session.loading_message is None

    @pytest.mark.asyncio
    async def test_goal_submit_requires_text(self):
        """Test empty goals are rejected"""
        from creative_coach.services.wizard import WizardError

        session = _session()
        with pytest.raises(WizardError):
            await session.goal_submit("   ")
        assert len(session.steps) == 1

    @pytest.mark.asyncio
    async def test_goal_submit_local_prediction(self):
        """Test local keyword prediction when the assistant fails"""
        session = _session(fail_predict=True)

        step = await session.goal_submit("Edit photos for my shop")

        assert step.type == "app-prediction"
        assert session.predictions.confident == ["photoshop", "premiere"]
        assert session.predictions.need_help == ["lightroom"]

    @pytest.mark.asyncio
    async def test_prediction_confirm_requires_predictions(self):
        """Test confirming before any prediction"""
        from creative_coach.services.wizard import WizardError

        with pytest.raises(WizardError):
            await _session().prediction_confirm()

    @pytest.mark.asyncio
    async def test_skill_assessment(self):
        """Test reject → toggle apps → continue"""
        from creative_coach.services.wizard import WizardError

        session = _session()
        await session.goal_submit("Make posters")

        assert session.prediction_reject().type == "skill-assessment"

        with pytest.raises(WizardError):
            await session.skill_assessment_continue()

        assert session.app_toggle("photoshop") == ["photoshop"]
        assert session.app_toggle("illustrator") == ["photoshop", "illustrator"]
        assert session.app_toggle("photoshop") == ["illustrator"]

        with pytest.raises(WizardError):
            session.app_toggle("figma")

        step = await session.skill_assessment_continue()
        assert step.type == "learning-paths"
        assert step.content["title"] == "title:learning-paths-manual"
        assert session.assistant.profile_updates[-1] == {"selected_apps": ["illustrator"]}

    @pytest.mark.asyncio
    async def test_path_select_unknown(self):
        """Test selecting a path that was never offered"""
        from creative_coach.services.wizard import WizardError

        with pytest.raises(WizardError):
            await _session().path_select(9)

    @pytest.mark.asyncio
    async def test_revision(self):
        """Test revise → submit replaces the paths"""
        from creative_coach.services.wizard import REVISED_TITLES

        session = _session()
        await session.goal_submit("Design a logo")
        await session.prediction_confirm()

        step = await session.revise()
        assert step.type == "revision-input"
        assert len(step.content["currentPaths"]) == 2

        step = await session.revision_submit("shorter")
        assert step.content["title"] == REVISED_TITLES["title"]
        assert [path.title for path in session.learning_paths] == ["Revised for shorter"]
        assert session.revision_feedback == "shorter"

    @pytest.mark.asyncio
    async def test_revision_failure_keeps_paths(self):
        """Test a failed revision shows the original paths"""
        from creative_coach.services.wizard import REVISION_FAILED_TITLES

        session = _session(fail_revision=True)
        await session.goal_submit("Design a logo")
        await session.prediction_confirm()

        step = await session.revision_submit("harder")

        assert step.type == "learning-paths"
        assert step.content["title"] == REVISION_FAILED_TITLES["title"]
        assert len(step.content["paths"]) == 2

    @pytest.mark.asyncio
    async def test_real_assistant_fallbacks(self, monkeypatch):
        """Test the full flow on template fallbacks when Claude is unavailable"""
        from creative_coach.services.learning_assistant import LearningAssistantService
        from creative_coach.services.wizard import WizardSession

        def unavailable():
            raise RuntimeError("no claude")

        monkeypatch.setattr("creative_coach.services.learning_assistant.get_claude_service", unavailable)
        session = WizardSession(assistant=LearningAssistantService(fast_mode=True))

        session.welcome_continue()
        await session.goal_submit("Design a logo for my bakery")
        step = await session.prediction_confirm()

        assert step.type == "learning-paths"
        assert len(step.content["paths"]) == 2
        assert step.content["subtitle"].endswith("Select a path to begin.")


class TestWizardNavigation:
    """Test cases for up/down navigation"""

    @pytest.mark.asyncio
    async def test_navigation_skips_loading(self):
        """Test navigation never lands on a loading step"""
        session = _session()
        session.welcome_continue()
        await session.goal_submit("Design a logo")

        # welcome, goal-input, loading, app-prediction
        assert session.navigate_up().type == "goal-input"
        assert session.current_step_index == 1
        assert session.navigate_up().type == "welcome"
        assert session.navigate_up().type == "welcome"

        assert session.navigate_down().type == "goal-input"
        assert session.navigate_down().type == "app-prediction"
        assert session.current_step_index == 3
        assert session.navigate_down().type == "app-prediction"

    def test_to_dict(self):
        """Test the camelCase session snapshot"""
        session = _session()
        data = session.to_dict()

        assert data["id"] == "session-1"
        assert data["currentStepIndex"] == 0
        assert data["currentStep"] == {"type": "welcome", "content": {}}
        assert data["predictions"] is None
        assert data["selectedApps"] == []


class TestWizardSessionStore:
    """Test cases for WizardSessionStore"""

    def test_create_get_delete(self):
        """Test the session lifecycle"""
        from creative_coach.services.wizard import get_wizard_store

        store = get_wizard_store()
        session = store.create()

        assert store.get(session.id) is session
        assert len(store) == 1
        assert store.delete(session.id) is True
        assert store.delete(session.id) is False
        assert store.get(session.id) is None
        assert get_wizard_store() is store

    def test_predict_apps_from_goal_default(self):
        """Test the local prediction default"""
        from creative_coach.services.wizard import predict_apps_from_goal

        predictions = predict_apps_from_goal("something new")
        assert predictions.confident == ["photoshop"]
        assert predictions.need_help == ["illustrator", "premiere"]
