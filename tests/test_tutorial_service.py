"""
Tests for tutorial discovery and ranking
"""


def _results():
    from creative_coach.services.web_search import SearchResult

    return [
        SearchResult(
            title="Photoshop layers tutorial for beginners | Adobe Photoshop",
            url="https://helpx.adobe.com/photoshop/layers.html",
            description="Learn layers step by step",
        ),
        SearchResult(
            title="Random photoshop video",
            url="https://example.com/video",
            description="photoshop",
        ),
    ]


class TestTutorialHeuristics:
    """Test cases for scoring and text helpers"""

    def test_determine_source(self):
        """Test source classification"""
        from creative_coach.services.tutorial_service import determine_source

        assert determine_source("https://helpx.adobe.com/x", "Anything") == "adobe-official"
        assert determine_source("https://youtube.com/watch?v=1", "Adobe Illustrator basics") == "youtube-adobe"
        assert determine_source("https://youtube.com/watch?v=1", "My vlog") == "third-party"
        assert determine_source("https://forum.test/x", "Adobe Community answers") == "adobe-community"

    def test_quality_score(self):
        """Test scoring components and the cap"""
        from creative_coach.services.tutorial_service import calculate_quality_score

        assert calculate_quality_score("https://example.com/x", "Photoshop tips", "", ["photoshop"]) == 5
        assert (
            calculate_quality_score(
                "https://helpx.adobe.com/x", "How to master Photoshop 2024", "tutorial", ["photoshop"]
            )
            == 10
        )

    def test_clean_title(self):
        """Test numbering, YouTube suffix and Adobe branding are removed"""
        from creative_coach.services.tutorial_service import clean_title

        assert clean_title("1. Layers basics | Adobe Photoshop") == "Layers basics"
        assert clean_title("Intro to masks - YouTube") == "Intro to masks"

    def test_estimate_duration(self):
        """Test explicit durations win over wording"""
        from creative_coach.services.tutorial_service import estimate_duration

        assert estimate_duration("A 45 minutes walkthrough") == "45 minutes"
        assert estimate_duration("A quick tip") == "5-10 min"
        assert estimate_duration("A full course") == "2-4 hours"
        assert estimate_duration("Something else") == "15-30 min"

    def test_extract_description(self):
        """Test the first two meaningful sentences are kept"""
        from creative_coach.services.tutorial_service import extract_description

        description = extract_description(
            "Short. This sentence is long enough to count here. Another sentence that is also long enough! x"
        )
        assert description.startswith("This sentence is long enough")
        assert "Another sentence" in description
        assert description.endswith(".")
        assert extract_description("") == ""

    def test_determine_difficulty_fallback(self):
        """Test keyword detection with a validated fallback"""
        from creative_coach.services.tutorial_service import determine_difficulty

        assert determine_difficulty("Getting started", "", "advanced") == "beginner"
        assert determine_difficulty("Expert compositing", "", "beginner") == "advanced"
        assert determine_difficulty("Layers", "", "intermediate") == "intermediate"
        assert determine_difficulty("Layers", "", "unknown") == "beginner"

    def test_source_preferences_by_focus(self):
        """Test focus keywords pick tutorial sources"""
        from creative_coach.services.tutorial_service import get_source_preferences_by_focus

        assert get_source_preferences_by_focus("Technical Mastery") == (["adobe-official", "third-party"], "official")
        assert get_source_preferences_by_focus("Creative process") == (
            ["adobe-community", "youtube-adobe"],
            "community",
        )
        assert get_source_preferences_by_focus("Anything")[1] == "mixed"


class TestTutorialService:
    """Test cases for TutorialService with an injected search"""

    def test_search_dedupes_and_ranks(self):
        """Test duplicate hits across queries collapse and official ranks first"""
        from creative_coach.services.tutorial_service import TutorialService

        queries = []

        def fake_search(query):
            queries.append(query)
            return _results()

        result = TutorialService(search=fake_search).search_tutorials("Layer basics", ["photoshop"])

        # two queries per app plus one combined
        assert len(queries) == 3
        assert result.total_found == 2
        assert result.tutorials[0].source == "adobe-official"
        assert result.tutorials[0].title == "Photoshop layers tutorial for beginners"
        assert result.tutorials[0].quality_score == 10
        assert result.tutorials[1].quality_score == 5
        assert " | " in result.search_query

    def test_search_with_filters(self):
        """Test source and max_results filters"""
        from creative_coach.services.tutorial_service import TutorialFilters, TutorialService

        service = TutorialService(search=lambda query: _results())

        official = service.search_tutorials(
            "Layer basics", ["photoshop"], filters=TutorialFilters(sources=["adobe-official"])
        )
        assert [tutorial.source for tutorial in official.tutorials] == ["adobe-official"]

        limited = service.search_tutorials("Layer basics", ["photoshop"], filters=TutorialFilters(max_results=1))
        assert len(limited.tutorials) == 1
        assert limited.total_found == 2

    def test_learning_resources_fallback(self):
        """Test generic tutorials fill in when the search finds nothing"""
        from creative_coach.services.tutorial_service import TutorialService

        resources = TutorialService(search=lambda query: []).get_learning_resources(
            "edit photos for my shop", ["photoshop"], "beginner", "Technical mastery"
        )

        assert len(resources.tutorials) == 1
        fallback = resources.tutorials[0]
        assert fallback.id == "fallback-photoshop-0"
        assert fallback.title == "Photoshop Beginner Tutorial"
        assert fallback.topics == ["photo editing", "image retouching"]
        assert resources.documentation == []
        assert resources.related_courses == []
        assert resources.practice_files[0].file_type == "PSD"

    def test_documentation_types(self):
        """Test documentation links are labelled by source"""
        from creative_coach.services.tutorial_service import TutorialService

        docs = TutorialService(search=lambda query: _results()).find_documentation(["photoshop"], "official")

        assert [doc.type for doc in docs] == ["Official Guide", "Community Guide"]
