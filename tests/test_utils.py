"""
Tests for utility functions (json_parser, content_processor)
"""

import pytest


class TestJsonParser:
    """Test cases for parse_llm_json_response"""

    def test_plain_object(self):
        """Test parsing a bare JSON object"""
        from creative_coach.utils.json_parser import parse_llm_json_response

        assert parse_llm_json_response('{"confident": [], "needHelp": ["photoshop"]}') == {
            "confident": [],
            "needHelp": ["photoshop"],
        }

    def test_code_fence_and_prose(self):
        """Test parsing JSON wrapped in a ```json fence with surrounding text"""
        from creative_coach.utils.json_parser import parse_llm_json_response

        response = 'Here you go:\n```json\n[{"id": 1, "title": "Path"}]\n```\nGood luck!'
        assert parse_llm_json_response(response, expected_type="array") == [{"id": 1, "title": "Path"}]

    def test_prose_without_fence(self):
        """Test extracting the first balanced object from prose"""
        from creative_coach.utils.json_parser import parse_llm_json_response

        response = 'Sure! {"reasoning": "uses {braces} in text", "confident": ["illustrator"]} Hope it helps.'
        parsed = parse_llm_json_response(response)
        assert parsed["reasoning"] == "uses {braces} in text"

    def test_trailing_comma(self):
        """Test trailing commas are tolerated"""
        from creative_coach.utils.json_parser import parse_llm_json_response

        assert parse_llm_json_response('{"a": [1, 2,],}') == {"a": [1, 2]}

    def test_wrong_top_level_type(self):
        """Test an object where an array is expected"""
        from creative_coach.utils.json_parser import parse_llm_json_response

        with pytest.raises(ValueError):
            parse_llm_json_response('{"id": 1}', expected_type="array")

    def test_empty_response(self):
        """Test empty responses"""
        from creative_coach.utils.json_parser import parse_llm_json_response

        with pytest.raises(ValueError):
            parse_llm_json_response("   ")

    def test_garbage(self):
        """Test text with no JSON at all"""
        from creative_coach.utils.json_parser import parse_llm_json_response

        with pytest.raises(ValueError):
            parse_llm_json_response("I cannot help with that.")


class TestContentProcessor:
    """Test cases for the content heuristics"""

    def test_extract_content_sections(self):
        """Test headings, markdown and bold spans are collected once"""
        from creative_coach.utils.content_processor import extract_content_sections

        html = "<h2>Getting Started</h2><p>x</p><strong>Working with layers</strong> **Working with layers**"
        sections = extract_content_sections(html)
        assert sections == ["Getting Started", "Working with layers"]

    def test_extract_steps_numbered(self):
        """Test numbered steps on one line"""
        from creative_coach.utils.content_processor import extract_steps

        steps = extract_steps("1. Open the export dialog 2. Choose the PNG format 3. Save the file")
        assert steps == ["Open the export dialog", "Choose the PNG format", "Save the file"]

    def test_extract_steps_limits(self):
        """Test too-short steps are dropped and at most 10 are kept"""
        from creative_coach.utils.content_processor import extract_steps

        content = " ".join(f"Step {i}: do the numbered thing {i} carefully" for i in range(1, 15))
        steps = extract_steps(content)
        assert len(steps) == 10
        assert all(10 < len(step) < 200 for step in steps)

    def test_extract_key_advice(self):
        """Test tip/note lead-ins are stripped"""
        from creative_coach.utils.content_processor import extract_key_advice

        advice = extract_key_advice("Tip: save versions of every file you edit\nNote: keep layers named clearly\n")
        assert "save versions of every file you edit" in advice
        assert "keep layers named clearly" in advice

    def test_extract_difficulty(self):
        """Test keyword voting with beginner winning ties"""
        from creative_coach.utils.content_processor import extract_difficulty

        assert extract_difficulty("Advanced expert compositing", "") == "advanced"
        assert extract_difficulty("Intermediate masking", "") == "intermediate"
        assert extract_difficulty("Basic and advanced", "") == "beginner"

    def test_estimate_content_duration(self):
        """Test reading-time buckets"""
        from creative_coach.utils.content_processor import estimate_content_duration

        assert estimate_content_duration("word " * 100) == "2-5 min"
        assert estimate_content_duration("word " * 500) == "5-10 min"
        assert estimate_content_duration("word " * 3500) == "30+ min"

    def test_determine_content_type(self):
        """Test content type precedence"""
        from creative_coach.utils.content_processor import determine_content_type

        assert determine_content_type("Watch this tutorial", "") == "video"
        assert determine_content_type("How to mask", "") == "tutorial"
        assert determine_content_type("Complete reference", "") == "guide"
        assert determine_content_type("Release notes", "") == "article"

    def test_extract_tags(self):
        """Test app, level and discipline tags"""
        from creative_coach.utils.content_processor import extract_tags

        tags = extract_tags("Photoshop basics", "photo retouching for web design")
        assert tags == ["photoshop", "beginner", "design", "photography", "web-design"]

    def test_relevance_score_capped(self):
        """Test relevance score never exceeds 100"""
        from creative_coach.utils.content_processor import ProcessedContent, calculate_relevance_score

        content = ProcessedContent(
            title="Photoshop logo branding poster workflow tutorial",
            url="https://helpx.adobe.com/x",
            summary="logo branding poster workflow",
            steps=["a"],
            prerequisites=["b"],
            key_advice=["c"],
            sections=["1", "2", "3"],
            content_type="tutorial",
        )
        assert calculate_relevance_score(content, "logo branding poster workflow", "photoshop") == 100

    def test_process_search_result(self):
        """Test a raw hit becomes a scored resource with source from the URL"""
        from creative_coach.utils.content_processor import process_search_result

        resource = process_search_result(
            {
                "title": "Illustrator logo tutorial",
                "url": "https://community.adobe.com/t5/illustrator/logo",
                "description": "Design a logo step by step",
            },
            "logo design",
            "illustrator",
        )
        assert resource.source == "community"
        assert resource.content.content_type == "tutorial"
        assert resource.relevance_score >= 40
