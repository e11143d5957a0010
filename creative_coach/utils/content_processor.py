"""
Text heuristics that pull pseudo-structure out of tutorial pages and snippets:
sections, steps, prerequisites, advice, difficulty, duration, type and tags.
"""

import logging
import re
from typing import Any, Literal

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

Difficulty = Literal["beginner", "intermediate", "advanced"]
ContentType = Literal["tutorial", "article", "guide", "video", "interactive"]
ResourceSource = Literal["learn", "help", "community", "blog"]

MAX_SECTIONS = 8
MAX_STEPS = 10
MAX_PREREQUISITES = 5
MAX_ADVICE = 6

TAG_APPS = ["photoshop", "illustrator", "indesign", "premiere", "after effects", "lightroom", "acrobat", "express"]

_TAG_RE = re.compile(r"<[^>]*>")


class ProcessedContent(BaseModel):
    title: str
    url: str
    summary: str = ""
    sections: list[str] = Field(default_factory=list)
    steps: list[str] = Field(default_factory=list)
    prerequisites: list[str] = Field(default_factory=list)
    key_advice: list[str] = Field(default_factory=list)
    difficulty: Difficulty = "beginner"
    duration: str = "2-5 min"
    content_type: ContentType = "article"
    tags: list[str] = Field(default_factory=list)


class AdobeResource(BaseModel):
    title: str
    url: str
    summary: str
    content: ProcessedContent
    relevance_score: int
    source: ResourceSource


def _strip_tags(text: str) -> str:
    return _TAG_RE.sub("", text)


def _collect(patterns: list[str], content: str, prefix: str, min_len: int, max_len: int) -> list[str]:
    """Run each pattern, strip its lead-in prefix and tags, keep items within the length bounds."""
    items = []
    for pattern in patterns:
        for match in re.finditer(pattern, content, re.IGNORECASE):
            cleaned = re.sub(prefix, "", match.group(0), count=1, flags=re.IGNORECASE)
            cleaned = _strip_tags(cleaned).strip()
            if cleaned and min_len < len(cleaned) < max_len:
                items.append(cleaned)
    return items


def extract_content_sections(html_content: str) -> list[str]:
    """Headings, markdown ## lines and bold/strong spans, deduplicated, at most 8."""
    sections: list[str] = []

    for heading in re.finditer(r"<h[1-6][^>]*>(.*?)</h[1-6]>", html_content, re.IGNORECASE):
        clean_heading = _strip_tags(heading.group(1)).strip()
        if clean_heading and len(clean_heading) > 3:
            sections.append(clean_heading)

    section_patterns = [
        r"##\s*(.*?)(?=##|\n)",
        r"\*\*(.*?)\*\*",
        r"<strong>(.*?)</strong>",
    ]
    for pattern in section_patterns:
        for match in re.finditer(pattern, html_content, re.IGNORECASE):
            clean_match = re.sub(r"[#*\s]+", " ", _strip_tags(match.group(1))).strip()
            if clean_match and len(clean_match) > 5 and clean_match not in sections:
                sections.append(clean_match)

    return sections[:MAX_SECTIONS]


def extract_steps(content: str) -> list[str]:
    """Numbered, 'Step N', bulleted and dashed instructions (10-200 chars), at most 10."""
    patterns = [
        r"(?:step\s*\d+[:\s]+)(.*?)(?=step\s*\d+|$)",
        r"(?:\d+\.\s+)(.*?)(?=\d+\.|$)",
        r"(?:•\s+)(.*?)(?=•|$)",
        r"(?:-\s+)(.*?)(?=-|$)",
    ]
    prefix = r"^(step\s*\d+[:\s]*|\d+\.\s*|•\s*|-\s*)"
    return _collect(patterns, content, prefix, 10, 200)[:MAX_STEPS]


def extract_prerequisites(content: str) -> list[str]:
    patterns = [
        r"(?:prerequisites?[:\s]+)(.*?)(?=\n\n|\.|before|requirements?)",
        r"(?:before you begin[:\s]+)(.*?)(?=\n\n|\.|prerequisites?)",
        r"(?:requirements?[:\s]+)(.*?)(?=\n\n|\.|before|prerequisites?)",
        r"(?:you need[:\s]+)(.*?)(?=\n\n|\.|before|to)",
        r"(?:required[:\s]+)(.*?)(?=\n\n|\.|before|to)",
    ]
    prefix = r"^(prerequisites?[:\s]*|before you begin[:\s]*|requirements?[:\s]*|you need[:\s]*|required[:\s]*)"
    return _collect(patterns, content, prefix, 5, 150)[:MAX_PREREQUISITES]


def extract_key_advice(content: str) -> list[str]:
    patterns = [
        r"(?:tip[:\s]+)(.*?)(?=\n|tip|note|important)",
        r"(?:note[:\s]+)(.*?)(?=\n|tip|note|important)",
        r"(?:important[:\s]+)(.*?)(?=\n|tip|note|important)",
        r"(?:remember[:\s]+)(.*?)(?=\n|tip|note|remember)",
        r"(?:pro tip[:\s]+)(.*?)(?=\n|tip|note|pro)",
        r"(?:best practice[:\s]+)(.*?)(?=\n|tip|note|best)",
    ]
    prefix = r"^(tip[:\s]*|note[:\s]*|important[:\s]*|remember[:\s]*|pro tip[:\s]*|best practice[:\s]*)"
    return _collect(patterns, content, prefix, 10, 200)[:MAX_ADVICE]


def extract_difficulty(title: str, content: str) -> Difficulty:
    """Keyword vote; beginner wins ties."""
    text = f"{title} {content}".lower()

    beginner_keywords = ["beginner", "basic", "intro", "getting started", "first", "simple", "easy"]
    advanced_keywords = ["advanced", "expert", "professional", "complex", "deep dive", "mastery"]
    intermediate_keywords = ["intermediate", "medium", "next level", "beyond basics"]

    beginner_count = sum(1 for keyword in beginner_keywords if keyword in text)
    advanced_count = sum(1 for keyword in advanced_keywords if keyword in text)
    intermediate_count = sum(1 for keyword in intermediate_keywords if keyword in text)

    if advanced_count > beginner_count and advanced_count > intermediate_count:
        return "advanced"
    if intermediate_count > beginner_count:
        return "intermediate"
    return "beginner"


def estimate_content_duration(content: str) -> str:
    """Reading-time bucket from the word count."""
    word_count = len(content.split())
    if word_count < 300:
        return "2-5 min"
    if word_count < 800:
        return "5-10 min"
    if word_count < 1500:
        return "10-20 min"
    if word_count < 3000:
        return "20-30 min"
    return "30+ min"


def determine_content_type(title: str, content: str) -> ContentType:
    text = f"{title} {content}".lower()

    if any(word in text for word in ("video", "watch", "youtube")):
        return "video"
    if any(word in text for word in ("interactive", "playground", "demo")):
        return "interactive"
    if any(word in text for word in ("tutorial", "step by step", "how to")):
        return "tutorial"
    if any(word in text for word in ("guide", "complete", "comprehensive")):
        return "guide"
    return "article"


def extract_tags(title: str, content: str) -> list[str]:
    """App, level and discipline tags in a stable order without duplicates."""
    text = f"{title} {content}".lower()
    tags = [app for app in TAG_APPS if app in text]

    if "beginner" in text or "basic" in text:
        tags.append("beginner")
    if "intermediate" in text:
        tags.append("intermediate")
    if "advanced" in text or "expert" in text:
        tags.append("advanced")

    if "design" in text:
        tags.append("design")
    if "photo" in text:
        tags.append("photography")
    if "video" in text:
        tags.append("video-editing")
    if "print" in text:
        tags.append("print-design")
    if "web" in text:
        tags.append("web-design")

    return list(dict.fromkeys(tags))


def calculate_relevance_score(content: ProcessedContent, user_goals: str, target_app: str) -> int:
    """
    Score 0-100 for how well content fits the user's goals and app.

    App mention +40, each goal word (>3 chars) +10, steps +15, prerequisites +10,
    advice +10, more than two sections +5, tutorial +10, guide +8.
    """
    score = 0
    content_text = f"{content.title} {content.summary}".lower()

    if target_app and target_app.lower() in content_text:
        score += 40

    for word in user_goals.lower().split():
        if len(word) > 3 and word in content_text:
            score += 10

    if content.steps:
        score += 15
    if content.prerequisites:
        score += 10
    if content.key_advice:
        score += 10
    if len(content.sections) > 2:
        score += 5

    if content.content_type == "tutorial":
        score += 10
    elif content.content_type == "guide":
        score += 8

    return min(score, 100)


def source_from_url(url: str) -> ResourceSource:
    if "helpx.adobe.com" in url:
        return "help"
    if "community.adobe.com" in url:
        return "community"
    if "blog.adobe.com" in url:
        return "blog"
    return "learn"


def process_search_result(result: dict[str, Any], user_goals: str, target_app: str) -> AdobeResource:
    """Turn a raw {title, url, description|summary, content} hit into a scored resource."""
    title = result.get("title", "")
    url = result.get("url", "")
    body = result.get("content") or result.get("description") or ""

    processed = ProcessedContent(
        title=title,
        url=url,
        summary=result.get("description") or result.get("summary") or "",
        sections=extract_content_sections(body),
        steps=extract_steps(body),
        prerequisites=extract_prerequisites(body),
        key_advice=extract_key_advice(body),
        difficulty=extract_difficulty(title, body),
        duration=estimate_content_duration(body),
        content_type=determine_content_type(title, body),
        tags=extract_tags(title, body),
    )

    return AdobeResource(
        title=title,
        url=url,
        summary=processed.summary,
        content=processed,
        relevance_score=calculate_relevance_score(processed, user_goals, target_app),
        source=source_from_url(url),
    )
