"""
Tutorial discovery on top of the synthesized web search.

Builds per-app queries, turns search hits into scored Tutorial records,
then dedupes, filters and ranks them.
"""

import logging
import re
import uuid
from typing import Literal, Optional

from pydantic import BaseModel, Field

from creative_coach.services.web_search import SearchResult, web_search

logger = logging.getLogger(__name__)

TutorialSource = Literal["adobe-official", "adobe-community", "youtube-adobe", "third-party"]
TutorialDifficulty = Literal["beginner", "intermediate", "advanced"]
DIFFICULTIES = ("beginner", "intermediate", "advanced")

ADOBE_DOMAINS = ["experienceleague.adobe.com", "helpx.adobe.com", "adobe.com", "blog.adobe.com"]

YOUTUBE_ADOBE_CHANNELS = [
    "Adobe",
    "Adobe Creative Cloud",
    "Adobe Photoshop",
    "Adobe Illustrator",
    "Adobe Premiere Pro",
]

SOURCE_POINTS = {"adobe-official": 10, "youtube-adobe": 8, "adobe-community": 6, "third-party": 3}
SOURCE_PRIORITY = {"adobe-official": 4, "youtube-adobe": 3, "adobe-community": 2, "third-party": 1}

QUALITY_INDICATORS = [
    "step by step",
    "complete guide",
    "beginners",
    "tutorial",
    "how to",
    "learn",
    "master",
    "complete course",
]

MAX_QUALITY_SCORE = 10

APP_KEYWORDS = {
    "photoshop": "photoshop",
    "illustrator": "illustrator",
    "premiere": "premiere",
    "premiere pro": "premiere",
    "after effects": "aftereffects",
    "indesign": "indesign",
    "lightroom": "lightroom",
    "acrobat": "acrobat",
}

TOPIC_KEYWORDS = {
    "photo editing": ["photo edit", "image edit", "retouch"],
    "design": ["logo", "brand", "design", "graphic"],
    "video editing": ["video edit", "video production", "film"],
    "social media": ["social media", "instagram", "facebook"],
    "web design": ["web design", "website", "ui", "ux"],
    "typography": ["typography", "fonts", "text"],
    "color": ["color", "colour", "palette"],
    "animation": ["animation", "motion", "animate"],
}

DURATION_PATTERNS = [
    re.compile(r"(\d+)\s*(?:hours?|hrs?)", re.IGNORECASE),
    re.compile(r"(\d+)\s*(?:minutes?|mins?)", re.IGNORECASE),
    re.compile(r"(\d+)\s*(?:seconds?|secs?)", re.IGNORECASE),
]

PAID_INDICATORS = ["certification", "premium", "paid", "enroll", "$"]


class Tutorial(BaseModel):
    id: str
    title: str
    description: str
    url: str
    source: TutorialSource
    difficulty: TutorialDifficulty
    duration: str
    topics: list[str] = Field(default_factory=list)
    apps: list[str] = Field(default_factory=list)
    quality_score: int
    thumbnail_url: Optional[str] = None
    last_updated: Optional[str] = None


class TutorialFilters(BaseModel):
    apps: Optional[list[str]] = None
    difficulty: Optional[list[str]] = None
    sources: Optional[list[str]] = None
    max_results: Optional[int] = None
    min_quality_score: Optional[int] = None


class TutorialSearchResult(BaseModel):
    tutorials: list[Tutorial]
    total_found: int
    search_query: str
    filters: TutorialFilters


class DocumentationLink(BaseModel):
    title: str
    url: str
    type: str


class PracticeFile(BaseModel):
    name: str
    description: str
    download_url: str
    file_type: str


class RelatedCourse(BaseModel):
    title: str
    provider: str
    url: str
    is_paid: bool


class LearningResources(BaseModel):
    tutorials: list[Tutorial]
    documentation: list[DocumentationLink]
    practice_files: list[PracticeFile]
    related_courses: list[RelatedCourse]


def determine_source(url: str, title: str) -> TutorialSource:
    lower_url = url.lower()
    lower_title = title.lower()

    if any(domain in lower_url for domain in ADOBE_DOMAINS):
        return "adobe-official"

    if "youtube.com" in lower_url and (
        "adobe" in lower_title or any(channel.lower() in lower_title for channel in YOUTUBE_ADOBE_CHANNELS)
    ):
        return "youtube-adobe"

    if "community.adobe.com" in lower_url or "adobe community" in lower_title:
        return "adobe-community"

    return "third-party"


def calculate_quality_score(url: str, title: str, description: str, target_apps: list[str]) -> int:
    """
    Score 0-10 for a tutorial.

    Source points (10/8/6/3), +2 per target app mentioned, +1 per quality
    indicator, +2 for a 2024/2025 title and +1 for a description over 200 chars.
    """
    lower_title = title.lower()
    lower_desc = description.lower()

    score = SOURCE_POINTS[determine_source(url, title)]

    score += 2 * sum(1 for app in target_apps if app.lower() in lower_title or app.lower() in lower_desc)
    score += sum(1 for indicator in QUALITY_INDICATORS if indicator in lower_title or indicator in lower_desc)

    if "2024" in lower_title or "2025" in lower_title:
        score += 2

    if len(lower_desc) > 200:
        score += 1

    return min(score, MAX_QUALITY_SCORE)


def determine_difficulty(title: str, description: str, fallback: str) -> str:
    content = f"{title} {description}".lower()

    if any(word in content for word in ("beginner", "basics", "getting started", "introduction")):
        return "beginner"
    if any(word in content for word in ("advanced", "professional", "expert", "mastery")):
        return "advanced"
    if "intermediate" in content or "next level" in content:
        return "intermediate"
    return fallback if fallback in DIFFICULTIES else "beginner"


def extract_apps(title: str, description: str, target_apps: list[str]) -> list[str]:
    """Target apps mentioned in the text, normalized to app ids."""
    content = f"{title} {description}".lower()
    found = [app for keyword, app in APP_KEYWORDS.items() if keyword in content and app in target_apps]
    return list(dict.fromkeys(found))


def extract_topics(title: str, description: str) -> list[str]:
    content = f"{title} {description}".lower()
    return [topic for topic, keywords in TOPIC_KEYWORDS.items() if any(keyword in content for keyword in keywords)]


def estimate_duration(description: str) -> str:
    """Explicit duration mention if any, else a guess from wording."""
    content = description.lower()

    for pattern in DURATION_PATTERNS:
        match = pattern.search(content)
        if match:
            return match.group(0)

    if "quick" in content or "fast" in content:
        return "5-10 min"
    if "complete" in content or "comprehensive" in content:
        return "30-60 min"
    if "series" in content or "course" in content:
        return "2-4 hours"
    return "15-30 min"


def clean_title(title: str) -> str:
    """Drop list numbering, a YouTube suffix and trailing '| Adobe ...' branding."""
    title = re.sub(r"^\d+\.\s*", "", title)
    title = re.sub(r"\s*-\s*YouTube$", "", title)
    title = re.sub(r"\s*\|\s*Adobe.*$", "", title)
    return title.strip()


def extract_description(content: str) -> str:
    """First two sentences of reasonable length (20-200 chars)."""
    if not content:
        return ""

    sentences = re.split(r"[.!?]+", content)
    meaningful = [sentence for sentence in sentences if 20 < len(sentence) < 200][:2]
    return ". ".join(meaningful).strip() + "."


def extract_date(content: str) -> Optional[str]:
    match = re.search(r"(?:published|updated|created).*?(\d{4})", content, re.IGNORECASE)
    return match.group(1) if match else None


def extract_provider(url: str) -> str:
    if "adobe.com" in url:
        return "Adobe"
    if "udemy.com" in url:
        return "Udemy"
    if "coursera.org" in url:
        return "Coursera"
    if "linkedin.com" in url:
        return "LinkedIn Learning"
    return "Unknown"


def is_paid_course(title: str, content: str) -> bool:
    text = f"{title} {content}".lower()
    return any(indicator in text for indicator in PAID_INDICATORS)


def get_topics_for_app(app: str, goals: str) -> list[str]:
    lower_goals = goals.lower()
    topics: list[str] = []

    if app == "photoshop":
        if "photo" in lower_goals or "image" in lower_goals:
            topics += ["photo editing", "image retouching"]
        if "social media" in lower_goals:
            topics.append("social media design")
        return topics or ["photo editing", "layers"]

    if app == "illustrator":
        if "logo" in lower_goals or "brand" in lower_goals:
            topics += ["logo design", "branding"]
        if "vector" in lower_goals:
            topics.append("vector graphics")
        return topics or ["vector graphics", "illustration"]

    if app == "premiere":
        if "video" in lower_goals or "youtube" in lower_goals:
            topics += ["video editing", "content creation"]
        return topics or ["video editing", "timeline"]

    return ["design fundamentals"]


def get_source_preferences_by_focus(focus: str) -> tuple[list[str], str]:
    """
    Tutorial sources and documentation flavour for a learning path focus.

    Returns:
        (tutorial_sources, doc_source) where doc_source is official, community or mixed
    """
    lower_focus = focus.lower()

    if any(word in lower_focus for word in ("technical", "mastery", "advanced")):
        return ["adobe-official", "third-party"], "official"
    if any(word in lower_focus for word in ("creative", "process", "artistic")):
        return ["adobe-community", "youtube-adobe"], "community"
    if any(word in lower_focus for word in ("professional", "portfolio", "career")):
        return ["adobe-official", "adobe-community"], "mixed"
    return ["adobe-official", "youtube-adobe", "adobe-community"], "mixed"


def build_search_queries(goals: str, apps: list[str], difficulty: str) -> list[str]:
    clean_goals = goals.lower()
    queries = []
    for app in apps:
        queries.append(
            f"Adobe {app} {clean_goals} tutorial {difficulty} site:experienceleague.adobe.com OR site:helpx.adobe.com"
        )
        queries.append(f'Adobe {app} {clean_goals} tutorial {difficulty} site:youtube.com "Adobe"')
    queries.append(f"{clean_goals} Adobe tutorial {difficulty} {' OR '.join(apps)}")
    return queries


def parse_search_results(
    search_results: list[SearchResult], target_apps: list[str], target_difficulty: str
) -> list[Tutorial]:
    batch = uuid.uuid4().hex[:8]
    tutorials = []
    for index, result in enumerate(search_results):
        description = result.content or result.description or ""
        tutorial = Tutorial(
            id=f"tutorial-{batch}-{index}",
            title=clean_title(result.title),
            description=extract_description(description),
            url=result.url,
            source=determine_source(result.url, result.title),
            difficulty=determine_difficulty(result.title, description, target_difficulty),
            duration=estimate_duration(description),
            topics=extract_topics(result.title, description),
            apps=extract_apps(result.title, description, target_apps),
            quality_score=calculate_quality_score(result.url, result.title, description, target_apps),
            last_updated=extract_date(description),
        )
        if tutorial.quality_score > 0:
            tutorials.append(tutorial)
    return tutorials


def remove_duplicates(tutorials: list[Tutorial]) -> list[Tutorial]:
    seen = set()
    unique = []
    for tutorial in tutorials:
        key = f"{tutorial.url}-{tutorial.title[:50]}"
        if key in seen:
            continue
        seen.add(key)
        unique.append(tutorial)
    return unique


def apply_filters(tutorials: list[Tutorial], filters: TutorialFilters) -> list[Tutorial]:
    def keep(tutorial: Tutorial) -> bool:
        if filters.apps and not any(app in filters.apps for app in tutorial.apps):
            return False
        if filters.difficulty and tutorial.difficulty not in filters.difficulty:
            return False
        if filters.sources and tutorial.source not in filters.sources:
            return False
        if filters.min_quality_score and tutorial.quality_score < filters.min_quality_score:
            return False
        return True

    return [tutorial for tutorial in tutorials if keep(tutorial)]


def rank_by_quality(tutorials: list[Tutorial]) -> list[Tutorial]:
    """Quality score descending, then official > youtube > community > third-party."""
    return sorted(tutorials, key=lambda t: (-t.quality_score, -SOURCE_PRIORITY[t.source]))


def generate_fallback_tutorials(apps: list[str], goals: str, difficulty: str) -> list[Tutorial]:
    durations = {"beginner": "15-30 min", "intermediate": "30-45 min"}
    tutorials = []
    for index, app in enumerate(apps):
        app_name = app[:1].upper() + app[1:]
        tutorials.append(
            Tutorial(
                id=f"fallback-{app}-{index}",
                title=f"{app_name} {difficulty[:1].upper() + difficulty[1:]} Tutorial",
                description=(
                    f"Learn {app_name} fundamentals with this comprehensive {difficulty} tutorial "
                    f"covering essential tools and techniques."
                ),
                url=f"https://experienceleague.adobe.com/docs/{app}/tutorials",
                source="adobe-official",
                difficulty=difficulty if difficulty in DIFFICULTIES else "beginner",
                duration=durations.get(difficulty, "45-60 min"),
                topics=get_topics_for_app(app, goals),
                apps=[app],
                quality_score=8,
                last_updated="2024",
            )
        )
    return tutorials


# Lazy singleton instance
_tutorial_service_instance = None


def get_tutorial_service() -> "TutorialService":
    global _tutorial_service_instance

    if _tutorial_service_instance is None:
        _tutorial_service_instance = TutorialService()
        logger.info("✅ TutorialService ready")

    return _tutorial_service_instance


class TutorialService:
    def __init__(self, search=web_search):
        self.search = search

    def search_tutorials(
        self,
        goals: str,
        apps: list[str],
        difficulty: str = "beginner",
        filters: Optional[TutorialFilters] = None,
    ) -> TutorialSearchResult:
        """
        Search for tutorials based on learning goals and apps.

        Returns:
            TutorialSearchResult with at most filters.max_results (default 10) tutorials
        """
        filters = filters or TutorialFilters()
        queries = build_search_queries(goals, apps, difficulty)

        all_results: list[Tutorial] = []
        for query in queries:
            logger.info(f"🔍 Searching tutorials: {query}")
            results = self.search(query)
            tutorials = parse_search_results(results, apps, difficulty)
            logger.debug(f"   Parsed {len(tutorials)} tutorials from {len(results)} results")
            all_results.extend(tutorials)

        ranked = rank_by_quality(apply_filters(remove_duplicates(all_results), filters))
        final = ranked[: filters.max_results or 10]
        logger.info(f"🎯 Tutorial search: {len(final)} tutorials out of {len(ranked)} found")

        return TutorialSearchResult(
            tutorials=final,
            total_found=len(ranked),
            search_query=" | ".join(queries),
            filters=filters,
        )

    def find_documentation(self, apps: list[str], source_preference: str = "mixed") -> list[DocumentationLink]:
        documentation = []
        for app in apps[:2]:
            if source_preference == "official":
                query = f"Adobe {app} user guide documentation site:helpx.adobe.com OR site:experienceleague.adobe.com"
            elif source_preference == "community":
                query = f"Adobe {app} community guides tutorials site:community.adobe.com"
            else:
                query = (
                    f"Adobe {app} documentation guides site:helpx.adobe.com OR "
                    f"site:experienceleague.adobe.com OR site:community.adobe.com"
                )

            for result in self.search(query)[:2]:
                official = determine_source(result.url, result.title) == "adobe-official"
                documentation.append(
                    DocumentationLink(
                        title=clean_title(result.title),
                        url=result.url,
                        type="Official Guide" if official else "Community Guide",
                    )
                )
        return documentation[:4]

    @staticmethod
    def find_practice_files(apps: list[str], goals: str) -> list[PracticeFile]:
        files = []
        for app in apps:
            if app == "photoshop":
                files.append(
                    PracticeFile(
                        name="Sample PSD Files",
                        description="Practice Photoshop files for learning",
                        download_url="#",
                        file_type="PSD",
                    )
                )
            elif app == "illustrator":
                files.append(
                    PracticeFile(
                        name="Vector Practice Files",
                        description="Illustrator templates and practice files",
                        download_url="#",
                        file_type="AI",
                    )
                )
        return files

    def find_related_courses(self, focus: str, apps: list[str]) -> list[RelatedCourse]:
        query = f"Adobe {' '.join(apps)} {focus} course training certification"
        return [
            RelatedCourse(
                title=result.title or "Adobe Training Course",
                provider=extract_provider(result.url),
                url=result.url,
                is_paid=is_paid_course(result.title, result.content),
            )
            for result in self.search(query)[:3]
        ]

    def get_learning_resources(self, goals: str, apps: list[str], difficulty: str, focus: str) -> LearningResources:
        """
        Tutorials, documentation, practice files and related courses for one learning path.
        Sources are weighted by the path's focus; generic tutorials fill in when none match.
        """
        logger.info(f"🎯 Getting learning resources: apps={apps}, difficulty={difficulty}, focus={focus}")
        tutorial_sources, doc_source = get_source_preferences_by_focus(focus)

        tutorials = self.search_tutorials(
            goals,
            apps,
            difficulty,
            TutorialFilters(max_results=8, min_quality_score=5, sources=tutorial_sources),
        ).tutorials

        if not tutorials:
            logger.warning("⚠️  No tutorials found, generating fallback tutorials")
            tutorials = generate_fallback_tutorials(apps, goals, difficulty)

        return LearningResources(
            tutorials=tutorials,
            documentation=self.find_documentation(apps, doc_source),
            practice_files=self.find_practice_files(apps, goals),
            related_courses=self.find_related_courses(focus, apps),
        )
