"""
Scrapes Adobe Experience League, HelpX and Community search pages.

Each site gets one query personalized to the user's background and target
skill; the query variant rotates with the module index so consecutive
modules don't get the same results.
"""

import logging
from typing import Optional
from urllib.parse import quote

import httpx
from bs4 import BeautifulSoup
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from creative_coach.config import settings

logger = logging.getLogger(__name__)

EXPERIENCE_LEAGUE_ORIGIN = "https://experienceleague.adobe.com"
HELPX_ORIGIN = "https://helpx.adobe.com"
COMMUNITY_ORIGIN = "https://community.adobe.com"

# Characters encodeURIComponent leaves alone
URI_COMPONENT_SAFE = "-_.!~*'()"


class ScrapeRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_goals: str = ""
    target_skill: str = ""
    user_background: str = ""
    target_industry: str = ""
    search_term: str = ""
    module_index: int = 0


class ScrapedResource(BaseModel):
    title: str
    url: str
    summary: str
    type: str
    source: str
    duration: Optional[str] = None
    author: Optional[str] = None


class PersonalizedQueries(BaseModel):
    experience_league: str
    help_x: str
    community: str


class ScrapeResponse(BaseModel):
    success: bool = True
    results: list[ScrapedResource] = Field(default_factory=list)


def generate_personalized_queries(body: ScrapeRequest) -> PersonalizedQueries:
    """One query per site, variant picked by module_index % 3."""
    skill = body.target_skill
    background = body.user_background
    industry = body.target_industry

    experience_league = [
        f'"{skill}" "{background}" tutorial',
        f'"{skill}" workflow "{industry}"',
        f'"{skill}" professional "{background} to {skill}"',
    ]
    help_x = [
        f'"{skill}" "{industry}" best practices',
        f'"{skill}" setup "{background}"',
        f'"{skill}" troubleshooting workflow',
    ]
    community = [
        f'"{skill}" "{industry}" examples',
        f'"{background}" career transition "{skill}"',
        f'"{skill}" inspiration "{industry}"',
    ]

    index = body.module_index
    return PersonalizedQueries(
        experience_league=experience_league[index % len(experience_league)],
        help_x=help_x[index % len(help_x)],
        community=community[index % len(community)],
    )


def _absolute(href: str, origin: str) -> str:
    return href if href.startswith("http") else f"{origin}{href}"


def _text(element, selector: str) -> str:
    found = element.select_one(selector)
    return found.get_text(strip=True) if found else ""


def _href(element, selector: str) -> Optional[str]:
    found = element.select_one(selector)
    return found.get("href") if found else None


def parse_experience_league(html: str) -> list[ScrapedResource]:
    soup = BeautifulSoup(html, "html.parser")
    results = []
    for item in soup.select(".search-result-item"):
        title = _text(item, ".result-title")
        href = _href(item, ".result-title a")
        if title and href:
            results.append(
                ScrapedResource(
                    title=title,
                    url=_absolute(href, EXPERIENCE_LEAGUE_ORIGIN),
                    summary=_text(item, ".result-description"),
                    duration=_text(item, ".duration") or "Self-paced",
                    type="tutorial",
                    source="Adobe Experience League",
                )
            )
    return results


def parse_helpx(html: str) -> list[ScrapedResource]:
    soup = BeautifulSoup(html, "html.parser")
    results = []
    for item in soup.select(".help-result"):
        title = _text(item, ".title")
        href = _href(item, ".title a")
        if title and href:
            results.append(
                ScrapedResource(
                    title=title,
                    url=_absolute(href, HELPX_ORIGIN),
                    summary=_text(item, ".description"),
                    type="documentation",
                    source="Adobe HelpX",
                )
            )
    return results


def parse_community(html: str) -> list[ScrapedResource]:
    soup = BeautifulSoup(html, "html.parser")
    results = []
    for item in soup.select(".community-post"):
        title = _text(item, ".post-title")
        href = _href(item, ".post-title a")
        if title and href:
            results.append(
                ScrapedResource(
                    title=title,
                    url=_absolute(href, COMMUNITY_ORIGIN),
                    summary=_text(item, ".post-excerpt"),
                    author=_text(item, ".author-name"),
                    type="discussion",
                    source="Adobe Community",
                )
            )
    return results


class AdobeScraper:
    def __init__(self, timeout: Optional[float] = None, max_results: Optional[int] = None):
        self.timeout = timeout or settings.scraper_timeout
        self.max_results = max_results or settings.scraper_max_results
        self.headers = {
            "User-Agent": settings.scraper_user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        }

    async def _fetch(self, url: str, check_status: bool = False) -> str:
        async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
            response = await client.get(url, headers=self.headers)
            if check_status:
                response.raise_for_status()
            return response.text

    async def _scrape(self, label: str, url: str, parser, check_status: bool = False) -> list[ScrapedResource]:
        try:
            logger.info(f"🕷️ Scraping {label}: {url}")
            results = parser(await self._fetch(url, check_status))
            logger.info(f"✅ {label}: Found {len(results)} results")
            return results[: self.max_results]
        except Exception as e:
            logger.error(f"❌ {label} scraping failed: {e}")
            return []

    async def scrape_experience_league(self, query: str) -> list[ScrapedResource]:
        url = f"{EXPERIENCE_LEAGUE_ORIGIN}/search.html?q={quote(query, safe=URI_COMPONENT_SAFE)}"
        # Only Experience League rejects error pages; HelpX and Community parse whatever comes back
        return await self._scrape("Adobe Experience League", url, parse_experience_league, check_status=True)

    async def scrape_helpx(self, query: str) -> list[ScrapedResource]:
        url = f"{HELPX_ORIGIN}/search.html?q={quote(query, safe=URI_COMPONENT_SAFE)}"
        return await self._scrape("Adobe HelpX", url, parse_helpx)

    async def scrape_community(self, query: str) -> list[ScrapedResource]:
        url = f"{COMMUNITY_ORIGIN}/search?q={quote(query, safe=URI_COMPONENT_SAFE)}"
        return await self._scrape("Adobe Community", url, parse_community)

    async def scrape(self, body: ScrapeRequest) -> list[ScrapedResource]:
        """
        Run the three site scrapers for one module.

        Args:
            body: User context and module index

        Returns:
            Experience League, HelpX and Community results, in that order
        """
        logger.info(
            f"🕷️ Scraping for: {body.user_background} learning {body.target_skill} for {body.target_industry}"
        )
        logger.info(f"📝 Search term: {body.search_term}")
        queries = generate_personalized_queries(body)

        results = []
        results += await self.scrape_experience_league(queries.experience_league)
        results += await self.scrape_helpx(queries.help_x)
        results += await self.scrape_community(queries.community)

        logger.info(f"✅ Found {len(results)} real Adobe resources")
        return results


# Lazy singleton instance
_adobe_scraper_instance = None


def get_adobe_scraper() -> AdobeScraper:
    global _adobe_scraper_instance

    if _adobe_scraper_instance is None:
        _adobe_scraper_instance = AdobeScraper()
        logger.info("✅ AdobeScraper ready")

    return _adobe_scraper_instance
