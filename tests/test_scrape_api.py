"""
Tests for the Adobe site scraper and its endpoint
"""

import httpx
import pytest

EXPERIENCE_LEAGUE_HTML = """
<div class="search-result-item">
  <h3 class="result-title"><a href="/docs/illustrator/logo.html">Logo design in Illustrator</a></h3>
  <p class="result-description">Build a logo from shapes.</p>
  <span class="duration">12 min</span>
</div>
<div class="search-result-item">
  <h3 class="result-title"><a href="https://experienceleague.adobe.com/docs/type.html">Type basics</a></h3>
</div>
<div class="search-result-item">
  <h3 class="result-title">No link here</h3>
</div>
"""

HELPX_HTML = """
<div class="help-result">
  <div class="title"><a href="/illustrator/using/pen-tool.html">Use the Pen tool</a></div>
  <div class="description">Draw paths precisely.</div>
</div>
"""

COMMUNITY_HTML = """
<div class="community-post">
  <div class="post-title"><a href="/t5/illustrator/my-first-logo/td-p/1">My first logo</a></div>
  <div class="post-excerpt">Feedback welcome</div>
  <span class="author-name">Anna</span>
</div>
"""

BODY = {
    "userGoals": "Move from textiles to logo design",
    "targetSkill": "logo design",
    "userBackground": "textile designer",
    "targetIndustry": "fashion",
    "searchTerm": "Logo Foundations",
    "moduleIndex": 0,
}


def _site_handler(overrides=None):
    pages = {
        "experienceleague.adobe.com": (200, EXPERIENCE_LEAGUE_HTML),
        "helpx.adobe.com": (200, HELPX_HTML),
        "community.adobe.com": (200, COMMUNITY_HTML),
    }
    pages.update(overrides or {})

    def handler(method, url, kwargs):
        for host, result in pages.items():
            if host in url:
                return result
        return (404, "")

    return handler


class TestPersonalizedQueries:
    """Test cases for generate_personalized_queries"""

    def test_variants_rotate_with_module_index(self):
        """Test the query variant follows module_index % 3"""
        from creative_coach.services.adobe_scraper import ScrapeRequest, generate_personalized_queries

        first = generate_personalized_queries(ScrapeRequest.model_validate(BODY))
        assert first.experience_league == '"logo design" "textile designer" tutorial'
        assert first.help_x == '"logo design" "fashion" best practices'
        assert first.community == '"logo design" "fashion" examples'

        third = generate_personalized_queries(ScrapeRequest.model_validate({**BODY, "moduleIndex": 2}))
        assert third.experience_league == '"logo design" professional "textile designer to logo design"'

        wrapped = generate_personalized_queries(ScrapeRequest.model_validate({**BODY, "moduleIndex": 3}))
        assert wrapped == first


class TestParsers:
    """Test cases for the HTML parsers"""

    def test_experience_league(self):
        """Test relative links are prefixed and linkless items skipped"""
        from creative_coach.services.adobe_scraper import parse_experience_league

        results = parse_experience_league(EXPERIENCE_LEAGUE_HTML)

        assert len(results) == 2
        assert results[0].url == "https://experienceleague.adobe.com/docs/illustrator/logo.html"
        assert results[0].duration == "12 min"
        assert results[1].url == "https://experienceleague.adobe.com/docs/type.html"
        assert results[1].duration == "Self-paced"
        assert results[1].summary == ""

    def test_community_author(self):
        """Test community posts carry the author"""
        from creative_coach.services.adobe_scraper import parse_community

        results = parse_community(COMMUNITY_HTML)
        assert results[0].author == "Anna"
        assert results[0].type == "discussion"


class TestAdobeScraper:
    """Test cases for AdobeScraper"""

    @pytest.mark.asyncio
    async def test_scrape_all_sites(self, fake_httpx):
        """Test the three sites are scraped in order with encoded queries"""
        from creative_coach.services.adobe_scraper import AdobeScraper, ScrapeRequest

        fake_httpx.handler = _site_handler()

        results = await AdobeScraper(timeout=5, max_results=5).scrape(ScrapeRequest.model_validate(BODY))

        assert [result.source for result in results] == [
            "Adobe Experience League",
            "Adobe Experience League",
            "Adobe HelpX",
            "Adobe Community",
        ]
        assert fake_httpx.calls[0]["url"] == (
            "https://experienceleague.adobe.com/search.html?q=%22logo%20design%22%20%22textile%20designer%22%20tutorial"
        )
        assert fake_httpx.calls[0]["headers"]["User-Agent"]

    @pytest.mark.asyncio
    async def test_site_failure_is_isolated(self, fake_httpx):
        """Test one failing site doesn't affect the others"""
        from creative_coach.services.adobe_scraper import AdobeScraper, ScrapeRequest

        fake_httpx.handler = _site_handler({"helpx.adobe.com": httpx.ConnectError("refused")})

        results = await AdobeScraper(timeout=5, max_results=5).scrape(ScrapeRequest.model_validate(BODY))

        assert "Adobe HelpX" not in [result.source for result in results]
        assert len(results) == 3

    @pytest.mark.asyncio
    async def test_experience_league_error_page_gives_empty(self, fake_httpx):
        """Test a non-2xx Experience League page counts as a site failure"""
        from creative_coach.services.adobe_scraper import AdobeScraper

        fake_httpx.respond((503, EXPERIENCE_LEAGUE_HTML))

        assert await AdobeScraper(timeout=5, max_results=5).scrape_experience_league("logos") == []

    @pytest.mark.asyncio
    async def test_helpx_and_community_parse_any_status(self, fake_httpx):
        """Test HelpX and Community pages are parsed whatever the status code"""
        from creative_coach.services.adobe_scraper import AdobeScraper

        scraper = AdobeScraper(timeout=5, max_results=5)

        fake_httpx.respond((404, HELPX_HTML))
        assert [result.title for result in await scraper.scrape_helpx("pen tool")] == ["Use the Pen tool"]

        fake_httpx.respond((503, COMMUNITY_HTML))
        assert [result.author for result in await scraper.scrape_community("logos")] == ["Anna"]

    @pytest.mark.asyncio
    async def test_max_results(self, fake_httpx):
        """Test each site is capped at max_results"""
        from creative_coach.services.adobe_scraper import AdobeScraper

        fake_httpx.respond((200, EXPERIENCE_LEAGUE_HTML))

        assert len(await AdobeScraper(timeout=5, max_results=1).scrape_experience_league("logos")) == 1


class TestScrapeEndpoint:
    """Test cases for POST /api/scrape-adobe-content"""

    def test_scrape_endpoint(self, client, fake_httpx):
        """Test the endpoint wraps results and drops empty optional fields"""
        fake_httpx.handler = _site_handler()

        response = client.post("/api/scrape-adobe-content", json=BODY)

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert len(data["results"]) == 4
        assert "author" not in data["results"][0]
        assert data["results"][3]["author"] == "Anna"

    def test_scrape_endpoint_failure(self, client, monkeypatch):
        """Test unexpected errors become a 500 with a message"""

        class Broken:
            async def scrape(self, body):
                raise RuntimeError("parser exploded")

        monkeypatch.setattr("creative_coach.api.scrape.get_adobe_scraper", lambda: Broken())

        response = client.post("/api/scrape-adobe-content", json=BODY)

        assert response.status_code == 500
        assert response.json() == {"error": "Scraping failed", "message": "parser exploded"}
