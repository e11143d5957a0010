from fastapi import APIRouter
from fastapi.responses import JSONResponse
import logging

from creative_coach.services.adobe_scraper import ScrapeRequest, ScrapeResponse, get_adobe_scraper

router = APIRouter(
    tags=["Scraping"],
)

logger = logging.getLogger(__name__)


@router.post("/scrape-adobe-content")
async def scrape_adobe_content(body: ScrapeRequest):
    """
    Scrape Adobe Experience League, HelpX and Community for one learning module.

    Per-site failures give an empty list for that site; anything else is a 500
    with {"error": "Scraping failed", "message": ...}.
    """
    try:
        results = await get_adobe_scraper().scrape(body)
        return ScrapeResponse(results=results).model_dump(exclude_none=True)
    except Exception as e:
        logger.error(f"❌ Backend scraping error: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Scraping failed", "message": str(e)})
