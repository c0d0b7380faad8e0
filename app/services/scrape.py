import logging

from app.exceptions.custom import ParkingPageError, ScrapeError, ValidationError
from app.mappers.page_extractor import extract_key_information, is_parking_page
from app.schemas.website import ScrapeOutcome, ScrapeRequest
from app.services.supabase import SupabaseService
from app.services.website_scraper import WebsiteScraperService

logger = logging.getLogger(__name__)


class ScrapeService:
    def __init__(self, scraper: WebsiteScraperService, store: SupabaseService):
        self._scraper = scraper
        self._store = store

    async def run(self, request: ScrapeRequest) -> ScrapeOutcome:
        """Fetch, check, extract and persist one page.

        Known failures come back as an error outcome; nothing is retried.
        """
        try:
            return await self._do_run(request)
        except ScrapeError as exc:
            logger.error("Scrape of %s failed: %s", request.website_url, exc.message)
            return ScrapeOutcome.failure(exc, requested_url=request.website_url)

    async def _do_run(self, request: ScrapeRequest) -> ScrapeOutcome:
        url = (request.website_url or "").strip()
        user_id = (request.user_id or "").strip()
        if not url or not user_id:
            raise ValidationError("Website URL and user ID are required")

        logger.info("Scraping website: %s for user: %s", url, user_id)
        page = await self._scraper.fetch(url)

        if is_parking_page(page.html):
            logger.warning("Parking page detected at %s", page.final_url)
            raise ParkingPageError(page.final_url)

        result = extract_key_information(page.html, page.final_url)
        logger.info(
            "Extracted %s: %d words, %d keywords, %d company terms, %d nav items",
            page.final_url,
            result.word_count,
            len(result.business_keywords),
            len(result.company_terms),
            len(result.navigation_items),
        )

        await self._store.upsert_scrape_record(user_id, page.final_url, result)
        return ScrapeOutcome.success(url, page.final_url, result)
