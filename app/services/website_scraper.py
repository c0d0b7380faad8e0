import logging

import httpx

from app.exceptions.custom import FetchError, NetworkError
from app.schemas.website import FetchedPage

logger = logging.getLogger(__name__)

USER_AGENT = "Mozilla/5.0 (compatible; ONEGO-Learning-Bot/1.0)"
_TIMEOUT = 30.0


class WebsiteScraperService:
    def __init__(self, client: httpx.AsyncClient, timeout: float = _TIMEOUT):
        self._client = client
        self._timeout = timeout

    async def fetch(self, url: str) -> FetchedPage:
        """GET a page following redirects. Raises FetchError or NetworkError."""
        try:
            resp = await self._client.get(
                url,
                follow_redirects=True,
                timeout=self._timeout,
                headers={"User-Agent": USER_AGENT},
            )
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            # Includes redirect loops and undecodable bodies
            logger.error("Network error fetching %s: %s", url, exc)
            raise NetworkError(f"Failed to fetch website: {exc}") from exc

        if not resp.is_success:
            logger.warning("Fetching %s returned %d", url, resp.status_code)
            raise FetchError(resp.status_code, resp.reason_phrase)

        page = FetchedPage(requested_url=url, final_url=str(resp.url), html=resp.text)
        if page.redirected:
            logger.info("Followed redirect %s -> %s", url, page.final_url)
        return page
