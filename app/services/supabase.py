import logging
from datetime import datetime, timezone

import httpx

from app.exceptions.custom import PersistenceError
from app.schemas.website import ExtractionResult

logger = logging.getLogger(__name__)

TABLE = "company_website_data"
ON_CONFLICT = "user_id,website_url"


class SupabaseService:
    def __init__(self, client: httpx.AsyncClient, base_url: str, service_role_key: str):
        self._client = client
        self._table_url = f"{base_url.rstrip('/')}/rest/v1/{TABLE}"
        self._headers = {
            "apikey": service_role_key,
            "Authorization": f"Bearer {service_role_key}",
            "Content-Type": "application/json",
            "Prefer": "resolution=merge-duplicates,return=minimal",
        }

    async def upsert_scrape_record(
        self, user_id: str, website_url: str, data: ExtractionResult
    ) -> None:
        """Insert or overwrite the scrape record for (user_id, website_url)."""
        now = datetime.now(timezone.utc).isoformat()
        payload = {
            "user_id": user_id,
            "website_url": website_url,
            "scraped_content": data.model_dump(mode="json", by_alias=True),
            "last_scraped_at": now,
            "updated_at": now,
        }

        try:
            resp = await self._client.post(
                self._table_url,
                params={"on_conflict": ON_CONFLICT},
                json=payload,
                headers=self._headers,
            )
        except httpx.TransportError as exc:
            logger.error("Supabase upsert transport error: %s", exc)
            raise PersistenceError(str(exc)) from exc

        if resp.status_code >= 400:
            logger.error("Database upsert error: %s (status=%d)", resp.text, resp.status_code)
            raise PersistenceError(_error_message(resp), status_code=resp.status_code)

        logger.info("Stored scrape of %s for user %s", website_url, user_id)


def _error_message(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text
    if isinstance(body, dict) and body.get("message"):
        return body["message"]
    return resp.text
