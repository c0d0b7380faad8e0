import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings
from app.exceptions.handlers import request_validation_error_handler, unhandled_error_handler
from app.routers.scrape import router as scrape_router
from app.services.scrape import ScrapeService
from app.services.supabase import SupabaseService
from app.services.website_scraper import WebsiteScraperService

CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    async with httpx.AsyncClient(timeout=settings.fetch_timeout) as client:
        scraper = WebsiteScraperService(client, timeout=settings.fetch_timeout)
        store = SupabaseService(
            client, settings.supabase_url, settings.supabase_service_role_key
        )
        app.state.scrape_service = ScrapeService(scraper, store)

        yield


app = FastAPI(title="Website Scraper", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=CORS_ALLOW_HEADERS,
)

app.add_exception_handler(RequestValidationError, request_validation_error_handler)
app.add_exception_handler(Exception, unhandled_error_handler)

app.include_router(scrape_router)
