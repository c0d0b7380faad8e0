from typing import Annotated

from fastapi import Depends, Request

from app.services.scrape import ScrapeService


def get_scrape_service(request: Request) -> ScrapeService:
    return request.app.state.scrape_service


ScrapeDep = Annotated[ScrapeService, Depends(get_scrape_service)]
