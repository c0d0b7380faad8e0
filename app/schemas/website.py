from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.exceptions.custom import ScrapeError


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FetchedPage(BaseModel):
    requested_url: str
    final_url: str
    html: str

    @property
    def redirected(self) -> bool:
        return self.final_url != self.requested_url


class ExtractionResult(CamelModel):
    model_config = ConfigDict(frozen=True)

    url: str
    title: str = ""
    description: str = ""
    main_content: str = ""  # first 2000 chars of cleaned text
    business_keywords: list[str] = []  # vocabulary order
    company_terms: list[str] = []  # first-seen order, max 20
    navigation_items: list[str] = []  # document order, max 15
    extracted_at: datetime
    word_count: int = 0


class ScrapeRequest(CamelModel):
    website_url: str | None = None
    user_id: str | None = None


class ScrapeResponse(CamelModel):
    success: bool = True
    message: str = "Website scraped successfully"
    extracted_data: ExtractionResult
    final_url: str | None = None  # only set when redirected


class ErrorResponse(BaseModel):
    error: str


class ScrapeOutcome(BaseModel):
    """Result-or-error returned by the scrape pipeline."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    requested_url: str | None = None
    final_url: str | None = None
    result: ExtractionResult | None = None
    error: ScrapeError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.result is not None

    @classmethod
    def success(
        cls, requested_url: str, final_url: str, result: ExtractionResult
    ) -> ScrapeOutcome:
        return cls(requested_url=requested_url, final_url=final_url, result=result)

    @classmethod
    def failure(cls, error: ScrapeError, requested_url: str | None = None) -> ScrapeOutcome:
        return cls(requested_url=requested_url, error=error)
