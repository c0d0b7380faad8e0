from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.dependencies import ScrapeDep
from app.schemas.website import ErrorResponse, ScrapeOutcome, ScrapeRequest, ScrapeResponse

router = APIRouter()


def outcome_to_response(outcome: ScrapeOutcome) -> JSONResponse:
    if not outcome.ok:
        message = outcome.error.message if outcome.error else "Failed to scrape website"
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=message).model_dump(),
        )

    body = ScrapeResponse(
        extracted_data=outcome.result,
        final_url=outcome.final_url if outcome.final_url != outcome.requested_url else None,
    )
    return JSONResponse(
        status_code=200,
        content=body.model_dump(mode="json", by_alias=True, exclude_none=True),
    )


@router.post(
    "/scrape-website",
    response_model=ScrapeResponse,
    responses={500: {"model": ErrorResponse}},
)
async def scrape_website(
    service: ScrapeDep,
    request: ScrapeRequest | None = None,
) -> JSONResponse:
    outcome = await service.run(request or ScrapeRequest())
    return outcome_to_response(outcome)
