import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

# Server-error responses bypass CORSMiddleware, so they carry the header themselves
_CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}


async def request_validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.error("Invalid request body: %s", exc.errors())
    return JSONResponse(
        status_code=500,
        content={"error": "Website URL and user ID are required"},
    )


async def unhandled_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error in scrape-website: %s", exc, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"error": str(exc) or "Failed to scrape website"},
        headers=_CORS_HEADERS,
    )
