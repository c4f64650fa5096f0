"""
Fetch API endpoint for the Word Substitution Proxy application.

This module provides the endpoint that retrieves a remote page and
returns it with the target word replaced in its visible text.
"""

from collections.abc import Iterator

from fastapi import APIRouter, Body, Depends, HTTPException
from loguru import logger

from app.config import get_settings
from app.exceptions import FetchError
from app.models.request import FetchRequest
from app.models.response import ErrorResponse, FetchResponse
from app.services.fetcher import HTMLFetcher
from app.services.substitution import TextSubstitutionService
from app.services.substitution_exceptions import SubstitutionError

router = APIRouter()


def get_fetcher() -> Iterator[HTMLFetcher]:
    """Provide a fetcher whose session lives for one request."""
    fetcher = HTMLFetcher(get_settings())
    try:
        yield fetcher
    finally:
        fetcher.close()


def get_substitution_service() -> TextSubstitutionService:
    """Provide the substitution service."""
    return TextSubstitutionService()


@router.post(
    "/fetch",
    response_model=FetchResponse,
    responses={
        400: {"model": ErrorResponse, "description": "No URL given"},
        500: {"model": ErrorResponse, "description": "Fetching or processing failed"},
    },
)
def fetch_and_substitute(
    payload: FetchRequest | None = Body(default=None),
    fetcher: HTMLFetcher = Depends(get_fetcher),
    service: TextSubstitutionService = Depends(get_substitution_service),
) -> FetchResponse:
    """
    Fetch a remote page and replace the target word in its visible text.

    Args:
        payload: Request body carrying the page URL
        fetcher: Remote document fetcher
        service: Text substitution service

    Returns:
        FetchResponse: Rewritten document and substitution statistics

    Raises:
        HTTPException: 400 if no URL is given, 500 if fetching or processing fails
    """
    if payload is None or not payload.url:
        raise HTTPException(status_code=400, detail="URL is required")

    try:
        document = fetcher.fetch(payload.url)
    except FetchError as exc:
        logger.error(f"Fetch failed [{exc.error_type}]: {exc}")
        raise HTTPException(status_code=500, detail=f"Failed to fetch content: {exc}") from exc

    try:
        result = service.substitute(document.content, declared_encoding=document.encoding)
    except SubstitutionError as exc:
        logger.error(f"Processing failed [{exc.error_type}] for {document.url}: {exc}")
        raise HTTPException(status_code=500, detail=f"Failed to process content: {exc}") from exc

    logger.info(
        f"Rewrote {document.url}: {result.replacements} replacements, "
        f"{result.original_size} -> {result.final_size} chars"
    )
    return FetchResponse(
        success=True,
        content=result.content,
        title=result.title,
        original_url=document.url,
        replacements=result.replacements,
    )
