"""API routes implementation."""

import logging

from fastapi import APIRouter, Request, HTTPException, status
from datetime import datetime, timezone

from .schemas import (
    ShortenRequest,
    ShortenResponse,
    StatsResponse,
    HealthResponse,
    ErrorResponse,
)
from ..errors import to_http_exception
from shortlinks.common.url_builder import build_short_link
from shortlinks.errors import ShortLinkError

router = APIRouter()
logger = logging.getLogger("url_shortener.web")


@router.post(
    "/shorturls",
    response_model=ShortenResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        409: {"model": ErrorResponse, "description": "Short code already exists"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Create short URL",
    description="Create a shortened URL. Optionally provide a validity in minutes and a custom short code.",
)
async def shorten_url(request: Request, body: ShortenRequest):
    """Create a shortened URL."""
    service = request.app.state.service
    config = request.app.state.config
    
    try:
        record = service.create_short_url(
            original_url=body.url,
            validity_minutes=body.validity,
            custom_code=body.shortcode,
        )
    except ShortLinkError as e:
        raise to_http_exception(e)
    except Exception:
        logger.exception("Error creating short URL", extra={"package": "handler"})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not create short URL",
        )
    
    short_link = build_short_link(
        short_code=record.short_code,
        headers=dict(request.headers),
        fallback_base_url=config.base_url,
        configured_prefix=config.path_prefix,
        request_scheme=request.url.scheme,
        request_host=request.headers.get("host"),
    )
    
    return ShortenResponse(
        short_code=record.short_code,
        short_link=short_link,
        expiry=record.expires_at,
    )


@router.get(
    "/shorturls/{short_code}",
    response_model=StatsResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Short code not found"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Get short URL statistics",
    description="Get click count, timestamps and visitor history. Expired short URLs are still reported.",
)
async def get_url_stats(request: Request, short_code: str):
    """Get click analytics for a shortened URL."""
    service = request.app.state.service
    
    try:
        view = service.get_stats(short_code)
    except ShortLinkError as e:
        raise to_http_exception(e)
    except Exception:
        logger.exception("Error reading short URL stats", extra={"package": "handler"})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not get URL info",
        )
    
    return StatsResponse.from_view(view)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service is healthy.",
)
async def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    service = request.app.state.service
    
    health = service.health_check()
    
    return HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        store="healthy" if health["store"] else "unhealthy",
        records=health["records"],
        timestamp=datetime.now(timezone.utc),
    )
