"""Redirect routes implementation."""

import logging

from fastapi import APIRouter, Request, HTTPException, status
from fastapi.responses import RedirectResponse

from ..errors import to_http_exception
from shortlinks.errors import ShortLinkError
from shortlinks.store.models import VisitContext

router = APIRouter()
logger = logging.getLogger("url_shortener.web")


@router.get(
    "/{short_code}",
    response_class=RedirectResponse,
    status_code=status.HTTP_302_FOUND,
    summary="Follow a short URL",
    responses={
        404: {"description": "Short code not found"},
        410: {"description": "Short code has expired"},
    },
)
async def redirect_to_original(request: Request, short_code: str):
    """Redirect to the original URL, recording the visit."""
    service = request.app.state.service
    
    visit = VisitContext(
        client_address=request.state.client_address,
        referrer=request.state.referrer,
    )
    
    try:
        original_url = service.resolve(short_code, visit)
    except ShortLinkError as e:
        raise to_http_exception(e)
    except Exception:
        logger.exception("Error redirecting", extra={"package": "handler"})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not redirect to URL",
        )
    
    # Perform 302 redirect (temporary redirect for tracking)
    return RedirectResponse(url=original_url, status_code=status.HTTP_302_FOUND)
