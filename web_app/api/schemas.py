"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional
from datetime import datetime

from shortlinks.store.models import URLRecordView, VisitEvent


# Responses use camelCase on the wire and snake_case in Python
CAMEL_CASE = {
    "alias_generator": to_camel,
    "populate_by_name": True,
}


class ShortenRequest(BaseModel):
    """Request to shorten a URL."""
    
    url: Optional[str] = Field(None, description="The URL to shorten", max_length=2048)
    validity: Optional[float] = Field(None, description="Validity in minutes (default 30)")
    shortcode: Optional[str] = Field(None, description="Optional custom short code")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "url": "https://example.com/very/long/path/to/resource",
                    "validity": 30,
                },
                {
                    "url": "https://github.com/user/repo",
                    "validity": 60,
                    "shortcode": "myrepo",
                }
            ]
        }
    }


class ShortenResponse(BaseModel):
    """Response after shortening a URL."""
    
    short_code: str = Field(..., description="The short code")
    short_link: str = Field(..., description="The complete short URL")
    expiry: datetime = Field(..., description="Expiry timestamp")
    
    model_config = {
        **CAMEL_CASE,
        "json_schema_extra": {
            "examples": [
                {
                    "shortCode": "abc123",
                    "shortLink": "http://localhost:3000/abc123",
                    "expiry": "2024-01-01T12:30:00Z"
                }
            ]
        },
    }


class VisitResponse(BaseModel):
    """One recorded redirect."""
    
    timestamp: datetime
    referrer: str
    client_address: str
    
    model_config = CAMEL_CASE
    
    @classmethod
    def from_event(cls, event: VisitEvent) -> "VisitResponse":
        return cls(
            timestamp=event.timestamp,
            referrer=event.referrer,
            client_address=event.client_address,
        )


class StatsResponse(BaseModel):
    """Click analytics for a short code."""
    
    short_code: str
    click_count: int
    long_url: str
    created_at: datetime
    expires_at: datetime
    visitors: List[VisitResponse]
    
    model_config = CAMEL_CASE
    
    @classmethod
    def from_view(cls, view: URLRecordView) -> "StatsResponse":
        return cls(
            short_code=view.short_code,
            click_count=view.click_count,
            long_url=view.long_url,
            created_at=view.created_at,
            expires_at=view.expires_at,
            visitors=[VisitResponse.from_event(event) for event in view.visitors],
        )


class HealthResponse(BaseModel):
    """Health check response."""
    
    status: str = Field(..., description="Overall status")
    store: str = Field(..., description="Store status")
    records: int = Field(..., description="Number of stored short URLs")
    timestamp: datetime = Field(..., description="Check timestamp")


class ErrorResponse(BaseModel):
    """Error response."""
    
    error: str = Field(..., description="Error message")
