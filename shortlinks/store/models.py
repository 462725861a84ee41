"""Data models for URL shortener."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Tuple


DIRECT_REFERRER = "direct"


@dataclass(frozen=True)
class VisitContext:
    """Request details needed to record a visit."""
    
    client_address: str
    referrer: Optional[str] = None


@dataclass(frozen=True)
class VisitEvent:
    """One redirect occurrence."""
    
    timestamp: datetime
    referrer: str
    client_address: str
    
    @classmethod
    def from_context(cls, context: VisitContext, timestamp: datetime) -> "VisitEvent":
        """Build a visit event, defaulting the referrer to 'direct'."""
        return cls(
            timestamp=timestamp,
            referrer=context.referrer or DIRECT_REFERRER,
            client_address=context.client_address,
        )


@dataclass
class URLRecord:
    """A shortened URL as held by the store.
    
    Only the store mutates a record, and only through ``add_visit``.
    """
    
    short_code: str
    long_url: str
    created_at: datetime
    expires_at: datetime
    click_count: int = 0
    visitors: List[VisitEvent] = field(default_factory=list)
    
    def is_expired(self, now: datetime) -> bool:
        """A record is still live at exactly expires_at."""
        return now > self.expires_at
    
    def add_visit(self, event: VisitEvent) -> None:
        self.visitors.append(event)
        self.click_count += 1
    
    def snapshot(self) -> "URLRecordView":
        """Copy the record into an immutable view."""
        return URLRecordView(
            short_code=self.short_code,
            long_url=self.long_url,
            created_at=self.created_at,
            expires_at=self.expires_at,
            click_count=self.click_count,
            visitors=tuple(self.visitors),
        )


@dataclass(frozen=True)
class URLRecordView:
    """Point-in-time snapshot of a URL record."""
    
    short_code: str
    long_url: str
    created_at: datetime
    expires_at: datetime
    click_count: int
    visitors: Tuple[VisitEvent, ...]
