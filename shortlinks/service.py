"""Business logic service for URL shortener."""

import logging
from typing import Optional, Dict, Any, Union

from .analytics import AnalyticsReader
from .common.clock import Clock, utc_now
from .errors import InvalidInputError, ShortLinkError
from .redirect import RedirectEngine
from .shortcode import ShortCodeGenerator
from .store.base import URLStoreBase
from .store.memory import InMemoryURLStore, DEFAULT_VALIDITY_MINUTES
from .store.models import URLRecordView, VisitContext


class URLShortenerService:
    """Service layer for URL shortening business logic."""
    
    def __init__(
        self,
        store: Optional[URLStoreBase] = None,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        logger: Optional[logging.Logger] = None,
        enable_custom_codes: bool = True,
        max_collision_retries: int = 0,
        default_validity_minutes: int = DEFAULT_VALIDITY_MINUTES,
        clock: Clock = utc_now,
    ):
        """Initialize URL shortener service.
        
        Args:
            store: Optional store instance (an in-memory store is built if not given)
            short_code_generator: Optional short code generator for the built store
            logger: Optional logger
            enable_custom_codes: Whether to allow custom short codes
            max_collision_retries: Retries when a generated code collides
            default_validity_minutes: Validity used when a request gives none
            clock: Callable returning the current UTC time for the built store
        """
        self.logger = logger or logging.getLogger(__name__)
        self.store = store or InMemoryURLStore(
            short_code_generator=short_code_generator,
            clock=clock,
            default_validity_minutes=default_validity_minutes,
            max_collision_retries=max_collision_retries,
            logger=self.logger,
        )
        self.redirects = RedirectEngine(self.store)
        self.analytics = AnalyticsReader(self.store)
        self.enable_custom_codes = enable_custom_codes
    
    def create_short_url(
        self,
        original_url: str,
        validity_minutes: Optional[Union[int, float]] = None,
        custom_code: Optional[str] = None,
    ) -> URLRecordView:
        """Create a new short URL.
        
        Args:
            original_url: The original long URL
            validity_minutes: Optional validity window in minutes
            custom_code: Optional custom short code
            
        Returns:
            Snapshot of the created record
            
        Raises:
            ShortLinkError: If validation fails or the short code is taken
        """
        try:
            if custom_code and not self.enable_custom_codes:
                raise InvalidInputError("Custom short codes are not enabled")
            
            record = self.store.create(
                original_url,
                validity_minutes=validity_minutes,
                requested_code=custom_code,
            )
        except ShortLinkError as e:
            self.logger.warning(f"Rejected short URL for {original_url!r}: {e}", extra={"package": "handler"})
            raise
        
        self.logger.info(
            f"Created short URL: {record.short_code} -> {record.long_url} "
            f"(expires {record.expires_at.isoformat()})",
            extra={"package": "db"},
        )
        return record
    
    def resolve(self, short_code: str, visit_context: VisitContext) -> str:
        """Resolve a short code for redirect, recording the visit.
        
        Raises:
            ShortcodeNotFoundError: If the short code does not exist
            ShortcodeExpiredError: If the short code has expired
        """
        try:
            long_url = self.redirects.resolve(short_code, visit_context)
        except ShortLinkError as e:
            self.logger.warning(f"Redirect failed: {e}", extra={"package": "handler"})
            raise
        
        self.logger.debug(f"Redirecting {short_code} -> {long_url}", extra={"package": "handler"})
        return long_url
    
    def get_stats(self, short_code: str) -> URLRecordView:
        """Get click analytics for a short code."""
        try:
            return self.analytics.stats(short_code)
        except ShortLinkError as e:
            self.logger.warning(f"Stats lookup failed: {e}", extra={"package": "handler"})
            raise
    
    def health_check(self) -> Dict[str, Any]:
        """Perform health check.
        
        Returns:
            Dictionary with store status and record count
        """
        try:
            records = self.store.count()
            store_healthy = True
        except Exception:
            self.logger.exception("Store health check failed", extra={"package": "db"})
            records = 0
            store_healthy = False
        
        return {
            "store": store_healthy,
            "records": records,
            "overall": store_healthy,
        }
