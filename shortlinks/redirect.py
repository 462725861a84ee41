"""Redirect resolution with visit accounting."""

from .errors import ShortcodeExpiredError
from .store.base import URLStoreBase
from .store.models import VisitContext, VisitEvent


class RedirectEngine:
    """Resolve short codes to their long URLs and record each visit."""
    
    def __init__(self, store: URLStoreBase):
        self.store = store
    
    def resolve(self, short_code: str, visit_context: VisitContext) -> str:
        """Resolve a short code and count the visit.
        
        The expiry check, click increment and visitor append happen while the
        store holds the record, so concurrent resolutions never lose a click.
        A record is still resolvable at exactly its expiry time.
        
        Args:
            short_code: The short code to resolve
            visit_context: Referrer and client address of the request
            
        Returns:
            The long URL to redirect to
            
        Raises:
            ShortcodeNotFoundError: If the short code does not exist
            ShortcodeExpiredError: If the current time is past expires_at
        """
        with self.store.locked_record(short_code) as record:
            now = self.store.clock()
            
            if record.is_expired(now):
                raise ShortcodeExpiredError(
                    f"Short code '{short_code}' has expired",
                    short_code=short_code,
                )
            
            record.add_visit(VisitEvent.from_context(visit_context, now))
            return record.long_url
