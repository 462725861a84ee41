"""Read-only click analytics."""

from .store.base import URLStoreBase
from .store.models import URLRecordView


class AnalyticsReader:
    """Expose click counts and visitor history for short codes."""
    
    def __init__(self, store: URLStoreBase):
        self.store = store
    
    def stats(self, short_code: str) -> URLRecordView:
        """Return a consistent snapshot of a record's analytics.
        
        Expired records are still reported.
        
        Raises:
            ShortcodeNotFoundError: If the short code does not exist
        """
        return self.store.get(short_code)
