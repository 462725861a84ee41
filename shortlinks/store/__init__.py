"""URL record storage."""

from .base import URLStoreBase
from .memory import InMemoryURLStore, DEFAULT_VALIDITY_MINUTES
from .models import URLRecord, URLRecordView, VisitContext, VisitEvent, DIRECT_REFERRER

__all__ = [
    "URLStoreBase",
    "InMemoryURLStore",
    "DEFAULT_VALIDITY_MINUTES",
    "URLRecord",
    "URLRecordView",
    "VisitContext",
    "VisitEvent",
    "DIRECT_REFERRER",
]
