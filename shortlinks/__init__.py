"""Core business logic for URL shortener."""

from .shortcode import ShortCodeGenerator
from .service import URLShortenerService
from .redirect import RedirectEngine
from .analytics import AnalyticsReader
from .store import InMemoryURLStore, VisitContext

__all__ = [
    "ShortCodeGenerator",
    "URLShortenerService",
    "RedirectEngine",
    "AnalyticsReader",
    "InMemoryURLStore",
    "VisitContext",
]
