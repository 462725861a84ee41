"""Common utilities for URL shortener."""

from .validators import is_valid_url, is_present
from .headers import extract_forwarded_headers, build_base_url, get_client_address, get_referrer
from .url_builder import build_short_url, build_short_link
from .logging_config import setup_logging
from .clock import utc_now

__all__ = [
    "is_valid_url",
    "is_present",
    "extract_forwarded_headers",
    "build_base_url",
    "get_client_address",
    "get_referrer",
    "build_short_url",
    "build_short_link",
    "setup_logging",
    "utc_now",
]
