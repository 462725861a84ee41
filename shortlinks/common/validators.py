"""Validation utilities for URL shortener."""

from urllib.parse import urlparse
from typing import Tuple


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate a long URL.
    
    Any absolute URL is accepted: it needs a scheme and a host.
    
    Args:
        url: The URL to validate
        
    Returns:
        Tuple of (is_valid, error_message)
    """
    try:
        result = urlparse(url)
        
        if not result.scheme:
            return False, "URL must include a scheme (e.g. https://)"
        
        if not result.netloc or not result.hostname:
            return False, "URL must have a valid host"
        
        # Accessing the port validates it (raises on non-numeric or out of range)
        result.port
        
        return True, ""
        
    except ValueError as e:
        return False, f"Invalid URL format: {str(e)}"


def is_present(value) -> bool:
    """Return True if value is a non-empty string."""
    return isinstance(value, str) and value != ""
