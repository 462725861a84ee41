"""Short code generation utilities."""

import random
import string
from typing import Optional


class ShortCodeGenerator:
    """Generate random short codes for URLs.
    
    Codes carry no uniqueness guarantee; the store rejects collisions.
    """
    
    # Base62 characters (alphanumeric, case-sensitive)
    BASE62_CHARS = string.ascii_letters + string.digits  # a-zA-Z0-9
    
    def __init__(self, default_length: int = 6, rng: Optional[random.Random] = None):
        """Initialize short code generator.
        
        Args:
            default_length: Length of generated codes
            rng: Optional random source (uses the module-level generator if not given)
        """
        if default_length < 1:
            raise ValueError("Short code length must be at least 1")
        self.default_length = default_length
        self._rng = rng or random
    
    def generate(self) -> str:
        """Generate a random short code drawn uniformly from BASE62_CHARS."""
        return ''.join(self._rng.choices(self.BASE62_CHARS, k=self.default_length))
