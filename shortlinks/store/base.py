"""Abstract base class for URL record stores."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Optional, Union

from .models import URLRecord, URLRecordView
from ..common.clock import Clock


class URLStoreBase(ABC):
    """Abstract base class for URL record storage.
    
    A store owns every URL record for the lifetime of the process and is the
    only place records are created or mutated.
    """
    
    def __init__(self, clock: Clock):
        """Initialize store.
        
        Args:
            clock: Callable returning the current UTC time
        """
        self.clock = clock
    
    @abstractmethod
    def create(
        self,
        long_url: str,
        validity_minutes: Optional[Union[int, float]] = None,
        requested_code: Optional[str] = None,
    ) -> URLRecordView:
        """Create and store a new URL record.
        
        Args:
            long_url: The redirect target
            validity_minutes: Minutes until expiry (default applies when falsy)
            requested_code: Optional caller-supplied short code, used verbatim
            
        Returns:
            Snapshot of the stored record
            
        Raises:
            InvalidInputError: If long_url is missing or validity is out of range
            InvalidUrlFormatError: If long_url is not an absolute URL
            ShortcodeConflictError: If the resulting short code already exists
        """
        pass
    
    @abstractmethod
    def get(self, short_code: str) -> URLRecordView:
        """Get a snapshot of a record.
        
        Args:
            short_code: The short code to lookup
            
        Returns:
            Snapshot of the record
            
        Raises:
            ShortcodeNotFoundError: If no record exists for short_code
        """
        pass
    
    @abstractmethod
    def locked_record(self, short_code: str) -> AbstractContextManager[URLRecord]:
        """Hold exclusive access to a live record.
        
        The mutable record is only valid inside the ``with`` block. Raising
        inside the block leaves the record untouched.
        
        Raises:
            ShortcodeNotFoundError: If no record exists for short_code
        """
        pass
    
    @abstractmethod
    def count(self) -> int:
        """Return the number of stored records."""
        pass
