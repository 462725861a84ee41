"""In-memory URL record store."""

import logging
import threading
from contextlib import contextmanager
from datetime import timedelta
from typing import Dict, Iterator, Optional, Union

from .base import URLStoreBase
from .models import URLRecord, URLRecordView
from ..common.clock import Clock, utc_now
from ..common.validators import is_present, is_valid_url
from ..errors import (
    InvalidInputError,
    InvalidUrlFormatError,
    ShortcodeConflictError,
    ShortcodeNotFoundError,
)
from ..shortcode import ShortCodeGenerator


DEFAULT_VALIDITY_MINUTES = 30


class InMemoryURLStore(URLStoreBase):
    """Dictionary-backed store guarded by a single lock.
    
    Every check-then-act sequence (conflict check + insert, expiry check +
    visit append) runs under the lock, and reads copy a snapshot under it.
    Expired records are never removed.
    """
    
    def __init__(
        self,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        clock: Clock = utc_now,
        default_validity_minutes: int = DEFAULT_VALIDITY_MINUTES,
        max_collision_retries: int = 0,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize in-memory store.
        
        Args:
            short_code_generator: Generator for codes when none is requested
            clock: Callable returning the current UTC time
            default_validity_minutes: Validity used when none is given
            max_collision_retries: Extra attempts when a generated code collides
                (0 surfaces the first collision as a conflict)
            logger: Optional logger
        """
        super().__init__(clock)
        if default_validity_minutes <= 0:
            raise ValueError("Default validity must be a positive number of minutes")
        self.generator = short_code_generator or ShortCodeGenerator()
        self.default_validity_minutes = default_validity_minutes
        self.max_collision_retries = max(0, max_collision_retries)
        self.logger = logger or logging.getLogger(__name__)
        self._records: Dict[str, URLRecord] = {}
        self._lock = threading.RLock()
    
    def create(
        self,
        long_url: str,
        validity_minutes: Optional[Union[int, float]] = None,
        requested_code: Optional[str] = None,
    ) -> URLRecordView:
        if not is_present(long_url):
            raise InvalidInputError("Please provide a URL")
        
        is_valid, error = is_valid_url(long_url)
        if not is_valid:
            raise InvalidUrlFormatError(f"URL format is not valid: {error}")
        
        validity = self._validity(validity_minutes)
        
        with self._lock:
            short_code = requested_code or self._generated_code()
            
            if short_code in self._records:
                raise ShortcodeConflictError(
                    f"Short code '{short_code}' is already in use",
                    short_code=short_code,
                )
            
            created_at = self.clock()
            try:
                expires_at = created_at + validity
            except OverflowError:
                raise InvalidInputError("Validity is too large")
            
            record = URLRecord(
                short_code=short_code,
                long_url=long_url,
                created_at=created_at,
                expires_at=expires_at,
            )
            self._records[short_code] = record
            return record.snapshot()
    
    def get(self, short_code: str) -> URLRecordView:
        with self._lock:
            return self._require(short_code).snapshot()
    
    @contextmanager
    def locked_record(self, short_code: str) -> Iterator[URLRecord]:
        with self._lock:
            yield self._require(short_code)
    
    def count(self) -> int:
        with self._lock:
            return len(self._records)
    
    def _require(self, short_code: str) -> URLRecord:
        record = self._records.get(short_code)
        if record is None:
            raise ShortcodeNotFoundError(
                f"Short code '{short_code}' not found",
                short_code=short_code,
            )
        return record
    
    def _generated_code(self) -> str:
        """Generate a code, retrying collisions up to max_collision_retries.
        
        Must be called with the lock held. The returned code may still
        collide; the caller reports that as a conflict.
        """
        code = self.generator.generate()
        for attempt in range(self.max_collision_retries):
            if code not in self._records:
                break
            self.logger.debug(f"Generated code {code} collided (attempt {attempt + 1})")
            code = self.generator.generate()
        return code
    
    def _validity(self, validity_minutes: Optional[Union[int, float]]) -> timedelta:
        # Falsy values (None, 0) fall back to the default
        if not validity_minutes:
            return timedelta(minutes=self.default_validity_minutes)
        
        if isinstance(validity_minutes, bool) or not isinstance(validity_minutes, (int, float)):
            raise InvalidInputError("Validity must be a number of minutes")
        
        try:
            validity = timedelta(minutes=validity_minutes)
        except (OverflowError, ValueError):
            raise InvalidInputError("Validity must be a finite number of minutes")
        
        if validity <= timedelta(0):
            raise InvalidInputError("Validity must be a positive number of minutes")
        
        return validity
