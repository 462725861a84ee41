"""Tests for service layer."""

import logging
from datetime import timedelta

import pytest

from conftest import FakeClock
from shortlinks.errors import (
    InvalidInputError,
    InvalidUrlFormatError,
    ShortcodeConflictError,
    ShortcodeExpiredError,
    ShortcodeNotFoundError,
)
from shortlinks.service import URLShortenerService
from shortlinks.store.models import VisitContext


class TestURLShortenerService:
    """Test URL shortener service."""
    
    def test_create_short_url(self, service, sample_urls):
        """Test creating short URL."""
        record = service.create_short_url(sample_urls[0])
        
        assert len(record.short_code) == 6
        assert record.long_url == sample_urls[0]
        assert record.expires_at - record.created_at == timedelta(minutes=30)
    
    def test_create_with_custom_code(self, service, sample_urls):
        """Test creating with custom code."""
        record = service.create_short_url(sample_urls[0], custom_code="test123")
        
        assert record.short_code == "test123"
    
    def test_create_duplicate_custom_code(self, service, sample_urls):
        """Test duplicate custom code rejection."""
        service.create_short_url(sample_urls[0], custom_code="duplicate")
        
        with pytest.raises(ShortcodeConflictError, match="already in use"):
            service.create_short_url(sample_urls[1], custom_code="duplicate")
    
    def test_custom_codes_disabled(self, logger, sample_urls):
        service = URLShortenerService(logger=logger, enable_custom_codes=False)
        
        with pytest.raises(InvalidInputError, match="not enabled"):
            service.create_short_url(sample_urls[0], custom_code="mine")
        
        assert len(service.create_short_url(sample_urls[0]).short_code) == 6
    
    def test_validation(self, service):
        """Test input validation."""
        with pytest.raises(InvalidInputError):
            service.create_short_url("")
        with pytest.raises(InvalidInputError):
            service.create_short_url(None)
        with pytest.raises(InvalidUrlFormatError):
            service.create_short_url("not-a-url")
        
        assert service.create_short_url("https://example.com").long_url == "https://example.com"
    
    def test_resolve_and_stats(self, service, sample_urls):
        record = service.create_short_url(sample_urls[1])
        
        url = service.resolve(record.short_code, VisitContext(client_address="1.2.3.4"))
        
        assert url == sample_urls[1]
        assert service.get_stats(record.short_code).click_count == 1
    
    def test_resolve_nonexistent(self, service):
        with pytest.raises(ShortcodeNotFoundError):
            service.resolve("nonexistent", VisitContext(client_address="1.2.3.4"))
    
    def test_stats_nonexistent(self, service):
        with pytest.raises(ShortcodeNotFoundError):
            service.get_stats("nonexistent")
    
    def test_builds_store_from_options(self, logger):
        clock = FakeClock()
        service = URLShortenerService(logger=logger, default_validity_minutes=15, clock=clock)
        
        record = service.create_short_url("https://example.com")
        assert record.created_at == clock.now
        assert record.expires_at == clock.now + timedelta(minutes=15)
    
    def test_logs_outcomes(self, service, caplog):
        with caplog.at_level(logging.INFO, logger="url_shortener"):
            service.create_short_url("https://example.com", custom_code="logged")
            with pytest.raises(ShortcodeConflictError):
                service.create_short_url("https://example.com", custom_code="logged")
        
        created = [r for r in caplog.records if "Created short URL" in r.getMessage()]
        rejected = [r for r in caplog.records if "Rejected short URL" in r.getMessage()]
        assert created and created[0].package == "db"
        assert rejected and rejected[0].levelno == logging.WARNING
    
    def test_health_check(self, service):
        """Test health check."""
        service.create_short_url("https://example.com")
        
        health = service.health_check()
        
        assert health == {"store": True, "records": 1, "overall": True}
    
    def test_health_check_store_failure(self, service, monkeypatch):
        def broken():
            raise RuntimeError("store unavailable")
        
        monkeypatch.setattr(service.store, "count", broken)
        
        health = service.health_check()
        assert health["overall"] is False
        assert health["store"] is False


class TestEndToEnd:
    """The create, redirect, expire scenario against the core."""
    
    def test_scenario(self, service, clock):
        record = service.create_short_url("https://openai.com", validity_minutes=1)
        assert record.expires_at == clock.now + timedelta(minutes=1)
        
        url = service.resolve(record.short_code, VisitContext(client_address="1.2.3.4"))
        assert url == "https://openai.com"
        assert service.get_stats(record.short_code).click_count == 1
        
        clock.advance(minutes=1, seconds=1)
        with pytest.raises(ShortcodeExpiredError):
            service.resolve(record.short_code, VisitContext(client_address="1.2.3.4"))
        
        assert service.get_stats(record.short_code).click_count == 1
