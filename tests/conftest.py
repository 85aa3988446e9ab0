"""Pytest configuration and shared fixtures."""
import pytest
from datetime import datetime, timedelta, timezone

from config import config


@pytest.fixture
def span_start():
    """Fixture providing the reference start instant for time spans."""
    return datetime(2000, 2, 1, 10, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def offset_default_timezone(monkeypatch):
    """Fixture interpreting zone-less inputs as UTC+02:00."""
    zone = timezone(timedelta(hours=2))
    monkeypatch.setattr(config, "default_timezone", zone)
    return zone


@pytest.fixture
def strict_rfc2822(monkeypatch):
    """Fixture disabling the natural-language fallback of the RFC 2822 parser."""
    monkeypatch.setattr(config, "allow_natural_language", False)
