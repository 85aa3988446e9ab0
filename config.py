"""Configuration settings for the date utilities."""
from dataclasses import dataclass, field
from datetime import datetime, timezone, tzinfo


@dataclass
class Config:
    """Date utilities configuration settings.

    Centralized configuration to avoid hardcoded zone and parsing defaults
    throughout the codebase.
    """
    # Zone applied to naive datetimes, dates and zone-less date strings
    default_timezone: tzinfo = timezone.utc

    # Natural-language fallback for the RFC 2822 parser
    allow_natural_language: bool = True
    natural_language_default: datetime = field(
        default_factory=lambda: datetime(1970, 1, 1)
    )

    @classmethod
    def load(cls) -> 'Config':
        """
        Load configuration.

        Returns:
            Config instance with default values
        """
        return cls()


# Global config instance
config = Config.load()
