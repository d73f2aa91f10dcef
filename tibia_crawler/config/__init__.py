"""Configuration package exports."""

from .loader import ConfigLocator, ConfigRepository
from .models import (
    DEFAULT_BASE_URL,
    MAINTENANCE_HOST,
    CrawlerConfig,
    RateLimitConfig,
    ServerSaveWindow,
)

__all__ = [
    "ConfigLocator",
    "ConfigRepository",
    "CrawlerConfig",
    "DEFAULT_BASE_URL",
    "MAINTENANCE_HOST",
    "RateLimitConfig",
    "ServerSaveWindow",
]
