"""Infra layer utilities (rate limiting)."""

from .rate_limiter import Limiter, RateLimiter

__all__ = ["Limiter", "RateLimiter"]
