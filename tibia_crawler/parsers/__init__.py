"""Parsers for tibia.com pages."""

from .base import ParseOptions, Parser
from .boostable_bosses import BoostableBossesExtractor, BoostableBossesParser

__all__ = [
    "BoostableBossesExtractor",
    "BoostableBossesParser",
    "ParseOptions",
    "Parser",
]
