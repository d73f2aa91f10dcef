"""Crawler and parsers for tibia.com pages."""

from .config import CrawlerConfig
from .errors import TibiaCrawlerError
from .parsers import BoostableBossesParser, ParseOptions
from .tibia import BoostableBoss, BoostableBosses

__version__ = "0.1.0"

__all__ = [
    "BoostableBoss",
    "BoostableBosses",
    "BoostableBossesParser",
    "CrawlerConfig",
    "ParseOptions",
    "TibiaCrawlerError",
    "__version__",
]
