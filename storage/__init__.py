"""
Storage modules for the Avalanche Forecast skill.

This package contains the key-value stores and the forecast cache.
"""

from .cache_handler import CacheHandler
from .forecast_store import ForecastCacheStore, decode_snapshot, encode_snapshot
from .local_handlers import LocalJsonCacheHandler

__all__ = [
    "CacheHandler",
    "LocalJsonCacheHandler",
    "ForecastCacheStore",
    "encode_snapshot",
    "decode_snapshot",
]
