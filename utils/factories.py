#!/usr/bin/python3

# =============================================================================
#
# Copyright 2017 by Leland Lucius
#
# Released under the GNU Affero GPL
# See: https://github.com/lllucius/climacast/blob/master/LICENSE
#
# =============================================================================

import logging
from datetime import timedelta
from typing import Optional

import httpx

from avalanche.detail import DetailSource
from avalanche.fetcher import ForecastFetcher
from avalanche.orchestrator import ForecastOrchestrator
from storage.cache_handler import CacheHandler
from storage.forecast_store import ForecastCacheStore
from utils.config import Config

# Configure logging
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

# =============================================================================
# Factory Functions for Singleton Instances
# =============================================================================

_https_client = None


def get_https_client() -> httpx.Client:
    """
    Get or create the global HTTPS client instance.

    Returns:
        httpx.Client: Configured HTTP client for API calls
    """
    global _https_client
    if _https_client is None:
        _https_client = httpx.Client(timeout=Config.HTTP_TIMEOUT, follow_redirects=True)
    return _https_client


_cache_handler_instance = None


def get_cache_handler():
    """
    Get or create the global cache handler instance.

    Returns:
        CacheHandler: Configured cache handler for DynamoDB operations
    """
    global _cache_handler_instance
    if _cache_handler_instance is None:
        _cache_handler_instance = CacheHandler(
            table_name=Config.DYNAMODB_TABLE_NAME,
            region=Config.DYNAMODB_REGION,
            ttl_days=Config.DEFAULT_CACHE_TTL_DAYS,
        )
    return _cache_handler_instance


def set_cache_handler(handler) -> None:
    """
    Replace the global cache handler, e.g. with a LocalJsonCacheHandler
    for local testing. Clears the orchestrator built on the old one.
    """
    global _cache_handler_instance, _orchestrator_instance
    _cache_handler_instance = handler
    _orchestrator_instance = None


_orchestrator_instance = None


def get_orchestrator() -> ForecastOrchestrator:
    """
    Get or create the global forecast orchestrator.

    Returns:
        ForecastOrchestrator: Orchestrator backed by the cached forecast store
    """
    global _orchestrator_instance
    if _orchestrator_instance is None:
        fetcher = ForecastFetcher(Config.FORECAST_URL, get_https_client())
        store = ForecastCacheStore(
            get_cache_handler(),
            fetcher,
            key=Config.CACHE_KEY,
            ttl=timedelta(hours=Config.CACHE_TTL_HOURS),
            serve_stale=Config.SERVE_STALE_ON_ERROR,
        )
        _orchestrator_instance = ForecastOrchestrator(store)
    return _orchestrator_instance


_detail_source_instance = None


def get_detail_source() -> Optional[DetailSource]:
    """
    Get the bottom line lookup, if one has been installed.

    Returns:
        DetailSource or None
    """
    return _detail_source_instance


def set_detail_source(source: Optional[DetailSource]) -> None:
    """Install the bottom line lookup."""
    global _detail_source_instance
    _detail_source_instance = source
