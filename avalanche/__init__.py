"""
Avalanche forecast modules for the Avalanche Forecast skill.

This package fetches, indexes and summarizes avalanche.org forecasts.
"""

from avalanche.detail import BOTTOM_LINE_STATES, DetailSource
from avalanche.errors import (AvalancheError, FetchError, NotFoundError,
                              ParseError, StoreError, UpstreamError)
from avalanche.fetcher import ForecastFetcher
from avalanche.indexer import index, normalize_region_key
from avalanche.models import (CONSIDERABLE, EXTREME, HIGH, LOW, MODERATE,
                              NO_RATING, BottomLine, CacheSnapshot,
                              ForecastEntry, RegionRequest, StateRequest,
                              SummaryPlan)
from avalanche.orchestrator import ForecastOrchestrator
from avalanche.summarizer import join_names, summarize

__all__ = [
    'ForecastEntry', 'CacheSnapshot', 'SummaryPlan', 'BottomLine',
    'RegionRequest', 'StateRequest',
    'NO_RATING', 'LOW', 'MODERATE', 'CONSIDERABLE', 'HIGH', 'EXTREME',
    'AvalancheError', 'FetchError', 'ParseError', 'NotFoundError',
    'StoreError', 'UpstreamError',
    'ForecastFetcher', 'index', 'normalize_region_key',
    'summarize', 'join_names',
    'ForecastOrchestrator',
    'DetailSource', 'BOTTOM_LINE_STATES',
]
