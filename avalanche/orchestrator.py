#!/usr/bin/python3

# =============================================================================
#
# Copyright 2017 by Leland Lucius
#
# Released under the GNU Affero GPL
# See: https://github.com/lllucius/climacast/blob/master/LICENSE
#
# =============================================================================

"""
Resolves region and state requests against the cached forecasts.
"""

import logging
from datetime import datetime
from typing import List, Union

from avalanche.errors import FetchError, NotFoundError, UpstreamError
from avalanche.models import (CacheSnapshot, ForecastEntry, RegionRequest,
                              StateRequest)

# Configure logging
logger = logging.getLogger(__name__)


class ForecastOrchestrator(object):
    """
    Looks up forecasts for a request, refreshing the cache when needed.
    """

    def __init__(self, cache_store) -> None:
        """
        Args:
            cache_store: ForecastCacheStore providing get_or_refresh()
        """
        self.cache_store = cache_store

    def _snapshot(self, now: datetime) -> CacheSnapshot:
        try:
            return self.cache_store.get_or_refresh(now)
        except FetchError as e:
            logger.error("No cached forecasts and fetch failed: %s", e)
            raise UpstreamError(str(e)) from e

    def resolve_region(self, region_key: str, now: datetime) -> ForecastEntry:
        """
        Return the forecast for a normalized region key.

        Raises:
            NotFoundError: If the region is not in the snapshot
            UpstreamError: If there is no snapshot and the fetch failed
        """
        snapshot = self._snapshot(now)
        forecast = snapshot.region_index.get(region_key)
        if forecast is None:
            raise NotFoundError("region", region_key)
        return forecast

    def resolve_state(self, state_code: str, now: datetime) -> List[ForecastEntry]:
        """
        Return all forecasts for a state code.

        Raises:
            NotFoundError: If the state is not in the snapshot
            UpstreamError: If there is no snapshot and the fetch failed
        """
        snapshot = self._snapshot(now)
        forecasts = snapshot.state_index.get(state_code)
        if not forecasts:
            raise NotFoundError("state", state_code)
        return list(forecasts)

    def resolve(self, request: Union[RegionRequest, StateRequest],
                now: datetime) -> Union[ForecastEntry, List[ForecastEntry]]:
        """Dispatch a request variant to the matching lookup."""
        if isinstance(request, RegionRequest):
            return self.resolve_region(request.key, now)
        if isinstance(request, StateRequest):
            return self.resolve_state(request.code, now)
        raise TypeError("Unsupported request %r" % (request,))
