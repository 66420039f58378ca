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
Forecast cache for the Avalanche Forecast skill.

The whole set of forecasts is cached as a single snapshot under one key
of a key-value store (DynamoDB in production, local JSON files when
testing). A snapshot is considered fresh for ten hours after it was
fetched; expired snapshots are refreshed lazily by the next request.
"""

import json
import logging
from datetime import datetime, timedelta
from typing import Optional

from dateutil import parser, tz

from avalanche.errors import FetchError
from avalanche.indexer import index
from avalanche.models import CacheSnapshot, ForecastEntry

# Configure logging
logger = logging.getLogger(__name__)

DEFAULT_TTL = timedelta(hours=10)


def _as_utc(when: datetime) -> datetime:
    """Treat naive timestamps as UTC."""
    if when.tzinfo is None:
        return when.replace(tzinfo=tz.UTC)
    return when


def encode_snapshot(snapshot: CacheSnapshot) -> bytes:
    """Serialize a snapshot to UTF-8 JSON."""
    data = {
        "fetched_at": _as_utc(snapshot.fetched_at).isoformat(),
        "forecast_by_region": {key: entry.to_dict()
                               for key, entry in snapshot.region_index.items()},
        "forecasts_by_state": {state: [entry.to_dict() for entry in entries]
                               for state, entries in snapshot.state_index.items()},
    }
    return json.dumps(data).encode("utf-8")


def decode_snapshot(blob: bytes) -> CacheSnapshot:
    """
    Deserialize a snapshot written by encode_snapshot().

    Raises:
        ValueError: If the blob is not a valid snapshot
    """
    try:
        data = json.loads(blob.decode("utf-8"))
        return CacheSnapshot(
            region_index={key: ForecastEntry.from_dict(entry)
                          for key, entry in data["forecast_by_region"].items()},
            state_index={state: [ForecastEntry.from_dict(entry) for entry in entries]
                         for state, entries in data["forecasts_by_state"].items()},
            fetched_at=parser.isoparse(data["fetched_at"]),
        )
    except (KeyError, TypeError, AttributeError, UnicodeDecodeError) as e:
        raise ValueError(f"Malformed snapshot: {e}") from e


class ForecastCacheStore(object):
    """
    Get-or-refresh cache of the forecast snapshot.

    Every refresh fetches all forecasts, indexes them and replaces the
    stored snapshot with a single put. Concurrent refreshes are harmless;
    the last writer wins.
    """

    def __init__(self, store, fetcher, key: str = "forecasts",
                 ttl: timedelta = DEFAULT_TTL, serve_stale: bool = True) -> None:
        """
        Args:
            store: Key-value store with get(key) and put(key, data)
            fetcher: ForecastFetcher used on refresh
            key: Key the snapshot is stored under
            ttl: How long a snapshot stays fresh
            serve_stale: Serve an expired snapshot when a refresh fails
        """
        self.store = store
        self.fetcher = fetcher
        self.key = key
        self.ttl = ttl
        self.serve_stale = serve_stale

    def get_snapshot(self) -> Optional[CacheSnapshot]:
        """
        Read the stored snapshot.

        Returns:
            The snapshot, or None if none was stored or it cannot be decoded

        Raises:
            StoreError: If the store cannot be read
        """
        blob = self.store.get(self.key)
        if blob is None:
            return None

        try:
            return decode_snapshot(blob)
        except ValueError as e:
            logger.warning("Ignoring cached snapshot %s: %s", self.key, e)
            return None

    def is_fresh(self, snapshot: CacheSnapshot, now: datetime) -> bool:
        """
        Return True if the snapshot was fetched less than the TTL ago.

        The difference is taken in either direction so a clock running
        behind the one that stamped the snapshot is tolerated.
        """
        age = _as_utc(now) - _as_utc(snapshot.fetched_at)
        return abs(age) < self.ttl

    def refresh(self, now: datetime) -> CacheSnapshot:
        """
        Fetch, index and store a new snapshot.

        Raises:
            FetchError: If the fetch failed; the stored snapshot is untouched
            StoreError: If the new snapshot cannot be written
        """
        entries = self.fetcher.fetch()
        region_index, state_index = index(entries)
        snapshot = CacheSnapshot(region_index=region_index,
                                 state_index=state_index,
                                 fetched_at=_as_utc(now))
        self.store.put(self.key, encode_snapshot(snapshot))
        logger.info("Cached %d forecasts for %d states",
                    len(region_index), len(state_index))
        return snapshot

    def get_or_refresh(self, now: datetime) -> CacheSnapshot:
        """
        Return the stored snapshot if fresh, otherwise refresh it.

        If the refresh fails and an expired snapshot exists, the expired
        snapshot is returned when serve_stale is enabled.

        Raises:
            FetchError: If there is no usable snapshot and the fetch failed
            StoreError: If the store cannot be read or written
        """
        snapshot = self.get_snapshot()
        if snapshot is not None and self.is_fresh(snapshot, now):
            logger.info("Forecasts are cached, fetched at %s", snapshot.fetched_at)
            return snapshot

        try:
            return self.refresh(now)
        except FetchError as e:
            if snapshot is None or not self.serve_stale:
                raise
            logger.warning("Refresh failed, serving forecasts fetched at %s: %s",
                           snapshot.fetched_at, e)
            return snapshot
