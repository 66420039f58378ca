#!/usr/bin/env python3
"""
Tests for LocalJsonCacheHandler and the forecast cache on top of it.
Uses local JSON files without requiring DynamoDB.
"""
import os
from datetime import datetime, timedelta, timezone
from unittest.mock import Mock

from storage.forecast_store import ForecastCacheStore
from storage.local_handlers import LocalJsonCacheHandler
from conftest import entry


def test_local_cache_handler(tmp_path):
    """Test LocalJsonCacheHandler get and put"""
    cache_dir = str(tmp_path / "cache")
    handler = LocalJsonCacheHandler(cache_dir)
    assert os.path.isdir(cache_dir)

    assert handler.get("forecasts") is None

    handler.put("forecasts", b'{"first": true}')
    handler.put("forecasts", b'{"second": true}')
    assert handler.get("forecasts") == b'{"second": true}'

    # Only the final file remains, no temporary files
    assert os.listdir(cache_dir) == ["forecasts.json"]


def test_local_cache_handler_sanitizes_keys(tmp_path):
    handler = LocalJsonCacheHandler(str(tmp_path))
    handler.put("forecasts/v1#us", b"{}")
    assert handler.get("forecasts/v1#us") == b"{}"
    assert os.listdir(str(tmp_path)) == ["forecasts_v1_us.json"]


def test_forecast_cache_survives_new_handler(tmp_path):
    """A snapshot written by one container is read by the next"""
    now = datetime(2024, 1, 10, 6, 0, tzinfo=timezone.utc)
    fetcher = Mock()
    fetcher.fetch.return_value = [entry("Stevens Pass"), entry("Mount Hood", state="OR")]

    first = ForecastCacheStore(LocalJsonCacheHandler(str(tmp_path)), fetcher)
    written = first.get_or_refresh(now)

    second = ForecastCacheStore(LocalJsonCacheHandler(str(tmp_path)), fetcher)
    read = second.get_or_refresh(now + timedelta(hours=2))

    assert read == written
    assert fetcher.fetch.call_count == 1
