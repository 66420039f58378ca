#!/usr/bin/env python3
"""
Unit tests for ForecastOrchestrator.
"""
from datetime import datetime, timedelta, timezone
from unittest.mock import Mock

import pytest

from avalanche.errors import FetchError, NotFoundError, UpstreamError
from avalanche.models import RegionRequest, StateRequest
from avalanche.orchestrator import ForecastOrchestrator
from storage.forecast_store import ForecastCacheStore
from conftest import entry

NOW = datetime(2024, 2, 1, 8, 30, tzinfo=timezone.utc)

ENTRIES = [
    entry("Mount Shasta", level=2, state="CA"),
    entry("Stevens Pass", level=1, state="WA"),
    entry("Snoqualmie Pass", level=3, state="WA"),
]


def make_orchestrator(memory_store, entries=ENTRIES):
    fetcher = Mock()
    fetcher.fetch.return_value = entries
    return ForecastOrchestrator(ForecastCacheStore(memory_store, fetcher)), fetcher


def test_resolve_region(memory_store):
    orchestrator, _ = make_orchestrator(memory_store)
    assert orchestrator.resolve_region("MountShasta", NOW) == ENTRIES[0]


def test_resolve_state_keeps_source_order(memory_store):
    orchestrator, _ = make_orchestrator(memory_store)
    forecasts = orchestrator.resolve_state("WA", NOW)
    assert [f.name for f in forecasts] == ["Stevens Pass", "Snoqualmie Pass"]


def test_resolve_dispatches_on_request_type(memory_store):
    orchestrator, fetcher = make_orchestrator(memory_store)

    assert orchestrator.resolve(RegionRequest("StevensPass", "stevens pass"), NOW) == ENTRIES[1]
    assert orchestrator.resolve(StateRequest("CA", "California"), NOW) == [ENTRIES[0]]
    assert fetcher.fetch.call_count == 1

    with pytest.raises(TypeError):
        orchestrator.resolve("WA", NOW)


def test_unknown_region_and_state(memory_store):
    orchestrator, _ = make_orchestrator(memory_store)

    with pytest.raises(NotFoundError) as e:
        orchestrator.resolve_region("Atlantis", NOW)
    assert e.value.kind == "region"
    assert e.value.key == "Atlantis"

    with pytest.raises(NotFoundError):
        orchestrator.resolve_state("FL", NOW)


def test_fetch_error_without_cache_is_upstream_error(memory_store):
    orchestrator, fetcher = make_orchestrator(memory_store)
    fetcher.fetch.side_effect = FetchError("timeout")

    with pytest.raises(UpstreamError):
        orchestrator.resolve_region("MountShasta", NOW)


def test_fetch_error_with_stale_cache_serves_it(memory_store):
    orchestrator, fetcher = make_orchestrator(memory_store)
    orchestrator.resolve_state("CA", NOW)

    fetcher.fetch.side_effect = FetchError("timeout")
    later = NOW + timedelta(days=1)
    assert orchestrator.resolve_region("MountShasta", later) == ENTRIES[0]
    assert fetcher.fetch.call_count == 2
