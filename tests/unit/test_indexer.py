#!/usr/bin/env python3
"""
Unit tests for the region and state indexes.
"""
import pytest

from avalanche.indexer import index, normalize_region_key
from conftest import entry


def test_normalize_region_key_removes_whitespace():
    assert normalize_region_key("Mount Shasta") == "MountShasta"
    assert normalize_region_key("  Stevens\tPass \n") == "StevensPass"
    # Non-breaking and ideographic spaces are whitespace too
    assert normalize_region_key("Mount\u00a0Hood\u3000South") == "MountHoodSouth"


def test_index_by_region_and_state():
    entries = [
        entry("Mount Shasta", state="CA"),
        entry("Stevens Pass", state="WA"),
        entry("Snoqualmie Pass", state="WA"),
        entry("Eastern Sierra", state="CA"),
    ]
    by_region, by_state = index(entries)

    assert by_region["MountShasta"] is entries[0]
    assert by_region["SnoqualmiePass"] is entries[2]
    assert list(by_state) == ["CA", "WA"]
    assert [e.name for e in by_state["CA"]] == ["Mount Shasta", "Eastern Sierra"]
    assert [e.name for e in by_state["WA"]] == ["Stevens Pass", "Snoqualmie Pass"]


def test_every_state_entry_is_in_region_index():
    entries = [entry("A %d" % i, state=s) for i, s in enumerate(["UT", "MT", "UT", "ID"])]
    by_region, by_state = index(entries)

    for forecasts in by_state.values():
        for forecast in forecasts:
            assert by_region[normalize_region_key(forecast.name)] == forecast


def test_state_key_preserves_case():
    _, by_state = index([entry("A", state="wa"), entry("B", state="WA")])
    assert set(by_state) == {"wa", "WA"}


def test_duplicate_key_last_write_wins():
    first = entry("Mount Hood", level=2)
    second = entry("MountHood", level=3)
    by_region, by_state = index([first, second])

    assert by_region == {"MountHood": second}
    assert by_state["WA"] == [first, second]


def test_index_is_deterministic():
    entries = [entry("A", state="UT"), entry("B", state="CO"), entry("C", state="UT")]
    assert index(entries) == index(list(entries))


def test_index_empty():
    assert index([]) == ({}, {})


def test_index_rejects_malformed_items():
    with pytest.raises(ValueError):
        index([entry("A"), {"name": "B"}])
