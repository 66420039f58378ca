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
Data classes shared by the forecast fetcher, indexer, cache and summarizer.
"""

from dataclasses import asdict, dataclass
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple

# Danger levels as published by avalanche.org
NO_RATING = -1
LOW = 1
MODERATE = 2
CONSIDERABLE = 3
HIGH = 4
EXTREME = 5

DANGER_NAMES = {
    NO_RATING: "no rating",
    LOW: "low",
    MODERATE: "moderate",
    CONSIDERABLE: "considerable",
    HIGH: "high",
    EXTREME: "extreme",
}


@dataclass(frozen=True)
class ForecastEntry:
    """A single forecast region as published by the forecast source."""

    name: str
    center: str
    link: str
    state: str
    travel_advice: str
    danger: str
    danger_level: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ForecastEntry":
        return cls(
            name=data["name"],
            center=data["center"],
            link=data["link"],
            state=data["state"],
            travel_advice=data["travel_advice"],
            danger=data["danger"],
            danger_level=int(data["danger_level"]),
        )


RegionIndex = Dict[str, ForecastEntry]
StateIndex = Dict[str, List[ForecastEntry]]


@dataclass(frozen=True)
class CacheSnapshot:
    """
    One fetched-and-indexed view of all forecasts.

    A snapshot is only ever replaced as a whole, never updated in place.
    """

    region_index: RegionIndex
    state_index: StateIndex
    fetched_at: datetime


@dataclass(frozen=True)
class SummaryPlan:
    """Which regions a state summary names, at which tier, with which advice."""

    tier: int
    named_regions: Tuple[str, ...] = ()
    sample_advice: Optional[str] = None
    all_no_rating: bool = False


@dataclass(frozen=True)
class RegionRequest:
    """A request for a single region, keyed by its normalized name."""

    key: str
    name: str


@dataclass(frozen=True)
class StateRequest:
    """A request for every region of a state, keyed by its 2-letter code."""

    code: str
    name: str


@dataclass(frozen=True)
class BottomLine:
    """Bottom line text of a region forecast and the date it was issued."""

    text: str
    issued: date
