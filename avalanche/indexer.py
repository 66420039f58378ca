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
Builds the region and state indexes from a flat list of forecasts.
"""

import re
from typing import Iterable, Tuple

from avalanche.models import ForecastEntry, RegionIndex, StateIndex

WHITESPACE_RE = re.compile(r"\s", re.UNICODE)


def normalize_region_key(name: str) -> str:
    """
    Remove all whitespace from a region name.

    The result matches the slot value ids of the region slot type,
    e.g. "Mount Shasta" becomes "MountShasta".
    """
    return WHITESPACE_RE.sub("", name)


def index(entries: Iterable[ForecastEntry]) -> Tuple[RegionIndex, StateIndex]:
    """
    Index forecasts by normalized region key and by state.

    Later entries replace earlier ones that normalize to the same region
    key. States keep their first-seen order and each state lists its
    regions in source order.

    Raises:
        ValueError: If an item is not a ForecastEntry
    """
    by_region: RegionIndex = {}
    by_state: StateIndex = {}
    for entry in entries:
        if not isinstance(entry, ForecastEntry):
            raise ValueError("Cannot index %r" % (entry,))
        by_region[normalize_region_key(entry.name)] = entry
        by_state.setdefault(entry.state, []).append(entry)

    return by_region, by_state
