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
State summaries.

Picks the lowest danger tier present among a state's regions and decides
which regions to name and whose travel advice to read.
"""

from typing import Dict, List, Sequence

from avalanche.models import (CONSIDERABLE, EXTREME, HIGH, LOW, MODERATE,
                              NO_RATING, ForecastEntry, SummaryPlan)

TIERS = (LOW, MODERATE, CONSIDERABLE, HIGH)


def group_by_level(forecasts: Sequence[ForecastEntry]) -> Dict[int, List[ForecastEntry]]:
    """Group forecasts by danger level, keeping input order within a level."""
    groups: Dict[int, List[ForecastEntry]] = {}
    for forecast in forecasts:
        groups.setdefault(forecast.danger_level, []).append(forecast)
    return groups


def summarize(forecasts: Sequence[ForecastEntry]) -> SummaryPlan:
    """
    Build the summary plan for all forecasts of one state.

    Args:
        forecasts: The state's forecasts in source order

    Returns:
        SummaryPlan for the lowest tier with at least one region

    Raises:
        ValueError: If forecasts is empty
    """
    if not forecasts:
        raise ValueError("Cannot summarize an empty list of forecasts")

    groups = group_by_level(forecasts)

    if len(groups.get(NO_RATING, [])) == len(forecasts):
        return SummaryPlan(tier=NO_RATING,
                           sample_advice=forecasts[0].travel_advice,
                           all_no_rating=True)

    for tier in TIERS:
        members = groups.get(tier)
        if not members:
            continue

        # With three or more regions the advice comes from the last one
        sample = members[0] if len(members) < 3 else members[-1]
        return SummaryPlan(tier=tier,
                           named_regions=tuple(m.name for m in members),
                           sample_advice=sample.travel_advice)

    extreme = groups.get(EXTREME, [])
    return SummaryPlan(tier=EXTREME,
                       named_regions=tuple(m.name for m in extreme),
                       sample_advice=extreme[0].travel_advice if extreme else None)


def join_names(names: Sequence[str]) -> str:
    """
    Join region names for speech: "A", "A and B", "A, B and C".
    """
    if not names:
        return ""
    if len(names) == 1:
        return names[0]
    return "%s and %s" % (", ".join(names[:-1]), names[-1])
