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
Spoken answers for region, state and bottom line requests.
"""

from datetime import date

from avalanche.models import (CONSIDERABLE, HIGH, LOW, MODERATE, NO_RATING,
                              BottomLine, ForecastEntry, SummaryPlan)
from avalanche.summarizer import join_names
from utils.constants import BREAK, MONTH_DAYS, MONTH_NAMES


def date_to_words(when: date) -> str:
    """Speak a date as "march fifth 2024"."""
    return "%s %s %d" % (MONTH_NAMES[when.month - 1], MONTH_DAYS[when.day - 1], when.year)


def region_text(forecast: ForecastEntry, region_name: str) -> str:
    """Danger rating and travel advice for one region."""
    if forecast.danger_level == NO_RATING:
        return ("There is currently no avalanche danger rating for %s. "
                "General travel advice is to %s" % (region_name, forecast.travel_advice))
    return "The avalanche danger for %s is %s. %s" % (
        region_name, forecast.danger, forecast.travel_advice)


def bottom_line_text(forecast: ForecastEntry, region_name: str, bottom_line: BottomLine) -> str:
    """Danger rating and bottom line for one region."""
    issued = date_to_words(bottom_line.issued)
    if forecast.danger_level == NO_RATING:
        return ("There is currently no avalanche danger rating for %s, but the bottom "
                "line, issued on %s, is as follows: %s" % (region_name, issued, bottom_line.text))
    return ("The avalanche danger for %s is %s, and the bottom line, issued on %s, "
            "is as follows: %s" % (region_name, forecast.danger, issued, bottom_line.text))


def state_text(state_name: str, plan: SummaryPlan) -> str:
    """
    Summary of a state's forecasts.

    The wording depends on the reported tier and on whether one, two or
    more regions are named.
    """
    names = plan.named_regions
    count = len(names)
    regions = join_names(names)
    advice = plan.sample_advice

    if plan.all_no_rating:
        return ("There is currently no avalanche danger rating for the state of %s. %s"
                "General travel advice is to %s" % (state_name, BREAK, advice))

    if plan.tier == LOW:
        if count == 1:
            return ('The <emphasis level="moderate">only</emphasis> region with low avalanche '
                    "danger rating in the state of %s is %s. %s %s Be careful if you are "
                    "headed to the other regions." % (state_name, regions, BREAK, advice))
        if count == 2:
            return ("Regions %s have low avalanche danger rating in the state of %s.%s %s "
                    "Be careful if you are headed to the other regions."
                    % (regions, state_name, BREAK, advice))
        return ("Several regions have low avalanche danger rating in %s. These are: %s.%s "
                "%s %s Happy shredding!" % (state_name, regions, BREAK, advice, BREAK))

    if plan.tier == MODERATE:
        if count == 1:
            return ("Currently in %s, there are no regions with low avalanche danger rating. "
                    "However, %s has a rating of moderate.%s %s"
                    % (state_name, regions, BREAK, advice))
        if count == 2:
            return ("Currently in %s, there are no regions with low avalanche danger rating, "
                    "but regions %s have an avalanche danger rating of moderate. %s %s"
                    % (state_name, regions, BREAK, advice))
        return ("No regions with low avalanche danger rating in %s. But several regions such "
                "as %s have a moderate avalanche danger rating. %s %s"
                % (state_name, regions, BREAK, advice))

    if plan.tier == CONSIDERABLE:
        if count == 1:
            return ("Currently in %s, there are no regions with low or moderate avalanche "
                    "danger rating. However, %s has a rating of considerable.%s %s "
                    "Be safe out there!" % (state_name, regions, BREAK, advice))
        if count == 2:
            return ("Currently in %s, there are no regions with low or moderate avalanche "
                    "danger rating, but regions %s have an avalanche danger rating of "
                    "considerable. %s %s Be safe out there!"
                    % (state_name, regions, BREAK, advice))
        return ("No regions with low or moderate avalanche danger rating in %s. But several "
                "regions such as %s have a considerable avalanche danger rating. %s %s "
                "Stay safe!" % (state_name, regions, BREAK, advice))

    if plan.tier == HIGH:
        return ('There are <emphasis level="moderate">no regions</emphasis> with low, '
                "moderate or considerable avalanche danger rating in the state of %s.%s "
                "%s But hey, you can probably ski inbounds!" % (state_name, BREAK, advice))

    if advice:
        return ("The avalanche danger rating in regions of %s is extreme. %s %s "
                "I'm staying cozy at home, you should too!" % (state_name, BREAK, advice))
    return ("The avalanche danger rating in regions of %s is extreme. %s "
            "I'm staying cozy at home, you should too!" % (state_name, BREAK))
