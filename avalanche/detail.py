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
Interface for the per-region bottom line lookup.

Bottom lines are published only on the forecast pages of Washington
regions. Implementations retrieve the page at a forecast's link and
extract the bottom line text and its issue date.
"""

from avalanche.models import BottomLine

# States whose forecast pages carry a bottom line
BOTTOM_LINE_STATES = ("WA",)


class DetailSource(object):
    """
    Base class for bottom line lookups.
    """

    def fetch(self, link: str) -> BottomLine:
        """
        Retrieve the bottom line published at a forecast link.

        Raises:
            ParseError: If the page cannot be retrieved or parsed
        """
        raise NotImplementedError("Subclass must implement fetch()")
