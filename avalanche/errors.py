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
Exception types raised by the forecast cache and aggregation layer.
"""


class AvalancheError(Exception):
    """Base class for all avalanche forecast errors."""


class FetchError(AvalancheError):
    """The forecast source was unreachable or returned a malformed payload."""


class ParseError(AvalancheError):
    """A region detail page could not be parsed."""


class NotFoundError(AvalancheError):
    """The requested region or state is absent from a valid index."""

    def __init__(self, kind: str, key: str) -> None:
        super().__init__(f"No {kind} forecast for {key!r}")
        self.kind = kind
        self.key = key


class StoreError(AvalancheError):
    """The persistent store could not be read or written."""


class UpstreamError(AvalancheError):
    """No cached forecasts exist and the forecast source failed."""
