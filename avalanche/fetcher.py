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
Forecast fetcher for the avalanche.org map layer.

This module retrieves the current forecast for every region in the
United States and converts each GeoJSON feature into a ForecastEntry.
"""

import logging
from typing import Any, Dict, List

import httpx

from avalanche.errors import FetchError
from avalanche.models import DANGER_NAMES, ForecastEntry

# Configure logging
logger = logging.getLogger(__name__)

TEXT_PROPERTIES = (
    "name",
    "center",
    "link",
    "state",
    "travel_advice",
    "danger",
)

REQUIRED_PROPERTIES = TEXT_PROPERTIES + ("danger_level",)


class ForecastFetcher(object):
    """
    Retrieves forecasts from the avalanche.org map layer.

    Every call performs exactly one HTTP request. Retrying is left to
    the caller.
    """

    def __init__(self, url: str, session: httpx.Client) -> None:
        """
        Initialize the fetcher.

        Args:
            url: Map layer URL returning a GeoJSON feature collection
            session: HTTP client used for the request
        """
        self.url = url
        self.session = session

    def fetch(self) -> List[ForecastEntry]:
        """
        Fetch all forecasts.

        Returns:
            List of forecast entries in the order the source lists them

        Raises:
            FetchError: If the source is unreachable or the payload is malformed
        """
        headers = {"User-Agent": "AvalancheForecastAlexaSkill/1.0",
                   "Accept": "application/json"}
        try:
            r = self.session.get(self.url, headers=headers)
        except httpx.HTTPError as e:
            raise FetchError(f"Unable to reach {self.url}: {e}") from e

        if not r.is_success:
            raise FetchError(f"HTTPSTATUS: {r.status_code} from {self.url}")

        try:
            data = r.json()
        except ValueError as e:
            raise FetchError(f"Response from {self.url} is not JSON") from e

        features = data.get("features") if isinstance(data, dict) else None
        if not isinstance(features, list):
            raise FetchError("Response has no features list")

        entries = [self.to_entry(feature) for feature in features]
        logger.info("Fetched %d forecasts", len(entries))
        return entries

    @staticmethod
    def to_entry(feature: Dict[str, Any]) -> ForecastEntry:
        """
        Convert one GeoJSON feature to a forecast entry.

        Raises:
            FetchError: If a required property is missing or has the wrong type
        """
        props = feature.get("properties") if isinstance(feature, dict) else None
        if not isinstance(props, dict):
            raise FetchError("Feature has no properties")

        missing = [key for key in REQUIRED_PROPERTIES if key not in props]
        if missing:
            raise FetchError("Feature %r is missing %s"
                             % (props.get("name"), ", ".join(missing)))

        wrong = [key for key in TEXT_PROPERTIES if not isinstance(props[key], str)]
        if wrong:
            raise FetchError("Feature %r has non-text %s"
                             % (props.get("name"), ", ".join(wrong)))

        try:
            level = int(props["danger_level"])
        except (TypeError, ValueError) as e:
            raise FetchError("Feature %r has invalid danger_level %r"
                             % (props["name"], props["danger_level"])) from e

        if level not in DANGER_NAMES:
            raise FetchError("Feature %r has unknown danger_level %d" % (props["name"], level))

        return ForecastEntry(
            name=props["name"],
            center=props["center"],
            link=props["link"],
            state=props["state"],
            travel_advice=props["travel_advice"],
            danger=props["danger"],
            danger_level=level,
        )
