"""
Shared test setup.
"""
import os

# Set required environment variables before importing
os.environ["app_id"] = "amzn1.ask.skill.test"
os.environ["AWS_DEFAULT_REGION"] = "us-east-1"
os.environ["AWS_ACCESS_KEY_ID"] = "test"
os.environ["AWS_SECRET_ACCESS_KEY"] = "test"
os.environ["DYNAMODB_PERSISTENCE_TABLE_NAME"] = "test-table"

import pytest  # noqa: E402

from avalanche.models import ForecastEntry  # noqa: E402


def entry(name, level=1, state="WA", advice=None, danger=None):
    """Build a forecast entry with sensible defaults."""
    return ForecastEntry(
        name=name,
        center="Test Avalanche Center",
        link="https://example.org/forecasts/%s" % name.replace(" ", "-").lower(),
        state=state,
        travel_advice=advice if advice is not None else "Advice for %s." % name,
        danger=danger if danger is not None else "level %d" % level,
        danger_level=level,
    )


def feature(name, level=1, state="WA", **overrides):
    """Build a map layer feature like the ones avalanche.org returns."""
    props = {
        "name": name,
        "center": "Test Avalanche Center",
        "link": "https://example.org/forecasts/%s" % name.replace(" ", "-").lower(),
        "state": state,
        "travel_advice": "Advice for %s." % name,
        "danger": "level %d" % level,
        "danger_level": level,
        "off_season": False,
    }
    props.update(overrides)
    return {"type": "Feature", "id": name, "properties": props}


class MemoryStore(object):
    """Key-value store kept in a dict, counting reads and writes."""

    def __init__(self):
        self.items = {}
        self.gets = 0
        self.puts = 0

    def get(self, key):
        self.gets += 1
        return self.items.get(key)

    def put(self, key, data):
        self.puts += 1
        self.items[key] = data


@pytest.fixture
def memory_store():
    return MemoryStore()
