"""Feature-level fixtures for translation tests.

Sample dictionaries are authored as YAML, the way translation catalogs are
usually stored, and parsed into plain dicts.
"""

import pytest
import yaml

SAMPLE_CATALOG = """
en:
  incident:
    created: "Incident %{incident_id} created by %{user}"
    resolved: "Incident resolved"
    count:
      zero: "No incidents"
      one: "One incident"
      other: "%{count} incidents"
  role:
    invalid_name: "Role names must start with 'role_'"
    members:
      other: "%{count} members in %{role}"
  greeting: "Hello %{name}, welcome back %{name}"
  retries: 3
fr:
  incident:
    resolved: "Incident résolu"
"""


@pytest.fixture
def catalog():
    """Nested translation dictionary with English and French entries."""
    return yaml.safe_load(SAMPLE_CATALOG)


@pytest.fixture
def fallback_catalog():
    """Smaller dictionary used as a fallback source."""
    return yaml.safe_load(
        """
incident:
  escalated: "Incident %{incident_id} escalated"
common:
  ok: "OK"
"""
    )
