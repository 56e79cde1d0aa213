# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# - fresh_config (autouse)  → Drop cached config/templates around each test
# - sample_properties       → One feature's properties
# - metadata_fields         → Field declarations matching sample_properties
# - payload                 → Metadata + one feature
# - collected_warnings      → List sink for discrepancy messages
# ==============================================

import pytest

from featurefields.config import reset_config
from featurefields.fields.template_store import reset_template_store


@pytest.fixture(autouse=True)
def fresh_config():
    """Each test reads configuration and templates from scratch."""
    reset_config()
    reset_template_store()
    yield
    reset_config()
    reset_template_store()


@pytest.fixture
def sample_properties():
    """Properties of a typical point feature."""
    return {
        "name": "Portland",
        "population": 652503,
        "density": 1802.4,
        "founded": "1851-02-08",
        "updated": 1718236800000,
    }


@pytest.fixture
def metadata_fields():
    """Metadata declarations for sample_properties."""
    return [
        {"name": "name", "type": "String", "alias": "City Name"},
        {"name": "population", "type": "Integer"},
        {"name": "density", "type": "Double"},
        {"name": "founded", "type": "Date"},
        {"name": "updated", "type": "Date"},
    ]


@pytest.fixture
def payload(metadata_fields, sample_properties):
    """Metadata-driven payload with one feature."""
    return {
        "metadata": {"fields": metadata_fields},
        "features": [{"type": "Feature", "properties": sample_properties}],
    }


@pytest.fixture
def collected_warnings():
    """Sink that keeps warnings instead of printing them."""
    return []
